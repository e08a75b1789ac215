"""
Command-line driver for batch watermarking.

Usage:
    imagetor --config configs/watermark.yaml
    imagetor --images photos/ --logo brand.png --output out/ --no-pdf
"""

from __future__ import annotations
from typing import List, Optional
import argparse
from pathlib import Path
from omegaconf import OmegaConf, DictConfig

from .pipeline.config import REQUIRED_SECTIONS, WatermarkConfig
from .pipeline.watermark import run_watermark_job


DEFAULT_CONFIG_PATH = "configs/watermark.yaml"


# ============================================================================
# Configuration & Setup
# ============================================================================

def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Watermark every image in a directory and export PDFs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  imagetor --config configs/watermark.yaml
  imagetor --images photos/ --logo brand.png --output out/
  imagetor --config configs/watermark.yaml --no-pdf --quality 90
        """
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help=f"Path to YAML configuration file (e.g. {DEFAULT_CONFIG_PATH})"
    )

    parser.add_argument(
        "--images", "-i",
        type=str,
        default=None,
        help="Override input image directory"
    )

    parser.add_argument(
        "--logo", "-l",
        type=str,
        default=None,
        help="Override watermark image path"
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Override output directory"
    )

    parser.add_argument(
        "--quality", "-q",
        type=int,
        default=None,
        help="Override JPEG quality (1-100)"
    )

    parser.add_argument(
        "--no-pdf",
        action="store_true",
        help="Skip PDF generation"
    )

    parser.add_argument(
        "--flip-vertical",
        action="store_true",
        help="Mirror results top-to-bottom"
    )

    parser.add_argument(
        "--flip-horizontal",
        action="store_true",
        help="Mirror results left-to-right"
    )

    return parser.parse_args(argv)


def load_config(config_path: Optional[str]) -> DictConfig:
    """
    Load and validate YAML configuration

    Args:
        config_path: Path to YAML config file, or None for built-in defaults

    Returns:
        OmegaConf configuration object
    """
    if config_path is None:
        return OmegaConf.create(WatermarkConfig().to_dict())

    if not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    config = OmegaConf.load(config_path)

    for section in REQUIRED_SECTIONS:
        if section not in config:
            raise ValueError(f"Missing required config section: {section}")

    print(f"[Config] Loaded configuration from: {config_path}")
    print(f"  - Images: {config.input.images_dir}")
    print(f"  - Logo: {config.input.logo_path}")
    print(f"  - Output: {config.output.dir}")

    return config


def apply_cli_overrides(config: DictConfig, args) -> DictConfig:
    """
    Apply command-line argument overrides to config

    Args:
        config: Base configuration
        args: Parsed command-line arguments

    Returns:
        Modified configuration
    """
    if args.images is not None:
        OmegaConf.update(config, "input.images_dir", args.images)
        print(f"[Config] Override images: {args.images}")

    if args.logo is not None:
        OmegaConf.update(config, "input.logo_path", args.logo)
        print(f"[Config] Override logo: {args.logo}")

    if args.output is not None:
        OmegaConf.update(config, "output.dir", args.output)
        print(f"[Config] Override output: {args.output}")

    if args.quality is not None:
        OmegaConf.update(config, "output.jpeg_quality", args.quality)
        print(f"[Config] Override quality: {args.quality}")

    if args.no_pdf:
        OmegaConf.update(config, "pdf.enabled", False)
        print("[Config] PDF generation disabled")

    if args.flip_vertical:
        OmegaConf.update(config, "transform.flip_vertical", True)

    if args.flip_horizontal:
        OmegaConf.update(config, "transform.flip_horizontal", True)

    return config


# ============================================================================
# Main
# ============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """Run a batch watermark job. Returns the process exit code."""
    args = parse_args(argv)

    config = load_config(args.config)
    config = apply_cli_overrides(config, args)
    job = WatermarkConfig.from_dict(OmegaConf.to_container(config, resolve=True))

    print(f"\n{'='*60}")
    print("Watermarking images")
    print(f"{'='*60}")

    report = run_watermark_job(job)

    if report.ok:
        print("All images processed successfully!")
        return 0

    print(f"[Warning] {len(report.failures)} image(s) failed:")
    for path, reason in report.failures:
        print(f"  - {path.name}: {reason}")
    return 1
