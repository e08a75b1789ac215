"""
Main Entry Point for batch watermarking

This script runs the watermark pipeline from a source checkout:
1. Load configuration from YAML
2. Discover images in the input directory
3. Shrink the logo to fit each image and composite it at the center
4. Save the watermarked image and a one-page A4 PDF

Usage:
    python run.py --config configs/watermark.yaml
    python run.py --config my_config.yaml --images photos/ --no-pdf
"""

import sys
from pathlib import Path

# Add project paths
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from imagetor.cli import main


if __name__ == "__main__":
    sys.exit(main())
