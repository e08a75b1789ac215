"""Image file discovery."""

from __future__ import annotations
from typing import Iterable, List, Optional, Union
from pathlib import Path

from ..core.errors import ImageIOError


def find_images(
    directory: Union[str, Path],
    extensions: Optional[Iterable[str]] = None
) -> List[Path]:
    """
    List the regular files directly inside a directory.
    
    Subdirectories are skipped, not descended into.
    
    Args:
        directory: Directory to scan
        extensions: Optional suffixes to keep (case-insensitive, with or
            without the leading dot). None keeps every file.
    
    Returns:
        File paths sorted by name
    
    Raises:
        ImageIOError: If the directory does not exist or cannot be read
    """
    directory = Path(directory)
    
    if not directory.is_dir():
        raise ImageIOError("Image directory not found", path=directory)
    
    suffixes = None
    if extensions is not None:
        suffixes = {("." + ext.lstrip(".")).lower() for ext in extensions}
    
    try:
        entries = list(directory.iterdir())
    except OSError as e:
        raise ImageIOError(f"Failed to read directory: {e}", path=directory) from e
    
    paths = [
        p for p in entries
        if p.is_file() and (suffixes is None or p.suffix.lower() in suffixes)
    ]
    return sorted(paths, key=lambda p: p.name)
