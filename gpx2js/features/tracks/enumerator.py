"""
Input Enumerator

Finds the track files to convert and applies the skip list.
"""

import logging
from pathlib import Path
from typing import FrozenSet, List, Optional, Union

from gpx2js.errors import InputNotFoundError, SkipFileUnreadableError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_skip_set(skip_file: Optional[PathLike], comment_prefix: str = "#") -> FrozenSet[str]:
    """
    Load file names to exclude.

    One name per line. Blank lines and lines starting with
    comment_prefix are ignored.

    Args:
        skip_file: Path to the skip list, or None for no skip list
        comment_prefix: Marker for comment lines

    Returns:
        Frozen set of file names (no directory part)

    Raises:
        SkipFileUnreadableError: If skip_file is given but unreadable
    """
    if skip_file is None:
        return frozenset()

    path = Path(skip_file)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SkipFileUnreadableError(f"Cannot read skip list {path}: {e}") from e

    names = set()
    for line in text.splitlines():
        entry = line.strip()
        if not entry:
            continue
        if comment_prefix and entry.startswith(comment_prefix):
            continue
        names.add(entry)

    logger.info(f"Loaded {len(names)} skip entries from {path}")
    return frozenset(names)


class InputEnumerator:
    """Lists convertible files in an input directory."""

    def __init__(self, extension: str = ".gpx", skip: FrozenSet[str] = frozenset()):
        self.extension = extension.lower()
        self.skip = skip

    def enumerate(self, input_dir: PathLike) -> List[Path]:
        """
        List candidate files, sorted by name.

        Matching is on the file name only. Subdirectories and files with
        another extension are ignored.

        Raises:
            InputNotFoundError: If input_dir is missing or not a directory
        """
        directory = Path(input_dir)
        if not directory.is_dir():
            raise InputNotFoundError(f"Input directory not found: {directory}")

        paths: List[Path] = []
        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            if not entry.is_file():
                continue
            if entry.suffix.lower() != self.extension:
                logger.debug(f"Ignoring {entry.name}: not a {self.extension} file")
                continue
            if entry.name in self.skip:
                logger.info(f"Skipping {entry.name}: listed in skip file")
                continue
            paths.append(entry)

        logger.info(f"Found {len(paths)} track files in {directory}")
        return paths
