"""File catalog: discovery of formattable source files."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

from loguru import logger

from utils.errors import DiscoveryError

DEFAULT_PATTERN = "*.cs"


@dataclass(frozen=True)
class FileEntry:
    """A discovered file and the modification time used to order it."""

    path: str
    mtime: float

    @property
    def filename(self) -> str:
        """Base name of the file."""
        return os.path.basename(self.path)

    @property
    def directory(self) -> str:
        """Path of the containing directory."""
        return os.path.dirname(self.path)


def build_catalog(root_dir: str, pattern: str = DEFAULT_PATTERN) -> List[FileEntry]:
    """Collect every file under ``root_dir`` matching ``pattern``.

    The result is ordered by modification time, most recent first. Files with
    the same modification time are ordered by path so repeated builds of an
    unchanged tree agree.

    Args:
        root_dir: Directory to search recursively.
        pattern: Glob pattern matched against file names.

    Returns:
        List[FileEntry]: The catalog snapshot.

    Raises:
        DiscoveryError: If ``root_dir`` does not exist or is not a directory.
    """
    root = Path(root_dir)
    if not root.is_dir():
        raise DiscoveryError(root_dir)

    entries = []
    try:
        for file_path in Path(os.path.abspath(root_dir)).rglob(pattern):
            if not file_path.is_file():
                continue
            entries.append(FileEntry(str(file_path), file_path.stat().st_mtime))
    except OSError as e:
        raise DiscoveryError(root_dir) from e

    entries.sort(key=lambda entry: entry.path)
    entries.sort(key=lambda entry: entry.mtime, reverse=True)
    logger.debug(f"Found {len(entries)} files matching {pattern} under {root_dir}")
    return entries
