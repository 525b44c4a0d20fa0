"""Mask and search filtering over a catalog."""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from utils.catalog import FileEntry


@dataclass(frozen=True)
class FilterCriteria:
    """Current directory mask and filename search.

    Both checks are plain case-sensitive substring tests.
    """

    mask_enabled: bool = False
    mask_substring: Optional[str] = None
    search_substring: str = ""


def matches_mask(entry: FileEntry, criteria: FilterCriteria) -> bool:
    """Return True if the entry's directory passes the directory mask."""
    if not criteria.mask_enabled or not criteria.mask_substring:
        return True
    return criteria.mask_substring in entry.directory


def matches_search(entry: FileEntry, criteria: FilterCriteria) -> bool:
    """Return True if the entry's filename contains the search text."""
    if not criteria.search_substring:
        return True
    return criteria.search_substring in entry.filename


def filter_entries(
    catalog: Iterable[FileEntry], criteria: FilterCriteria
) -> List[FileEntry]:
    """Return the entries passing both the mask and the search, in catalog order."""
    return [
        entry
        for entry in catalog
        if matches_mask(entry, criteria) and matches_search(entry, criteria)
    ]
