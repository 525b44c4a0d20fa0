"""Format session: the actions a front end drives against the core."""

import os
from typing import Callable, List, Optional

from loguru import logger

from utils.catalog import DEFAULT_PATTERN, FileEntry, build_catalog
from utils.errors import ConfigMissingError
from utils.executor import CommandExecutor, select_executor
from utils.filters import FilterCriteria, filter_entries
from utils.runner import CommandResult, run_all, run_one
from utils.settings import ASTYLE_PATH_KEY, DEFAULT_ASTYLE_PATH, SettingsStore

FORMAT_ALL_MESSAGE = "Format all files. Continue?"
FORMAT_FILTERED_MESSAGE = "Format all filtered files. Continue?"


def default_options_file(root: str) -> str:
    """Return where the options file lives for a given catalog root."""
    return os.path.join(root, "UniFmt", "Editor", "csfmt.txt")


class FormatSession:
    """Holds the current catalog, filter and executable path.

    Args:
        root: Directory the catalog is built from.
        options_file: astyle options file passed to every run.
        settings: Store the executable path is read from and written to.
        executor: Shell executor, defaults to the one for the host platform.
        confirm: Called with a message before a batch; a falsy answer aborts.
        refresh: Called once with the results after every batch.
    """

    def __init__(
        self,
        root: str,
        options_file: Optional[str],
        settings: SettingsStore,
        executor: Optional[CommandExecutor] = None,
        confirm: Optional[Callable[[str], bool]] = None,
        refresh: Optional[Callable[[List[CommandResult]], None]] = None,
        pattern: str = DEFAULT_PATTERN,
    ):
        self.root = root
        self.options_file = options_file or default_options_file(root)
        self.settings = settings
        self.executor = executor or select_executor()
        self.confirm = confirm or (lambda message: True)
        self.refresh = refresh
        self.pattern = pattern
        self.criteria = FilterCriteria()
        self.astyle_path = settings.get(ASTYLE_PATH_KEY, DEFAULT_ASTYLE_PATH)
        self.catalog: List[FileEntry] = []

    @property
    def executable(self) -> str:
        """The astyle path with a leading ``~`` expanded."""
        return os.path.expanduser(self.astyle_path)

    def refresh_catalog(self) -> List[FileEntry]:
        """Rebuild the catalog from the root directory.

        Raises:
            DiscoveryError: If the root directory does not exist.
        """
        self.catalog = build_catalog(self.root, self.pattern)
        return self.catalog

    def filtered(self) -> List[FileEntry]:
        """Return the catalog entries passing the current criteria."""
        return filter_entries(self.catalog, self.criteria)

    def update_mask(self, enabled: bool, text: Optional[str]) -> FilterCriteria:
        """Replace the directory mask, keeping the search text."""
        self.criteria = FilterCriteria(enabled, text, self.criteria.search_substring)
        return self.criteria

    def update_search(self, text: Optional[str]) -> FilterCriteria:
        """Replace the search text, keeping the directory mask."""
        self.criteria = FilterCriteria(
            self.criteria.mask_enabled, self.criteria.mask_substring, text or ""
        )
        return self.criteria

    def update_path(self, path: str) -> bool:
        """Set the astyle executable path, persisting it if it changed.

        Returns:
            bool: True if the stored value was updated.
        """
        if path == self.astyle_path:
            return False
        self.astyle_path = path
        self.settings.set(ASTYLE_PATH_KEY, path)
        logger.debug(f"astyle path set to {path}")
        return True

    def check_options_file(self) -> None:
        """Raise ConfigMissingError if the options file is missing."""
        if not os.path.isfile(self.options_file):
            raise ConfigMissingError(self.options_file)

    def format_all(self, message: str = FORMAT_ALL_MESSAGE) -> List[CommandResult]:
        """Confirm, then format every file in the catalog.

        Raises:
            ConfigMissingError: If the options file is missing.
        """
        return self._format_batch(self.catalog, message)

    def format_filtered(
        self, message: str = FORMAT_FILTERED_MESSAGE
    ) -> List[CommandResult]:
        """Confirm, then format the files passing the current criteria."""
        return self._format_batch(self.filtered(), message)

    def format_one(self, path: str) -> CommandResult:
        """Format a single file without asking for confirmation."""
        self.check_options_file()
        result = run_one(self.executable, self.options_file, path, self.executor)
        self._after_batch([result])
        return result

    def _format_batch(
        self, entries: List[FileEntry], message: str
    ) -> List[CommandResult]:
        self.check_options_file()
        if not self.confirm(message):
            logger.debug("Batch cancelled")
            return []
        return run_all(
            self.executable,
            self.options_file,
            [entry.path for entry in entries],
            self.executor,
            on_complete=self._after_batch,
        )

    def _after_batch(self, results: List[CommandResult]) -> None:
        if self.refresh is not None:
            self.refresh(results)
        if os.path.isdir(self.root):
            self.refresh_catalog()
