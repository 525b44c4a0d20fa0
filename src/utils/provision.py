"""Download astyle and write the default options file."""

import os
import platform
import subprocess
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import requests
from loguru import logger

from utils.errors import ProvisionError

ASTYLE_BASE_URL = "https://sourceforge.net/projects/astyle/files/astyle/astyle%203.1"
ASTYLE_ARCHIVES = {
    "Windows": "AStyle_3.1_windows.zip",
    "Darwin": "astyle_3.1_macos.tar.gz",
    "Linux": "astyle_3.1_linux.tar.gz",
}
EXECUTABLE_NAMES = ("AStyle.exe", "astyle.exe", "astyle")
DOWNLOAD_TIMEOUT = 60

DEFAULT_OPTIONS = """\
# astyle options for Unity C# sources
# http://astyle.sourceforge.net/astyle.html

mode=cs
style=java
indent=tab
indent-switches
indent-namespaces
indent-col1-comments
min-conditional-indent=0
pad-oper
pad-header
unpad-paren
align-pointer=type
add-braces
keep-one-line-statements
max-code-length=120
convert-tabs
suffix=none
lineend=linux
"""


@dataclass
class ProvisionResult:
    """What a provisioning run produced."""

    archive: Optional[Path]
    executable: Optional[Path]
    options_written: bool


def default_archive_url(system: str = None) -> str:
    """Return the astyle download URL for the host platform."""
    system = system or platform.system()
    name = ASTYLE_ARCHIVES.get(system, ASTYLE_ARCHIVES["Linux"])
    return f"{ASTYLE_BASE_URL}/{name}/download"


def default_tools_dir(root) -> Path:
    """Return the tools directory for a project whose sources live in ``root``.

    Unity keeps sources in ``<project>/Assets``, so the tools go to
    ``<project>/Tools/astyle``.
    """
    return Path(os.path.abspath(root)).parent / "Tools" / "astyle"


def archive_name_from_url(url: str) -> str:
    """Pick a cache file name for ``url``.

    SourceForge links end in ``/download``; the archive name is the segment
    before it.
    """
    parts = [part for part in url.rstrip("/").split("/") if part]
    if parts and parts[-1] == "download":
        parts = parts[:-1]
    return parts[-1] if parts else "astyle-archive"


def write_default_options(path) -> bool:
    """Write the default astyle options unless the file already exists.

    Args:
        path: Where the options file belongs.

    Returns:
        bool: True if the file was written, False if it already existed.
    """
    path = Path(path)
    if path.exists():
        logger.debug(f"Options file already present: {path}")
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(DEFAULT_OPTIONS, encoding="utf-8")
    logger.info(f"Wrote default options to {path}")
    return True


def download_archive(url: str, dest: Path) -> Path:
    """Download ``url`` to ``dest`` unless it is already cached.

    Raises:
        ProvisionError: On any HTTP or file system failure.
    """
    dest = Path(dest)
    if dest.exists():
        logger.info(f"Using cached archive {dest}")
        return dest

    dest.parent.mkdir(parents=True, exist_ok=True)
    partial = dest.with_name(dest.name + ".part")
    logger.info(f"Downloading {url}")
    try:
        with requests.get(url, stream=True, timeout=DOWNLOAD_TIMEOUT) as response:
            response.raise_for_status()
            with open(partial, "wb") as fh:
                for chunk in response.iter_content(chunk_size=64 * 1024):
                    if chunk:
                        fh.write(chunk)
        os.replace(partial, dest)
    except requests.RequestException as e:
        raise ProvisionError(f"Download failed: {e}") from e
    except OSError as e:
        raise ProvisionError(f"Could not write {dest}: {e}") from e
    finally:
        if partial.exists():
            partial.unlink()
    return dest


def extract_archive(archive: Path, dest_dir: Path, system: str = None) -> None:
    """Unpack ``archive`` into ``dest_dir``.

    Uses ``tar`` on Unix-like systems and ``zipfile`` on Windows.

    Raises:
        ProvisionError: If extraction fails.
    """
    system = system or platform.system()
    dest_dir = Path(dest_dir)
    dest_dir.mkdir(parents=True, exist_ok=True)

    if system == "Windows":
        try:
            with zipfile.ZipFile(archive, "r") as zf:
                zf.extractall(dest_dir)
        except (zipfile.BadZipFile, OSError) as e:
            raise ProvisionError(f"Could not extract {archive}: {e}") from e
        return

    try:
        result = subprocess.run(
            ["tar", "-xzf", str(archive), "-C", str(dest_dir)],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            check=False,
        )
    except OSError as e:
        raise ProvisionError(f"Could not run tar: {e}") from e
    if result.returncode != 0:
        raise ProvisionError(f"tar failed: {result.stderr.strip()}")


def find_executable(search_dir: Path) -> Optional[Path]:
    """Return the first astyle binary found below ``search_dir``."""
    search_dir = Path(search_dir)
    if not search_dir.is_dir():
        return None
    for name in EXECUTABLE_NAMES:
        for candidate in sorted(search_dir.rglob(name)):
            if candidate.is_file():
                return candidate
    return None


def provision(
    tools_dir, options_file, url: Optional[str] = None, system: str = None
) -> ProvisionResult:
    """Fetch astyle into ``tools_dir`` and make sure an options file exists.

    The download and extraction are skipped when an astyle binary is already
    present in ``tools_dir``. No retries and no checksum verification.

    Args:
        tools_dir: Directory holding the downloaded archive and its contents.
        options_file: Options file to create if missing.
        url: Archive URL, defaults to the release for the host platform.
        system: Platform name, defaults to the current host.

    Returns:
        ProvisionResult: The archive path, located executable and whether the
        options file was written.

    Raises:
        ProvisionError: If the download or extraction fails.
    """
    tools_dir = Path(tools_dir)
    archive = None
    executable = find_executable(tools_dir)

    if executable is None:
        url = url or default_archive_url(system)
        archive = download_archive(url, tools_dir / archive_name_from_url(url))
        extract_archive(archive, tools_dir, system)
        executable = find_executable(tools_dir)
        if executable is None:
            logger.warning(f"No astyle executable found in {tools_dir}")
    else:
        logger.info(f"astyle already present at {executable}")

    options_written = write_default_options(options_file)
    return ProvisionResult(archive, executable, options_written)
