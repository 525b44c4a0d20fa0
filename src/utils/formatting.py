"""Utility functions for formatting output."""

import os
import time


def format_size(size_bytes):
    """Format bytes into a human-readable format.

    Args:
        size_bytes: Size in bytes to format.

    Returns:
        str: Formatted size string with appropriate unit.
    """
    if size_bytes == 0:
        return "0 B"

    size_names = ("B", "KB", "MB", "GB", "TB")
    i = 0
    while size_bytes >= 1024 and i < len(size_names) - 1:
        size_bytes /= 1024
        i += 1

    return f"{size_bytes:.2f} {size_names[i]}"


def format_mtime(timestamp):
    """Format a modification timestamp for the file list.

    Args:
        timestamp: Seconds since the epoch.

    Returns:
        str: Local time as ``YYYY-MM-DD HH:MM:SS``.
    """
    return time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(timestamp))


def relative_path(path, root):
    """Return ``path`` relative to ``root`` when it lies below it.

    Args:
        path: Absolute file path.
        root: Directory the path should be shown relative to.

    Returns:
        str: The relative path, or ``path`` unchanged if it is outside ``root``.
    """
    try:
        rel = os.path.relpath(path, root)
    except ValueError:
        # different drives on Windows
        return path
    if rel.startswith(os.pardir):
        return path
    return rel
