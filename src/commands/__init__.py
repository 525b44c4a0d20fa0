"""Command modules for unifmt CLI."""

from . import (
    config,
    files,
    format,
    setup,
)

# List of all command modules to be registered with the CLI
__all__ = [
    'config',
    'files',
    'format',
    'setup',
]
