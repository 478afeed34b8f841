"""Utility functions."""

from .clipboard import copy_file_to_clipboard
from .terminal import (
    create_table,
    format_duration,
    print_verdict,
    progress_bar,
)

__all__ = [
    "copy_file_to_clipboard",
    "create_table",
    "format_duration",
    "print_verdict",
    "progress_bar",
]
