"""Copying files to the system clipboard."""

from pathlib import Path

import pyperclip

from ..errors import ClipboardUnavailableError, FileAccessError


def copy_file_to_clipboard(path: Path) -> None:
    """Put the file contents on the clipboard as plain text."""
    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        raise FileAccessError(f"Failed to read {path}: {e}") from e

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FileAccessError(f"File {path} is not valid UTF-8 text: {e}") from e

    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardUnavailableError(f"Clipboard is not available: {e}") from e
