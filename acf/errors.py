"""Exceptions raised by acf commands."""

from typing import Optional


class AcfError(Exception):
    """Base class for every error a command can report."""


class NetworkError(AcfError):
    """Judge page could not be requested."""


class InvalidContestError(AcfError):
    """Judge answered with a non-success status."""


class CompileError(AcfError):
    """Compiler failed or could not be started."""

    def __init__(self, message: str, diagnostics: str = ""):
        super().__init__(message)
        self.diagnostics = diagnostics


class SolutionRuntimeError(AcfError):
    """Compiled solution failed on a test."""

    def __init__(self, message: str, test_number: Optional[int] = None):
        super().__init__(message)
        self.test_number = test_number


class ParseError(AcfError):
    """Test file name is not a number."""


class FileAccessError(AcfError):
    """File could not be read, written or created."""


class DirectoryExistsError(AcfError):
    """Problem directory is already present."""


class ClipboardUnavailableError(AcfError):
    """No clipboard mechanism is available."""
