# binview/core/errors.py
from __future__ import annotations


class BinViewError(Exception):
    """
    Base class for all expected operational errors in binview.
    """

    #: Stable machine-readable identifier (for CLI exit mapping, etc.)
    code: str = "unknown"

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Request errors (nothing read yet)
# ---------------------------------------------------------------------------

class ArgumentError(BinViewError):
    """
    A request value is malformed or unrecognized.

    Examples:
      - unknown TYPE or BYTE_ORDER token
      - non-numeric / negative OFFSET, NUMBER or ROW_SIZE
      - profile file with unknown keys or ill-typed values
    """
    code = "argument_error"


# ---------------------------------------------------------------------------
# Input errors
# ---------------------------------------------------------------------------

class InputFileError(BinViewError):
    """
    The input file could not be read.

    Examples:
      - file does not exist
      - path is a directory
      - permission denied
      - OS-level I/O error during read
    """
    code = "input_file_error"
