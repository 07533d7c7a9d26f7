"""Error codes shared by the package and the exception that carries them."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Known failure kinds; values start at 2 so they never clash with success."""

    OUT_OF_BOUNDS = 2
    NOT_A_NUMBER = 3
    INCORRECT_ARGUMENTS = 4
    INCORRECT_OPTION = 5
    MEMORY_NOT_ALLOCATED = 6
    FILE_ERROR = 7
    INCORRECT_INPUT_DATA = 8
    DIVISION_BY_ZERO = 9


_MESSAGES = {
    ErrorCode.OUT_OF_BOUNDS: "Option is out of allowed bounds.",
    ErrorCode.NOT_A_NUMBER: "Number was expected, not a number got instead.",
    ErrorCode.INCORRECT_ARGUMENTS: "Entered arguments are not valid.",
    ErrorCode.INCORRECT_OPTION: "Entered option is not supported.",
    ErrorCode.MEMORY_NOT_ALLOCATED: "Memory was not allocated",
    ErrorCode.FILE_ERROR: "Failed to open file.",
    ErrorCode.INCORRECT_INPUT_DATA: "Input data is not valid.",
    ErrorCode.DIVISION_BY_ZERO: "Trying to divide by zero.",
}

_UNKNOWN_MESSAGE = "An unknown message has occurred."


def message_for(code: int) -> str:
    """Return the human-readable message for an error code."""
    try:
        return _MESSAGES[ErrorCode(code)]
    except ValueError:
        return _UNKNOWN_MESSAGE


class AlgoError(Exception):
    """Raised when an operation fails; ``code`` tells which way."""

    def __init__(self, code: int) -> None:
        self.message = message_for(code)
        try:
            self.code: int = ErrorCode(code)
        except ValueError:
            self.code = int(code)
        super().__init__(self.message)