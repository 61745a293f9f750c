"""Errors raised by prompts and by the callbacks they run."""

from __future__ import annotations

import errno

# Raw OS error codes that mean the input device is not a terminal.
_NOT_A_TTY_CODES = frozenset({errno.ENOTTY, errno.ENXIO, 25, 6})


class InquireError(Exception):
    """Base class of every error a prompt can raise."""


class NotTTYError(InquireError):
    """The input device is not a TTY, so raw mode cannot be enabled."""

    def __init__(self) -> None:
        super().__init__("The input device is not a TTY")


class InvalidConfigurationError(InquireError):
    """The prompt configuration is not valid."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"The prompt configuration is invalid: {detail}")


class InquireIOError(InquireError):
    """An input/output operation failed."""

    def __init__(self, error: OSError) -> None:
        self.error = error
        super().__init__(f"IO error: {error}")
        self.__cause__ = error


class OperationCanceledError(InquireError):
    """The user canceled the prompt, for example by pressing ESC."""

    def __init__(self) -> None:
        super().__init__("Operation was canceled by the user")


class OperationInterruptedError(InquireError):
    """The user interrupted the prompt with Ctrl+C."""

    def __init__(self) -> None:
        super().__init__("Operation was interrupted by the user")


class CustomUserError(InquireError):
    """An error raised by user-provided code such as a validator."""

    def __init__(self, error: BaseException | str) -> None:
        self.error = error
        super().__init__(f"User-provided error: {error}")
        if isinstance(error, BaseException):
            self.__cause__ = error


def from_os_error(error: OSError) -> InquireError:
    """Map an OS-level error onto the matching prompt error."""
    if error.errno in _NOT_A_TTY_CODES:
        return NotTTYError()
    return InquireIOError(error)