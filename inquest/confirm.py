"""Yes/no confirmation prompt built on top of the custom-type prompt."""

from __future__ import annotations

import copy
from typing import Callable, Optional

from inquest.custom_type import CustomType, CustomTypePrompt
from inquest.formatter import default_bool_formatter
from inquest.parser import default_bool_parser

BoolFormatter = Callable[[bool], str]
BoolParser = Callable[[str], bool]

DEFAULT_ERROR_MESSAGE = "Invalid answer, try typing 'y' for yes or 'n' for no"


def default_value_formatter(answer: bool) -> str:
    """Show a default of True as ``"Y/n"`` and False as ``"y/N"``."""
    return "Y/n" if answer else "y/N"


class Confirm:
    """Options of a prompt that asks a simple yes/no question.

    The input is parsed with :func:`~inquest.parser.default_bool_parser`
    unless another parser is set, and the answer is shown as "Yes" or "No".
    The builder methods return an updated copy and leave the original alone.
    """

    DEFAULT_FORMATTER = staticmethod(default_bool_formatter)
    DEFAULT_PARSER = staticmethod(default_bool_parser)
    DEFAULT_DEFAULT_VALUE_FORMATTER = staticmethod(default_value_formatter)
    DEFAULT_ERROR_MESSAGE = DEFAULT_ERROR_MESSAGE

    def __init__(self, message: str) -> None:
        self.message = message
        self.starting_input: Optional[str] = None
        self.default: Optional[bool] = None
        self.placeholder: Optional[str] = None
        self.help_message: Optional[str] = None
        self.formatter: BoolFormatter = default_bool_formatter
        self.parser: BoolParser = default_bool_parser
        self.default_value_formatter: BoolFormatter = default_value_formatter
        self.error_message: str = DEFAULT_ERROR_MESSAGE

    def __repr__(self) -> str:
        return (
            f"Confirm(message={self.message!r}, default={self.default!r}, "
            f"starting_input={self.starting_input!r})"
        )

    def _with(self, **changes: object) -> Confirm:
        clone = copy.copy(self)
        for name, value in changes.items():
            setattr(clone, name, value)
        return clone

    def with_starting_input(self, starting_input: str) -> Confirm:
        """Set the initial text of the input."""
        return self._with(starting_input=starting_input)

    def with_default(self, default: bool) -> Confirm:
        """Set the answer returned when the input is submitted empty."""
        return self._with(default=default)

    def with_placeholder(self, placeholder: str) -> Confirm:
        """Set the hint shown while the input is empty."""
        return self._with(placeholder=placeholder)

    def with_help_message(self, message: str) -> Confirm:
        """Set the help message shown below the prompt."""
        return self._with(help_message=message)

    def with_formatter(self, formatter: BoolFormatter) -> Confirm:
        """Set how the final answer is displayed."""
        return self._with(formatter=formatter)

    def with_parser(self, parser: BoolParser) -> Confirm:
        """Set the parser; it raises ``ValueError`` when the input is not an answer."""
        return self._with(parser=parser)

    def with_error_message(self, error_message: str) -> Confirm:
        """Set the message shown when the input cannot be parsed."""
        return self._with(error_message=error_message)

    def with_default_value_formatter(self, formatter: BoolFormatter) -> Confirm:
        """Set how the default value is displayed."""
        return self._with(default_value_formatter=formatter)

    def to_custom_type(self) -> CustomType[bool]:
        """The equivalent custom-type prompt options, with no validators."""
        return CustomType(
            message=self.message,
            parser=self.parser,
            formatter=self.formatter,
            default_value_formatter=self.default_value_formatter,
            starting_input=self.starting_input,
            default=self.default,
            placeholder=self.placeholder,
            help_message=self.help_message,
            validators=(),
            error_message=self.error_message,
        )

    def into_prompt(self) -> CustomTypePrompt[bool]:
        """Create the running prompt state from these options."""
        return self.to_custom_type().into_prompt()