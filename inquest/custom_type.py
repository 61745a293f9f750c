"""Prompt that parses the user's text input into a value of any type.

A validator is a callable that receives the parsed value and returns
``None`` when the value is acceptable, or a message string explaining why
it is not. Exceptions raised by a validator are reported as
:class:`~inquest.errors.CustomUserError`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

from inquest.errors import CustomUserError, InquireError
from inquest.text_input import Input, InputAction, InputActionResult

T = TypeVar("T")

Parser = Callable[[str], T]
Formatter = Callable[[T], str]
Validator = Callable[[T], Optional[str]]

DEFAULT_ERROR_MESSAGE = "Invalid input"


@dataclass(frozen=True)
class CustomType(Generic[T]):
    """Options of a prompt whose answer is parsed into a custom type.

    The builder methods return a new, updated copy of the options.
    """

    message: str
    parser: Callable[[str], Any] = str
    formatter: Callable[[Any], str] = str
    default_value_formatter: Callable[[Any], str] = str
    starting_input: Optional[str] = None
    default: Optional[Any] = None
    placeholder: Optional[str] = None
    help_message: Optional[str] = None
    validators: tuple = field(default_factory=tuple)
    error_message: str = DEFAULT_ERROR_MESSAGE

    def with_starting_input(self, starting_input: str) -> CustomType[T]:
        """Set the initial text of the input."""
        return replace(self, starting_input=starting_input)

    def with_default(self, default: T) -> CustomType[T]:
        """Set the value returned when the input is submitted empty."""
        return replace(self, default=default)

    def with_placeholder(self, placeholder: str) -> CustomType[T]:
        """Set the hint shown while the input is empty."""
        return replace(self, placeholder=placeholder)

    def with_help_message(self, message: str) -> CustomType[T]:
        """Set the help message shown below the prompt."""
        return replace(self, help_message=message)

    def with_formatter(self, formatter: Formatter) -> CustomType[T]:
        """Set how the final answer is displayed."""
        return replace(self, formatter=formatter)

    def with_default_value_formatter(self, formatter: Formatter) -> CustomType[T]:
        """Set how the default value is displayed."""
        return replace(self, default_value_formatter=formatter)

    def with_parser(self, parser: Parser) -> CustomType[T]:
        """Set the function that parses the input; it raises ``ValueError`` on failure."""
        return replace(self, parser=parser)

    def with_validator(self, validator: Validator) -> CustomType[T]:
        """Append a validator; validators run in the order they were added."""
        return replace(self, validators=(*self.validators, validator))

    def with_validators(self, validators: Iterable[Validator]) -> CustomType[T]:
        """Append several validators in the order given."""
        return replace(self, validators=(*self.validators, *validators))

    def with_error_message(self, error_message: str) -> CustomType[T]:
        """Set the message shown when the input cannot be parsed."""
        return replace(self, error_message=error_message)

    def into_prompt(self) -> CustomTypePrompt[T]:
        """Create the running prompt state from these options."""
        return CustomTypePrompt(self)


class CustomTypePrompt(Generic[T]):
    """State of a running custom-type prompt."""

    def __init__(self, options: CustomType[T]) -> None:
        self.message = options.message
        self.help_message = options.help_message
        self.default = options.default
        self.formatter = options.formatter
        self.default_value_formatter = options.default_value_formatter
        self.parser = options.parser
        self.validators = list(options.validators)
        self.error_message = options.error_message
        self.error: Optional[str] = None

        self.input = Input(options.starting_input or "")
        if options.placeholder is not None:
            self.input.with_placeholder(options.placeholder)

    def _validate(self, value: T) -> Optional[str]:
        for validator in self.validators:
            try:
                outcome = validator(value)
            except InquireError:
                raise
            except Exception as exc:
                raise CustomUserError(exc) from exc
            if outcome is not None:
                return str(outcome)
        return None

    def _final_answer(self) -> T:
        if self.default is not None and not self.input.content:
            return self.default
        try:
            return self.parser(self.input.content)
        except (ValueError, TypeError, ArithmeticError) as exc:
            raise ValueError(self.error_message) from exc

    def submit(self) -> Optional[T]:
        """Try to finish the prompt.

        Returns the answer, or ``None`` when the input could not be parsed or
        failed validation; the reason is then stored in :attr:`error`.
        """
        try:
            answer = self._final_answer()
        except ValueError:
            self.error = self.error_message
            return None

        problem = self._validate(answer)
        if problem is not None:
            self.error = problem
            return None
        return answer

    def handle(self, action: InputAction) -> InputActionResult:
        """Apply a text input action to the value input."""
        return self.input.handle(action)

    def format_answer(self, answer: T) -> str:
        """The text shown as the final answer."""
        return self.formatter(answer)

    def default_message(self) -> Optional[str]:
        """The formatted default value, or ``None`` when there is no default."""
        if self.default is None:
            return None
        return self.default_value_formatter(self.default)