# inquest

Building blocks for interactive terminal prompts.

None of these pieces needs a terminal, so you can drive and test prompt logic
with scripted key events.

## What is in the package

- `inquest.text_input`: `Input` is a single-line text buffer whose length and
  cursor are counted in grapheme clusters. `Input.handle` applies an
  `InputAction`. There are three kinds of action: `InputAction.write(char)`,
  `InputAction.move_cursor(magnitude, direction)` and
  `InputAction.delete(magnitude, direction)`. The magnitude is a `Magnitude`:
  `CHAR`, `WORD` or `LINE`. The direction is a `LineDirection`: `LEFT` or
  `RIGHT`. `handle` returns an `InputActionResult`: `CONTENT_CHANGED`,
  `POSITION_CHANGED` or `CLEAN`. The buffer's state is read through the
  properties `content`, `cursor`, `length`, `pre_cursor` and `placeholder`.
- `inquest.actions`: key events are `Key` values, built from a `KeyKind` and
  `KeyModifiers`. `Key.char(...)` and `Key.char_keys_from_str(...)` build
  character keys. `Action.from_key(key, inner_from_key)` maps keys to prompt
  directives:
  - Enter, Ctrl+J or a newline submit.
  - Escape, Ctrl+G or Ctrl+D cancel.
  - Ctrl+C interrupts.
  - Any other key goes to `inner_from_key`.

  `input_action_from_key` and `custom_type_action_from_key` supply the editing
  actions.
- `inquest.parser`: `default_bool_parser` accepts `y`, `yes`, `n` and `no` in
  any case and raises `ValueError` for anything else. `parse_type(float)`, for
  example, builds a parser from a conversion function.
- `inquest.formatter`: `default_string_formatter` and
  `default_bool_formatter` (which gives "Yes" or "No"). `default_date_formatter`
  and `default_date_from_str_formatter` both give `dd-mm-yyyy`.
- `inquest.date_utils`: `DateFromStr.parse` reads `dd/mm/yyyy`. The module also
  has `get_current_date`, `get_start_date(month, year)` and `display_month_fr`.
- `inquest.autocompletion`: the `Autocomplete` interface has
  `get_suggestions` and `get_completion`. `NoAutoCompletion` offers nothing.
  `FunctionAutocomplete` wraps a function that returns suggestions.
  `as_autocomplete` accepts an autocompleter, such a function, or `None`.
- `inquest.path_completer`: `FilePathCompleter` suggests up to 15 file system
  paths that extend the typed input, and adds `/` to directories. When no
  suggestion is highlighted, it completes to the longest common prefix of
  those paths.
- `inquest.custom_type`: `CustomType` holds the options of a prompt whose
  answer is parsed into any type. The options are parser, formatter, default,
  placeholder, help message, validators and error message. Its `with_*` methods
  return updated copies. `into_prompt()` creates a `CustomTypePrompt`, which has
  `handle`, `submit`, `format_answer` and `default_message`.
- `inquest.confirm`: `Confirm` is a yes/no prompt built on `CustomType`:
  - It uses `default_bool_parser` and `default_bool_formatter`.
  - A default value is shown as "Y/n" or "y/N".
  - Unparseable input gets the message "Invalid answer, try typing 'y' for yes
    or 'n' for no".
- `inquest.list_option`: `ListOption(index, value)` wraps an option chosen
  from a list.
- `inquest.ansi`: `ansi_aware_chars` yields `AnsiEscapeSequence` and `AnsiChar`
  items. `ansi_stripped_chars` and `strip_ansi` remove escape sequences.
- `inquest.errors`: the base class is `InquireError`. Its subclasses are
  `NotTTYError`, `InvalidConfigurationError`, `InquireIOError`,
  `OperationCanceledError`, `OperationInterruptedError` and `CustomUserError`.
  `from_os_error` maps an `OSError` onto one of them.

## Installation

```
pip install .
```

## Example

```python
from inquest.actions import Action, ActionKind, Key, KeyKind, custom_type_action_from_key
from inquest.confirm import Confirm

prompt = Confirm("Do you live in Brazil?").with_default(False).into_prompt()

answer = None
for key in Key.char_keys_from_str("yes") + [Key(KeyKind.ENTER)]:
    action = Action.from_key(key, custom_type_action_from_key)
    if action is None:
        continue
    if action.kind is ActionKind.SUBMIT:
        answer = prompt.submit()
    elif action.kind is ActionKind.INNER:
        prompt.handle(action.inner)

print(answer)                        # True
print(prompt.format_answer(answer))  # Yes
```

If the input is empty when submitted, the default is returned. If the input
cannot be parsed, or a validator returns a message, `submit()` returns `None`
and `prompt.error` holds the message to show.

A validator is a callable that receives the parsed value. It returns `None`
when the value is acceptable and a message string when it is not:

```python
from inquest.custom_type import CustomType

amount = (
    CustomType("Amount:", parser=float)
    .with_validator(lambda v: None if v > 0 else "Must be positive")
    .into_prompt()
)
```

An exception raised inside a validator is re-raised as `CustomUserError`.

## What it does not do

The package does not read keys from a terminal, switch the terminal to raw
mode or draw anything on screen. It provides the state and logic of prompts;
you supply the key events and decide how to show `prompt.message`,
`prompt.input`, `prompt.error` and `prompt.help_message`. It has no
list-selection, password, free-text, editor or calendar prompts, and no
command-line program.

## Running the tests

```
pip install .[test]
pytest
```