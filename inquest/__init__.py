"""Building blocks for interactive terminal prompts: text input editing, key actions,
parsers, formatters, autocompletion, ANSI handling and custom-type and yes/no prompts."""

__version__ = "0.1.0"

__all__ = [
    "actions",
    "ansi",
    "autocompletion",
    "confirm",
    "custom_type",
    "date_utils",
    "errors",
    "formatter",
    "list_option",
    "parser",
    "path_completer",
    "text_input",
]