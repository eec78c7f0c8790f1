"""Prompt a terminal user until they type something valid."""
from promptengine.core.errors import ContractViolation, ParseError, PromptEngineError, ValidationError
from promptengine.core.parsing import parse, parser_for, strip_grouping
from promptengine.ui.input import (
    SEPARATOR,
    get_bool,
    get_choice,
    get_email,
    get_input,
    get_list,
    get_separator,
)

__version__ = "0.1.0"

__all__ = [
    "ContractViolation",
    "ParseError",
    "PromptEngineError",
    "SEPARATOR",
    "ValidationError",
    "get_bool",
    "get_choice",
    "get_email",
    "get_input",
    "get_list",
    "get_separator",
    "parse",
    "parser_for",
    "strip_grouping",
]
