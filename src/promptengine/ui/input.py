"""
Prompt primitives.

Every primitive loops prompt -> read -> validate until the line passes its
rule. Rejected lines are retried silently, except for email addresses which
print one diagnostic per rejection. Caller mistakes raise ContractViolation
before anything is prompted.
"""
from __future__ import annotations
from typing import List, Sequence, TypeVar

from promptengine.core.errors import ContractViolation, ParseError, ValidationError
from promptengine.core.logging import logger
from promptengine.core.parsing import Kind, parser_for
from promptengine.core.validators import match_choice, parse_yes_no, validate_email
from promptengine.ui.colors import colored_text

T = TypeVar("T")

SEPARATOR = "."

INVALID_EMAIL_MESSAGE = "Invalid email address. Please enter a valid email address."


def get_separator() -> str:
    return SEPARATOR


def get_input(prompt: str, kind: Kind[T] = str) -> T:
    """Prompt until the trimmed line parses as ``kind``.

    ``kind`` is a type (``str``, ``int``, ``float``, ``Decimal``...) or a
    parser callable raising ParseError/ValueError. Digit-grouping commas are
    dropped for numeric kinds, so ``1,454,398`` reads as ``1454398``.
    Unreadable input (end of stream, I/O error, a closed or missing stdin)
    counts as a failed attempt.
    """
    parse = parser_for(kind)
    while True:
        try:
            raw = input(prompt)
        except (EOFError, OSError, ValueError, RuntimeError) as e:
            logger.debug("InputReadFailed", prompt=prompt, error=type(e).__name__)
            continue
        try:
            return parse(raw.strip())
        except ParseError as e:
            logger.debug("InputParseFailed", prompt=prompt, error=str(e))


def get_list(prompt: str, separator: str, kind: Kind[T] = str) -> List[T]:
    """Prompt for ``separator``-delimited values, all of which must parse as ``kind``.

    One bad element rejects the whole line.
    """
    if not isinstance(separator, str) or not separator:
        logger.error("EmptySeparator", prompt=prompt)
        raise ContractViolation("get_list() separator must be a non-empty string")
    parse = parser_for(kind)
    while True:
        line = get_input(prompt, str)
        try:
            return [parse(piece.strip()) for piece in line.split(separator)]
        except ParseError as e:
            logger.debug("ListElementRejected", prompt=prompt, error=str(e))


def get_bool(prompt: str) -> bool:
    """Prompt until the answer is y, yes, n or no (any case)."""
    while True:
        answer = get_input(prompt, str)
        try:
            return parse_yes_no(answer)
        except ValidationError as e:
            logger.debug("BoolTokenRejected", prompt=prompt, error=str(e))


def get_choice(prompt: str, choices: Sequence[str]) -> int:
    """Prompt until the answer names one of ``choices``; returns its index.

    The candidates are shown after the prompt as ``(red/green/blue)``.
    Matching ignores case but is otherwise exact, and the first equal
    candidate wins when the same option is listed twice. An empty
    ``choices`` could never match, so it raises ContractViolation before
    anything is prompted.
    """
    choices = list(choices)
    if not choices:
        logger.error("EmptyChoices", prompt=prompt)
        raise ContractViolation("get_choice() needs at least one candidate")
    full_prompt = f"{prompt} ({'/'.join(choices)}) "
    while True:
        answer = get_input(full_prompt, str)
        try:
            return match_choice(answer, choices)
        except ValidationError as e:
            logger.debug("ChoiceRejected", prompt=prompt, error=str(e))


def get_email(prompt: str) -> str:
    while True:
        address = get_input(prompt, str)
        try:
            return validate_email(address)
        except ValidationError as e:
            logger.debug("EmailRejected", prompt=prompt, error=str(e))
            print(colored_text(INVALID_EMAIL_MESSAGE, 'red'))
