from __future__ import annotations
import re
from typing import Sequence

from promptengine.core.errors import ValidationError

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

TRUE_TOKENS = frozenset({"y", "yes"})
FALSE_TOKENS = frozenset({"n", "no"})


def parse_yes_no(text: str) -> bool:
    """Map y/yes to True and n/no to False, ignoring case."""
    token = text.strip().casefold()
    if token in TRUE_TOKENS:
        return True
    if token in FALSE_TOKENS:
        return False
    raise ValidationError(text, "expected y, yes, n or no")


def match_choice(text: str, choices: Sequence[str]) -> int:
    """Index of the first candidate equal to ``text`` when both are case-folded."""
    wanted = text.strip().casefold()
    for index, candidate in enumerate(choices):
        if candidate.casefold() == wanted:
            return index
    raise ValidationError(text, "not one of " + "/".join(choices))


def is_email(text: str) -> bool:
    # $ also matches before a trailing newline, so use fullmatch
    return EMAIL_PATTERN.fullmatch(text) is not None


def validate_email(text: str) -> str:
    if not is_email(text):
        raise ValidationError(text, "not a valid email address")
    return text
