from __future__ import annotations
from typing import Any

class PromptEngineError(Exception):
    """Base for internal errors."""

class ParseError(PromptEngineError, ValueError):
    def __init__(self, text: str, kind: Any, detail: str = ""):
        name = getattr(kind, "__name__", repr(kind))
        msg = f"Cannot parse {text!r} as {name}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
        self.text = text
        self.kind = kind
        self.detail = detail

class ValidationError(PromptEngineError, ValueError):
    def __init__(self, text: str, detail: str):
        super().__init__(f"Rejected {text!r}: {detail}")
        self.text = text
        self.detail = detail

class ContractViolation(PromptEngineError, ValueError):
    """Caller passed arguments no input could ever satisfy."""
