from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import IfStackError

IF = "IF"
ELSE = "ELSE"
ENDIF = "ENDIF"
TEXT = "TEXT"

KEYWORDS = {
    "if": IF,
    "else": ELSE,
    "endif": ENDIF,
}

# Anything not listed here as false counts as true.
BOOLEANS = {
    "0": False,
    "1": True,
    "false": False,
    "true": True,
}


class DirectiveError(IfStackError):
    pass


@dataclass(frozen=True)
class Directive:
    kind: str
    text: str
    condition: Optional[bool] = None

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        if self.kind == IF:
            return f"Directive(IF {self.condition})"
        return f"Directive({self.kind})"


def parse_bool(token: str) -> bool:
    return BOOLEANS.get(token.lower(), True)


def classify(line: str) -> Directive:
    """Sort a single input line into a directive or plain text."""
    tokens = line.split()
    if not tokens:
        return Directive(TEXT, line)
    kind = KEYWORDS.get(tokens[0].lower())
    if kind is None:
        return Directive(TEXT, line)
    if kind == IF:
        if len(tokens) < 2:
            raise DirectiveError("expected token after 'IF'")
        return Directive(IF, line, parse_bool(tokens[1]))
    return Directive(kind, line)


__all__ = ["IF", "ELSE", "ENDIF", "TEXT", "Directive", "DirectiveError", "classify", "parse_bool"]
