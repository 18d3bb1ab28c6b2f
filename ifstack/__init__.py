"""ifstack tracks nested IF/ELSE/ENDIF state for line-oriented scanners."""
from .errors import ElseWithoutIf, EndifWithoutIf, IfStackError
from .lexer import Directive, DirectiveError, classify, parse_bool
from .scanner import ScanResult, ScanRow, Scanner
from .stack import ConditionalStack, Frame

__all__ = [
    "ConditionalStack",
    "Frame",
    "IfStackError",
    "ElseWithoutIf",
    "EndifWithoutIf",
    "Directive",
    "DirectiveError",
    "classify",
    "parse_bool",
    "Scanner",
    "ScanResult",
    "ScanRow",
]
