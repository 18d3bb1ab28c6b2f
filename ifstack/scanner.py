from __future__ import annotations

import logging
import pathlib
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .errors import IfStackError
from .lexer import ELSE, ENDIF, IF, TEXT, classify
from .stack import ConditionalStack

logger = logging.getLogger(__name__)


@dataclass
class ScanRow:
    lineno: int
    source: str
    output: str
    stack: List[bool]
    kind: str = TEXT
    active: bool = True
    error: Optional[IfStackError] = None


@dataclass
class ScanResult:
    rows: List[ScanRow] = field(default_factory=list)
    unterminated: int = 0

    @property
    def errors(self) -> List[IfStackError]:
        return [row.error for row in self.rows if row.error is not None]

    @property
    def emitted(self) -> List[str]:
        return [row.source for row in self.rows if row.kind == TEXT and row.error is None and row.active]

    @property
    def ok(self) -> bool:
        return not self.errors


class Scanner:
    """Feed lines of text through a ``ConditionalStack``."""

    def __init__(self, stack: Optional[ConditionalStack] = None, *, keep_going: bool = False) -> None:
        self.stack = stack if stack is not None else ConditionalStack()
        self.keep_going = keep_going

    def scan_lines(self, lines: Iterable[str]) -> ScanResult:
        self.stack.reset()
        result = ScanResult()
        for lineno, raw in enumerate(lines, 1):
            row = self.process_line(lineno, raw.rstrip())
            result.rows.append(row)
            if row.error is not None:
                logger.debug("%s", row.error)
                if not self.keep_going:
                    break
        result.unterminated = self.stack.depth
        logger.info(
            "scanned %d line(s): %d error(s), %d unterminated IF(s)",
            len(result.rows),
            len(result.errors),
            result.unterminated,
        )
        return result

    def scan_text(self, text: str) -> ScanResult:
        return self.scan_lines(text.splitlines())

    def scan_file(self, path: str | pathlib.Path) -> ScanResult:
        source = pathlib.Path(path).read_text(encoding="utf-8", errors="replace")
        logger.info("scanning %s", path)
        return self.scan_text(source)

    def process_line(self, lineno: int, line: str) -> ScanRow:
        kind = TEXT
        error: Optional[IfStackError] = None
        try:
            directive = classify(line)
            kind = directive.kind
            if kind == IF:
                self.stack.begin_if(bool(directive.condition))
            elif kind == ELSE:
                self.stack.take_else()
            elif kind == ENDIF:
                self.stack.take_endif()
        except IfStackError as exc:
            error = exc.at_line(lineno)
        active = self.stack.is_active()
        output = line if kind == TEXT and error is None and active else ""
        return ScanRow(lineno, line, output, self.stack.render(), kind, active, error)


__all__ = ["Scanner", "ScanResult", "ScanRow"]
