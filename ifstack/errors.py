from __future__ import annotations


class IfStackError(RuntimeError):
    """Base error raised by the conditional stack and its line harness."""

    def __init__(self, message: str, line: int | None = None):
        super().__init__(message)
        self.message = message
        self.line = line

    def at_line(self, line: int) -> "IfStackError":
        self.line = line
        return self

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"line {self.line}: {self.message}"


class ElseWithoutIf(IfStackError):
    pass


class EndifWithoutIf(IfStackError):
    pass


__all__ = ["IfStackError", "ElseWithoutIf", "EndifWithoutIf"]
