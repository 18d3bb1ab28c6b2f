"""Nested IF/ELSE/ENDIF state tracking.

``ConditionalStack`` keeps one frame per open ``IF`` and answers a single
question for the caller scanning its input: is content at the current
nesting point active?  The answer is the conjunction of every open frame's
current branch value, recomputed after each mutation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List

from .errors import ElseWithoutIf, EndifWithoutIf, IfStackError

logger = logging.getLogger(__name__)


def format_stack(values: Iterable[bool]) -> str:
    return "[" + ", ".join("1" if value else "0" for value in values) + "]"


@dataclass
class Frame:
    """One open conditional level."""

    branch_true: bool
    in_else: bool = False


class ConditionalStack:
    __slots__ = ("_frames", "_effective", "_closed")

    def __init__(self) -> None:
        self._frames: List[Frame] = []
        self._effective = True
        self._closed = False

    # ------------------------------------------------------------------ public API
    def begin_if(self, condition: bool) -> None:
        self._ensure_open()
        self._frames.append(Frame(bool(condition)))
        self._recompute()
        logger.debug("IF %s -> depth %d, active=%s", bool(condition), len(self._frames), self._effective)

    def take_else(self) -> None:
        self._ensure_open()
        if not self._frames:
            raise ElseWithoutIf("ELSE without IF")
        top = self._frames[-1]
        if top.in_else:
            raise ElseWithoutIf("already in ELSE branch")
        top.in_else = True
        top.branch_true = not top.branch_true
        self._recompute()
        logger.debug("ELSE at depth %d -> stack %s, active=%s", len(self._frames), self.format(), self._effective)

    def take_endif(self) -> None:
        self._ensure_open()
        if not self._frames:
            raise EndifWithoutIf("ENDIF without preceding IF [ELSE]")
        self._frames.pop()
        self._recompute()
        logger.debug("ENDIF -> depth %d, active=%s", len(self._frames), self._effective)

    def is_active(self) -> bool:
        return self._effective

    def in_else(self) -> bool:
        return bool(self._frames) and self._frames[-1].in_else

    def render(self) -> List[bool]:
        """Branch values ordered bottom-to-top."""
        return [frame.branch_true for frame in self._frames]

    def format(self) -> str:
        return format_stack(self.render())

    def reset(self) -> None:
        """Drop every frame. Raises ``IfStackError`` once the stack is shut down."""
        self._ensure_open()
        self._frames.clear()
        self._recompute()

    def shutdown(self) -> None:
        """Release all frames for good; later mutating calls, ``reset`` included, raise."""
        if self._closed:
            return
        if self._frames:
            logger.debug("shutdown with %d open frame(s)", len(self._frames))
        self._frames.clear()
        self._recompute()
        self._closed = True

    @property
    def depth(self) -> int:
        return len(self._frames)

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        return len(self._frames)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"ConditionalStack({self.format()}, active={self._effective})"

    # ------------------------------------------------------------------ helpers
    def _recompute(self) -> None:
        self._effective = all(frame.branch_true for frame in self._frames)

    def _ensure_open(self) -> None:
        if self._closed:
            raise IfStackError("stack is shut down")


__all__ = ["Frame", "ConditionalStack", "format_stack"]
