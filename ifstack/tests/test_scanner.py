from __future__ import annotations

import pathlib

from ifstack import ConditionalStack, ElseWithoutIf, EndifWithoutIf, Scanner
from ifstack.lexer import DirectiveError
from ifstack.report import format_header, format_row, format_table

SAMPLE = """\
start
if 1
  one
  if 0
    hidden
  else
    shown
  endif
else
  never
endif
end
"""


def test_scan_emits_active_lines() -> None:
    result = Scanner().scan_text(SAMPLE)
    assert result.ok
    assert result.unterminated == 0
    assert result.emitted == ["start", "  one", "    shown", "end"]


def test_rows_record_stack_after_each_line() -> None:
    result = Scanner().scan_text(SAMPLE)
    stacks = [row.stack for row in result.rows]
    assert stacks[1] == [True]
    assert stacks[3] == [True, False]
    assert stacks[5] == [True, True]
    assert stacks[8] == [False]
    assert stacks[-1] == []
    assert result.rows[4].output == ""
    assert result.rows[6].output == "    shown"


def test_scan_stops_at_first_error_by_default() -> None:
    result = Scanner().scan_text("a\nendif\nb\n")
    assert len(result.rows) == 2
    assert isinstance(result.errors[0], EndifWithoutIf)
    assert result.errors[0].line == 2
    assert str(result.errors[0]) == "line 2: ENDIF without preceding IF [ELSE]"
    assert not result.ok


def test_keep_going_leaves_stack_untouched() -> None:
    scanner = Scanner(keep_going=True)
    result = scanner.scan_text("if 0\nelse\nelse\nx\nendif\nendif\ny\n")
    assert [type(error) for error in result.errors] == [ElseWithoutIf, EndifWithoutIf]
    assert result.emitted == ["x", "y"]
    assert result.unterminated == 0


def test_missing_if_argument_is_reported() -> None:
    result = Scanner(keep_going=True).scan_text("if\ntext\n")
    assert isinstance(result.errors[0], DirectiveError)
    assert result.emitted == ["text"]


def test_unterminated_blocks_are_counted() -> None:
    result = Scanner().scan_text("if 1\nif 0\n")
    assert result.ok
    assert result.unterminated == 2


def test_scanner_reuses_its_stack_between_inputs() -> None:
    stack = ConditionalStack()
    scanner = Scanner(stack)
    scanner.scan_text("if 0\n")
    assert stack.depth == 1
    result = scanner.scan_text("visible\n")
    assert result.emitted == ["visible"]


def test_scan_file(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    result = Scanner().scan_file(path)
    assert len(result.rows) == 12


def test_table_layout() -> None:
    result = Scanner().scan_text("if 1\nhello\n")
    header = format_header()
    assert header[0].startswith("line  source")
    assert header[0].endswith("  stack")
    assert format_row(result.rows[1]) == f"   2  {'hello':<40}  {'hello':<40}  [1]"
    assert format_table(result).splitlines()[2].endswith("[1]")
