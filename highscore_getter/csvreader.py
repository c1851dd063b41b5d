"""Reader for simple comma separated tables."""

from __future__ import annotations

import re
from pathlib import Path

_BOM = "\ufeff"
_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def _strip_quotes(line: str) -> str:
    # A quote is dropped and the character after it is kept unexamined,
    # so a doubled quote leaves one quote behind.
    out = []
    chars = iter(line)
    for ch in chars:
        if ch == '"':
            nxt = next(chars, None)
            if nxt is not None:
                out.append(nxt)
        else:
            out.append(ch)
    return "".join(out)


def _split_fields(line: str) -> list[str]:
    fields = []
    current = []
    in_quotes = False
    for ch in line:
        if ch == "," and not in_quotes:
            fields.append("".join(current))
            current = []
            continue
        if ch == '"':
            in_quotes = not in_quotes
        current.append(ch)
    fields.append("".join(current))
    return fields


def parse_csv(text: str) -> list[list[str]]:
    """Split text into rows of string fields."""
    if text.startswith(_BOM):
        text = text[1:]
    text = text.replace("\r\n", "\n")
    raw_lines = text.split("\n")
    if raw_lines and raw_lines[-1] == "":
        raw_lines.pop()
    rows = []
    lines = iter(raw_lines)
    for line in lines:
        while line.count('"') % 2:
            extra = next(lines, None)
            if extra is None:
                raise ValueError("unterminated quoted field")
            line += "\n" + extra
        rows.append(_split_fields(_strip_quotes(line)))
    return rows


class CsvReader:
    """A table read from CSV text; a file that cannot be read gives no rows."""

    def __init__(self, filename: str | Path | None = None) -> None:
        self._rows: list[list[str]] = []
        if filename is None:
            return
        try:
            data = Path(filename).read_bytes()
        except OSError:
            return
        self._rows = parse_csv(data.decode("utf-8", errors="replace"))

    @classmethod
    def from_text(cls, text: str) -> CsvReader:
        reader = cls()
        reader._rows = parse_csv(text)
        return reader

    def lines(self) -> int:
        return len(self._rows)

    def columns(self, line: int) -> int:
        if not 0 <= line < len(self._rows):
            raise IndexError(f"line {line} out of range")
        return len(self._rows[line])

    def get_string(self, line: int, column: int) -> str:
        if column >= self.columns(line):
            return ""
        return self._rows[line][column]

    def get_int(self, line: int, column: int) -> int:
        text = self.get_string(line, column)
        match = _INT_RE.match(text)
        if match is None:
            raise ValueError(f"not an integer: {text!r}")
        value = int(match.group(1))
        if not _INT_MIN <= value <= _INT_MAX:
            raise ValueError(f"integer out of range: {text!r}")
        return value

    def get_float(self, line: int, column: int) -> float:
        text = self.get_string(line, column)
        match = _FLOAT_RE.match(text)
        if match is None:
            raise ValueError(f"not a number: {text!r}")
        return float(match.group(1))