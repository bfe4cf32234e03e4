"""Positions in a text and the replacements picked for them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class LineColumn:
    """A position: 1 indexed line, 0 indexed character column."""

    line: int
    column: int


@dataclass(frozen=True, order=True)
class Span:
    """A region of text; both ``start`` and ``end`` are inclusive."""

    start: LineColumn
    end: LineColumn

    @classmethod
    def on_line(cls, line: int, start: int, end: int) -> Span:
        """Span covering the character columns ``start..end`` (end exclusive) of ``line``."""
        if end <= start:
            raise ValueError(
                f"Column range {start}..{end} is empty, a span covers at least one character"
            )
        return cls(LineColumn(line, start), LineColumn(line, end - 1))

    def covers_line(self, line: int) -> bool:
        """Whether the 1 indexed ``line`` lies within this span."""
        return self.start.line <= line <= self.end.line


@dataclass(frozen=True)
class BandAid:
    """A chosen replacement for the content covered by ``span``."""

    content: str
    span: Span

    def covers_line(self, line: int) -> bool:
        """Whether the bandaid covers the 1 indexed ``line``."""
        return self.span.covers_line(line)