from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterator
from dataclasses import dataclass, field

from .errors import BufferResolutionFailure


@dataclass(frozen=True, slots=True)
class Position:
    """A decomposed source position.

    Lines are 1-based; columns are 0-based character offsets into the line.
    """

    line: int
    column: int

    def __iter__(self) -> Iterator[int]:
        yield self.line
        yield self.column


@dataclass(frozen=True, slots=True)
class SourceBuffer:
    """Named source text with an eagerly built line index.

    The buffer is read-only after construction, so it can be shared freely
    between threads rendering diagnostics against it.
    """

    name: str
    source: str
    _line_begins: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        begins = [0]
        begins.extend(i + 1 for i, ch in enumerate(self.source) if ch == "\n")
        object.__setattr__(self, "_line_begins", tuple(begins))

    @property
    def line_count(self) -> int:
        return len(self._line_begins)

    def decompose_position(self, offset: int) -> Position:
        if not 0 <= offset <= len(self.source):
            raise BufferResolutionFailure(
                self, f"position {offset} is outside of the buffer (size {len(self.source)})"
            )
        line = bisect_right(self._line_begins, offset)
        return Position(line=line, column=offset - self._line_begins[line - 1])

    def line_range(self, line: int) -> SourceRange:
        """Span of a whole line, excluding its terminator."""
        if not 1 <= line <= self.line_count:
            raise BufferResolutionFailure(self, f"line {line} does not exist (buffer has {self.line_count})")
        begin = self._line_begins[line - 1]
        if line < self.line_count:
            end = self._line_begins[line] - 1
        else:
            end = len(self.source)
        return SourceRange(self, begin, end)

    def source_line(self, line: int) -> str:
        return self.line_range(line).source

    def slice(self, begin: int, end: int) -> str:
        if end > len(self.source):
            raise BufferResolutionFailure(
                self, f"range {begin}...{end} is outside of the buffer (size {len(self.source)})"
            )
        return self.source[begin:end]


@dataclass(frozen=True, slots=True)
class SourceRange:
    """Half-open span [begin_pos, end_pos) of a SourceBuffer."""

    source_buffer: SourceBuffer = field(repr=False)
    begin_pos: int
    end_pos: int

    def __post_init__(self) -> None:
        if self.begin_pos < 0 or self.end_pos < 0:
            raise ValueError("SourceRange positions cannot be negative")
        if self.begin_pos > self.end_pos:
            raise ValueError(f"SourceRange invariant violated: {self.begin_pos} > {self.end_pos}")

    @property
    def begin(self) -> Position:
        return self.source_buffer.decompose_position(self.begin_pos)

    @property
    def end(self) -> Position:
        return self.source_buffer.decompose_position(self.end_pos)

    @property
    def line(self) -> int:
        return self.begin.line

    @property
    def column(self) -> int:
        return self.begin.column

    @property
    def last_line(self) -> int:
        return self.end.line

    @property
    def last_column(self) -> int:
        return self.end.column

    @property
    def column_range(self) -> range:
        if self.line != self.last_line:
            raise ValueError(f"{self}: column_range only works for single-line ranges")
        return range(self.column, self.last_column)

    @property
    def size(self) -> int:
        return self.end_pos - self.begin_pos

    @property
    def source(self) -> str:
        return self.source_buffer.slice(self.begin_pos, self.end_pos)

    @property
    def source_line(self) -> str:
        return self.source_buffer.source_line(self.line)

    def is_empty(self) -> bool:
        return self.begin_pos == self.end_pos

    def is_disjoint(self, other: SourceRange) -> bool:
        if self.source_buffer is not other.source_buffer and self.source_buffer != other.source_buffer:
            return True
        if self.is_empty() and other.is_empty():
            return self.begin_pos != other.begin_pos
        return self.begin_pos >= other.end_pos or other.begin_pos >= self.end_pos

    def intersect(self, other: SourceRange) -> SourceRange | None:
        if self.is_disjoint(other):
            return None
        return SourceRange(
            self.source_buffer,
            max(self.begin_pos, other.begin_pos),
            min(self.end_pos, other.end_pos),
        )

    def resize(self, new_size: int) -> SourceRange:
        return SourceRange(self.source_buffer, self.begin_pos, self.begin_pos + new_size)

    def with_(self, *, begin_pos: int | None = None, end_pos: int | None = None) -> SourceRange:
        return SourceRange(
            self.source_buffer,
            self.begin_pos if begin_pos is None else begin_pos,
            self.end_pos if end_pos is None else end_pos,
        )

    def format(self) -> str:
        return f"{self.source_buffer.name}:{self.line}:{self.column + 1}"

    def __str__(self) -> str:
        return self.format()
