from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from .errors import InvalidLevel, MissingLocation
from .messages import MESSAGES, MessageCatalog
from .spans import SourceRange


class Level(str, Enum):
    NOTE = "note"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A source-anchored message rendered clang style.

    ``location`` is the primary range and gets ``^`` markers; every range in
    ``highlights`` gets ``~`` markers where it touches a rendered line::

        (fragment):1:5: error: unexpected token $end
        foo +
            ^

    ``arguments`` and ``highlights`` are copied, so the caller's originals can
    be reused or mutated freely afterwards.
    """

    level: Level
    reason: str
    arguments: Mapping[str, object] = field(hash=False)
    location: SourceRange
    highlights: tuple[SourceRange, ...] = ()
    catalog: MessageCatalog = field(default=MESSAGES, kw_only=True, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            level = Level(self.level)
        except (ValueError, TypeError):
            raise InvalidLevel(self.level) from None
        if self.location is None:
            raise MissingLocation()
        object.__setattr__(self, "level", level)
        object.__setattr__(self, "arguments", MappingProxyType(dict(self.arguments or {})))
        object.__setattr__(self, "highlights", tuple(self.highlights))

    @classmethod
    def create(
        cls,
        level: Level | str,
        reason: str,
        arguments: Mapping[str, object] | None,
        location: SourceRange,
        highlights: Iterable[SourceRange] = (),
        *,
        catalog: MessageCatalog = MESSAGES,
    ) -> Diagnostic:
        return cls(level, reason, arguments, location, highlights, catalog=catalog)

    def message(self) -> str:
        return self.catalog.format(self.reason, self.arguments)

    def render(self) -> list[str]:
        loc = self.location
        for hl in self.highlights:
            # every highlight must resolve, drawn or not
            hl.source_buffer.decompose_position(hl.begin_pos)
            hl.source_buffer.decompose_position(hl.end_pos)
        if loc.line == loc.last_line:
            return [f"{loc}: {self.level}: {self.message()}", *self._render_line(loc)]

        buffer = loc.source_buffer
        first = buffer.decompose_position(loc.begin_pos)
        last = buffer.decompose_position(loc.end_pos)
        header = f"{loc}-{last.line}:{last.column}: {self.level}: {self.message()}"

        head = [f"{buffer.name}:{first.line}: {line}" for line in self._render_line(_first_line_only(loc))]
        head[-1] += "..."
        tail = [f"{buffer.name}:{last.line}: {line}" for line in self._render_line(_last_line_only(loc))]
        return [header, *head, *tail]

    def __str__(self) -> str:
        return "\n".join(self.render())

    def _render_line(self, rng: SourceRange) -> list[str]:
        source_line = rng.source_line
        marker = [" "] * len(source_line)
        line_range = rng.source_buffer.line_range(rng.line)

        for hl in self.highlights:
            part = hl.intersect(line_range)
            if part is not None:
                _overlay(marker, part, "~")
        _overlay(marker, rng, "^")

        return [source_line, "".join(marker)]


def _overlay(marker: list[str], rng: SourceRange, ch: str) -> None:
    start = rng.column
    stop = start + max(rng.size, 1)
    if stop > len(marker):
        marker.extend(" " * (stop - len(marker)))
    marker[start:stop] = ch * (stop - start)


def _first_line_only(rng: SourceRange) -> SourceRange:
    if rng.line == rng.last_line:
        return rng
    return rng.resize(rng.source.index("\n"))


def _last_line_only(rng: SourceRange) -> SourceRange:
    if rng.line == rng.last_line:
        return rng
    return rng.with_(begin_pos=rng.begin_pos + rng.source.rindex("\n") + 1)
