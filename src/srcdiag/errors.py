from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .spans import SourceBuffer


class DiagnosticError(Exception):
    """Base class for everything raised by srcdiag."""


class ConstructionError(DiagnosticError, ValueError):
    """A Diagnostic could not be built from the given fields."""


class RenderError(DiagnosticError):
    """message() or render() failed for an otherwise valid Diagnostic."""


@dataclass(slots=True)
class InvalidLevel(ConstructionError):
    level: object

    def __str__(self) -> str:
        return f"diagnostic level must be one of note, warning, error, fatal; {self.level!r} provided"


@dataclass(slots=True)
class MissingLocation(ConstructionError):
    def __str__(self) -> str:
        return "expected a location"


@dataclass(slots=True)
class UnknownReason(RenderError):
    reason: str

    def __str__(self) -> str:
        return f"no message template for reason {self.reason!r}"


@dataclass(slots=True)
class MissingArgument(RenderError):
    reason: str
    name: str

    def __str__(self) -> str:
        return f"message {self.reason!r} needs argument {self.name!r}"


@dataclass(slots=True)
class BufferResolutionFailure(RenderError):
    buffer: SourceBuffer
    detail: str

    def __str__(self) -> str:
        return f"{self.buffer.name}: {self.detail}"


@dataclass(slots=True)
class CatalogError(DiagnosticError, ValueError):
    reason: str
    detail: str

    def __str__(self) -> str:
        return f"invalid template for {self.reason!r}: {self.detail}"
