from __future__ import annotations

from .diagnostic import Diagnostic, Level
from .errors import (
    BufferResolutionFailure,
    CatalogError,
    ConstructionError,
    DiagnosticError,
    InvalidLevel,
    MissingArgument,
    MissingLocation,
    RenderError,
    UnknownReason,
)
from .messages import MESSAGES, MessageCatalog, load_catalog
from .spans import Position, SourceBuffer, SourceRange

__all__ = [
    "MESSAGES",
    "BufferResolutionFailure",
    "CatalogError",
    "ConstructionError",
    "Diagnostic",
    "DiagnosticError",
    "InvalidLevel",
    "Level",
    "MessageCatalog",
    "MissingArgument",
    "MissingLocation",
    "Position",
    "RenderError",
    "SourceBuffer",
    "SourceRange",
    "UnknownReason",
    "load_catalog",
]
