"""Message templates for diagnostic reasons.

Templates use ``str.format`` syntax restricted to named placeholders::

    unexpected_token = "unexpected token {token}"

Every template is checked when a catalog is built, so a bad template is
reported once at load time instead of on every render.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from string import Formatter
from types import MappingProxyType
from typing import Final

from .errors import CatalogError, MissingArgument, UnknownReason

LOGGER = logging.getLogger(__name__)

_FORMATTER: Final = Formatter()


def _parse_placeholders(reason: str, template: object) -> frozenset[str]:
    if not isinstance(template, str):
        raise CatalogError(reason, f"expected a string, got {type(template).__name__}")
    names: set[str] = set()
    try:
        parsed = list(_FORMATTER.parse(template))
    except ValueError as exc:
        raise CatalogError(reason, str(exc)) from None
    for _literal, name, spec, conversion in parsed:
        if name is None:
            continue
        if name == "" or name.isdigit():
            raise CatalogError(reason, "positional placeholders are not allowed")
        if not name.isidentifier():
            raise CatalogError(reason, f"placeholder {{{name}}} must be a plain name")
        if spec or conversion:
            raise CatalogError(reason, f"placeholder {{{name}}} must not carry a conversion or format spec")
        names.add(name)
    return frozenset(names)


@dataclass(frozen=True, slots=True, eq=False)
class MessageCatalog(Mapping[str, str]):
    """Immutable reason -> template mapping."""

    _templates: Mapping[str, str]
    _placeholders: Mapping[str, frozenset[str]] = field(init=False, repr=False)

    def __init__(self, templates: Mapping[str, str] | None = None) -> None:
        copied = dict(templates or {})
        placeholders = {reason: _parse_placeholders(reason, tpl) for reason, tpl in copied.items()}
        object.__setattr__(self, "_templates", MappingProxyType(copied))
        object.__setattr__(self, "_placeholders", MappingProxyType(placeholders))

    def __getitem__(self, reason: str) -> str:
        return self._templates[reason]

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def __hash__(self) -> int:
        return hash(frozenset(self._templates.items()))

    def __repr__(self) -> str:
        return f"MessageCatalog({len(self)} templates)"

    def placeholders(self, reason: str) -> frozenset[str]:
        try:
            return self._placeholders[reason]
        except KeyError:
            raise UnknownReason(reason) from None

    def format(self, reason: str, arguments: Mapping[str, object]) -> str:
        needed = self.placeholders(reason)
        for name in sorted(needed):
            if name not in arguments:
                raise MissingArgument(reason, name)
        return self._templates[reason].format_map(arguments)

    def merged(self, other: Mapping[str, str]) -> MessageCatalog:
        """Return a new catalog where templates from ``other`` win."""
        templates = dict(self._templates)
        templates.update(other)
        LOGGER.debug("merged %d templates over %d defaults", len(other), len(self))
        return MessageCatalog(templates)


def load_catalog(path: str | Path) -> MessageCatalog:
    p = Path(path).expanduser()
    data = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise CatalogError("<root>", f"{p}: expected a JSON object of reason -> template")
    LOGGER.debug("loaded %d templates from %s", len(data), p)
    return MessageCatalog(data)


MESSAGES: Final[MessageCatalog] = MessageCatalog(
    {
        # lexer
        "unexpected_char": "unexpected `{character}'",
        "unterminated_string": "unterminated string meets end of file",
        "unterminated_comment": "unterminated comment meets end of file",
        "invalid_escape": "invalid escape character syntax",
        "invalid_unicode_escape": "invalid Unicode escape",
        "empty_symbol": "empty symbol literal",
        "trailing_in_number": "trailing `{character}' in number",
        "no_dot_digit_literal": "no .<digit> floating literal anymore; put 0 before dot",
        # parser
        "unexpected_token": "unexpected token {token}",
        "expected_token": "expected {expected}, got {token}",
        "unmatched_delimiter": "unmatched `{delimiter}'",
        "duplicate_argument": "duplicate argument name",
        "duplicate_definition": "`{name}' is already defined",
        "invalid_assignment": "cannot assign to a keyword",
        "dynamic_const": "dynamic constant assignment",
        "module_in_def": "module definition in method body",
        "class_in_def": "class definition in method body",
        "invalid_return": "invalid return in class/module body",
        "useless_else": "else without rescue is useless",
        "ambiguous_prefix": "`{prefix}' interpreted as argument prefix",
        "ambiguous_literal": "ambiguous first argument; put parentheses or a space even after the operator",
        "useless_expression": "possibly useless use of {expression} in void context",
        "unused_variable": "assigned but unused variable - {name}",
        "previous_definition": "previous definition of `{name}' was here",
    }
)
