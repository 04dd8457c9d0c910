"""XPath helpers shared by the feed and entry extractors."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from lxml import etree

from feedlens.diagnostics import DiagnosticLog


def select(node: Any, path: str, bindings: Mapping[str, str]) -> list[Any]:
    """Evaluate ``path`` against ``node`` and return the matches in document order."""
    result = node.xpath(path, namespaces=dict(bindings))
    if isinstance(result, list):
        return result
    return [result]


def text_of(match: Any) -> str:
    """Return the string value of an element or attribute match."""
    if isinstance(match, etree._Element):
        return str(match.xpath("string()"))
    return str(match)


def first_text(
    node: Any,
    path: str,
    bindings: Mapping[str, str],
    diagnostics: DiagnosticLog | None = None,
    field: str | None = None,
) -> str:
    """Return the text of the first match, or "" when nothing matches.

    When ``diagnostics`` is given, more than one match is reported as a
    multiplicity anomaly; the first match is still used.
    """
    return _first(select(node, path, bindings), diagnostics, field or path)


def first_present(
    node: Any,
    paths: Sequence[str],
    bindings: Mapping[str, str],
    diagnostics: DiagnosticLog | None = None,
    field: str | None = None,
) -> str:
    """Walk a fallback chain, stopping at the first path with any match."""
    for path in paths:
        matches = select(node, path, bindings)
        if matches:
            return _first(matches, diagnostics, field or path)
    return ""


def first_non_empty(node: Any, paths: Sequence[str], bindings: Mapping[str, str]) -> str:
    """Walk a fallback chain, stopping at the first match with non-empty text."""
    for path in paths:
        matches = select(node, path, bindings)
        if matches:
            value = text_of(matches[0])
            if value:
                return value
    return ""


def _first(matches: list[Any], diagnostics: DiagnosticLog | None, field: str) -> str:
    if diagnostics is not None and len(matches) > 1:
        diagnostics.warn(
            "multiple_elements",
            f"Multiple {field} elements, using the first",
            field=field,
            count=len(matches),
        )
    if not matches:
        return ""
    return text_of(matches[0])
