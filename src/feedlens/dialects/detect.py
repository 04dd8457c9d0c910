"""Classify a parsed document into one of the supported dialects."""

from __future__ import annotations

from lxml import etree

from feedlens.diagnostics import DiagnosticLog
from feedlens.dialects import namespaces
from feedlens.dialects.descriptors import Dialect
from feedlens.errors import UnknownFeedType

_RDF_RULES = (
    (namespaces.RSS_10, Dialect.RDF_10),
    (namespaces.RSS_11, Dialect.RDF_11),
    (namespaces.RSS_090, Dialect.RDF_090),
)

_LEGACY_RSS_VERSIONS = (
    (0.91, "0.91", "rss_0_91_superseded"),
    (0.92, "0.92", "rss_0_92_superseded"),
)


def detect(tree: etree._ElementTree, diagnostics: DiagnosticLog) -> Dialect:
    """Return the dialect of ``tree`` or raise UnknownFeedType.

    Rules are checked in a fixed order and the first match wins, so the
    versioned ``<rss>`` checks must run before the generic ``<rss>`` one.
    Compatibility fallbacks are reported to ``diagnostics``.
    """
    root = tree.getroot()
    root_ns = _namespace(root)
    tag = _qualified_tag(root)

    if root_ns == namespaces.ATOM_10:
        return Dialect.ATOM

    if root_ns == namespaces.ATOM_03:
        diagnostics.warn(
            "atom_0_3_deprecated",
            "Atom 0.3 deprecated, using 1.0 parser which won't provide all options",
        )
        return Dialect.ATOM

    for rss_ns, dialect in _RDF_RULES:
        if _declares_rdf_namespace(root, rss_ns):
            return dialect

    version = _version_number(root)
    if tag == "rss":
        for number, label, code in _LEGACY_RSS_VERSIONS:
            if version == number:
                diagnostics.warn(
                    code,
                    f"RSS {label} has been superseded by RSS 2.0, using RSS 2.0 parser",
                )
                return Dialect.RSS2

    if root_ns in namespaces.RSS2_COMPATIBLE or tag == "rss":
        if version != 2:
            diagnostics.warn(
                "rss_version_unspecified",
                "RSS version not specified, parsing as RSS 2.0",
                version=root.get("version"),
            )
        return Dialect.RSS2

    raise UnknownFeedType(f"Feed type unknown: root element {root.tag!r}")


def _namespace(element: etree._Element) -> str | None:
    return etree.QName(element).namespace


def _qualified_tag(element: etree._Element) -> str:
    local = etree.QName(element).localname
    return f"{element.prefix}:{local}" if element.prefix else local


def _declares_rdf_namespace(root: etree._Element, rss_ns: str) -> bool:
    if _namespace(root) == rss_ns:
        return True
    # Only prefixed declarations count; the default namespace is covered above.
    if any(prefix is not None and uri == rss_ns for prefix, uri in root.nsmap.items()):
        return True
    child = _first_element_child(root)
    return child is not None and _namespace(child) == rss_ns


def _first_element_child(root: etree._Element) -> etree._Element | None:
    for child in root:
        if isinstance(child.tag, str):
            return child
    return None


def _version_number(root: etree._Element) -> float | None:
    raw = root.get("version")
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError:
        return None
