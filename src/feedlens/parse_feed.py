"""Open RSS/Atom/RDF documents as dialect-aware feed extractors."""

from __future__ import annotations

import copy

import structlog
from lxml import etree

from feedlens.config import settings
from feedlens.diagnostics import DiagnosticLog
from feedlens.dialects import namespaces
from feedlens.dialects.descriptors import Dialect, descriptor_for
from feedlens.dialects.detect import detect
from feedlens.document import parse_document
from feedlens.extract.feed import FeedExtractor
from feedlens.validate import Validator, resolve_validator

logger = structlog.get_logger()

_SNIFF_BYTES = 1024
_FEED_ROOT_MARKERS = (b"<rss", b"<feed", b"<rdf:rdf", b"<channel")


def looks_like_feed(content: bytes) -> bool:
    """Cheap check that a response body starts like a feed document rather than an HTML page."""
    head = content[:_SNIFF_BYTES].lstrip(b"\xef\xbb\xbf \t\r\n").lower()
    markers = [head.find(marker) for marker in _FEED_ROOT_MARKERS]
    found = [pos for pos in markers if pos >= 0]
    if not found:
        return False
    html = [pos for pos in (head.find(b"<html"), head.find(b"<!doctype html")) if pos >= 0]
    return not html or min(found) < min(html)


def open_feed(
    tree: etree._ElementTree,
    *,
    strict: bool | None = None,
    validator: Validator | None = None,
    diagnostics: DiagnosticLog | None = None,
) -> FeedExtractor:
    """Detect the dialect of a parsed tree and wrap it in a FeedExtractor.

    Raises ValidationFailed (strict mode only) or UnknownFeedType; no
    extractor is built in either case.
    """
    strict = settings.strict if strict is None else strict
    diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()

    if strict:
        resolve_validator(validator, settings.relaxng_schema_path).validate(tree)

    dialect = detect(tree, diagnostics)
    if dialect is Dialect.RSS2:
        tree = _plain_rss(tree)
    descriptor = descriptor_for(dialect)
    logger.debug("Feed dialect detected", feed_type=descriptor.name)
    return FeedExtractor(tree, descriptor, diagnostics)


def parse_feed(
    content: str | bytes,
    *,
    strict: bool | None = None,
    validator: Validator | None = None,
    recover: bool | None = None,
) -> FeedExtractor:
    """Parse raw feed text and open it.

    Raises MalformedDocument when the XML cannot be parsed, in addition to
    the errors ``open_feed`` raises.
    """
    recover = settings.recover_malformed if recover is None else recover
    tree = parse_document(content, recover=recover)
    return open_feed(tree, strict=strict, validator=validator)


def _plain_rss(tree: etree._ElementTree) -> etree._ElementTree:
    """Return ``tree`` with RSS 2.0 compatibility namespaces mapped to no namespace.

    Some generators put ``<rss>`` in a userland or harvard namespace; the RSS
    2.0 paths are namespace-free, so those elements are renamed on a copy.
    The caller's tree is returned as is when it needs no renaming.
    """
    rss_ns = etree.QName(tree.getroot()).namespace
    if rss_ns not in namespaces.RSS2_COMPATIBLE:
        return tree

    plain = copy.deepcopy(tree)
    for element in list(plain.iter(f"{{{rss_ns}}}*")):
        element.tag = etree.QName(element).localname
    etree.cleanup_namespaces(plain)
    logger.debug("Mapped RSS namespace to plain RSS", namespace=rss_ns)
    return plain
