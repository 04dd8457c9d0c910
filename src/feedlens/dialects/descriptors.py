"""Immutable per-dialect query tables."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from feedlens.dialects import namespaces


class Dialect(Enum):
    ATOM = "atom"
    RSS2 = "rss2"
    RDF_10 = "rdf-1.0"
    RDF_11 = "rdf-1.1"
    RDF_090 = "rdf-0.90"


@dataclass(frozen=True)
class DialectDescriptor:
    """Everything needed to query a document of one dialect.

    ``feed_path`` and ``items_path`` are absolute. The title, description and
    link paths are relative to the node ``feed_path`` selects, and the
    ``entry_*`` paths are relative to the root of a copied entry.
    Tuple-valued paths are fallback chains tried left to right.
    """

    dialect: Dialect
    name: str
    namespaces: Mapping[str, str]
    feed_path: str
    items_path: str
    title_path: str
    description_path: str
    link_paths: tuple[str, ...]
    feed_link_path: str | None
    entry_title_path: str
    entry_content_paths: tuple[str, ...]
    entry_date_path: str
    entry_link_paths: tuple[str, ...]


ATOM = DialectDescriptor(
    dialect=Dialect.ATOM,
    name="Atom 1.0",
    namespaces=namespaces.ATOM_BINDINGS,
    feed_path="/Atom:feed",
    items_path="/Atom:feed/Atom:entry",
    title_path="Atom:title",
    description_path="Atom:subtitle",
    # A link without rel means rel="alternate" (RFC 4287, 4.2.7.2).
    link_paths=("Atom:link[@rel='alternate']/@href", "Atom:link[not(@rel)]/@href"),
    feed_link_path="Atom:link[@rel='self']/@href",
    entry_title_path="Atom:title",
    entry_content_paths=("Atom:content",),
    entry_date_path="Atom:updated",
    entry_link_paths=("Atom:link[@rel='alternate']/@href", "Atom:link[not(@rel)]/@href"),
)

RSS2 = DialectDescriptor(
    dialect=Dialect.RSS2,
    name="RSS 2.0",
    namespaces=namespaces.RSS2_BINDINGS,
    feed_path="/rss/channel",
    items_path="//item",
    title_path="title",
    description_path="description",
    link_paths=("link",),
    feed_link_path=None,
    entry_title_path="title",
    entry_content_paths=("content:encoded", "description"),
    entry_date_path="pubDate",
    entry_link_paths=("link",),
)


def _rdf(dialect: Dialect, name: str, bindings: Mapping[str, str]) -> DialectDescriptor:
    return DialectDescriptor(
        dialect=dialect,
        name=name,
        namespaces=bindings,
        feed_path="/rdf:RDF/rss:channel",
        items_path="/rdf:RDF/rss:item",
        title_path="rss:title",
        description_path="rss:description",
        link_paths=("rss:link",),
        feed_link_path=None,
        entry_title_path="rss:title",
        entry_content_paths=("content:encoded", "dc:description", "rss:description"),
        entry_date_path="rss:pubDate",
        entry_link_paths=("rss:link",),
    )


RDF_10 = _rdf(Dialect.RDF_10, "RSS 1.0", namespaces.RDF_10_BINDINGS)
RDF_11 = _rdf(Dialect.RDF_11, "RSS 1.1", namespaces.RDF_11_BINDINGS)
RDF_090 = _rdf(Dialect.RDF_090, "RSS 0.90", namespaces.RDF_090_BINDINGS)

_DESCRIPTORS = {d.dialect: d for d in (ATOM, RSS2, RDF_10, RDF_11, RDF_090)}


def descriptor_for(dialect: Dialect) -> DialectDescriptor:
    return _DESCRIPTORS[dialect]
