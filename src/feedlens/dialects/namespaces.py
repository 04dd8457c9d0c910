"""Namespace URIs and per-dialect prefix bindings used in XPath queries."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

ATOM_10 = "http://www.w3.org/2005/Atom"
ATOM_03 = "http://purl.org/atom/ns#"

RSS_10 = "http://purl.org/rss/1.0/"
RSS_11 = "http://purl.org/net/rss1.1#"
RSS_090 = "http://my.netscape.com/rdf/simple/0.9/"

# Namespaces some RSS 2.0 generators put on the root element.
RSS2_COMPATIBLE = frozenset(
    {
        "http://backend.userland.com/rss",
        "http://backend.userland.com/rss2",
        "http://blogs.law.harvard.edu/tech/rss",
    }
)

RDF = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
DC = "http://purl.org/rss/1.0/modules/dc/"
CONTENT = "http://purl.org/rss/1.0/modules/content/"
SY = "http://web.resource.org/rss/1.0/modules/syndication/"

ATOM_BINDINGS: Mapping[str, str] = MappingProxyType({"Atom": ATOM_10})

RSS2_BINDINGS: Mapping[str, str] = MappingProxyType({"dc": DC, "content": CONTENT})


def rdf_bindings(rss_namespace: str) -> Mapping[str, str]:
    """Return the RDF-family bindings with ``rss`` bound to the given version URI."""
    return MappingProxyType(
        {
            "rdf": RDF,
            "dc": DC,
            "content": CONTENT,
            "sy": SY,
            "rss": rss_namespace,
        }
    )


RDF_10_BINDINGS = rdf_bindings(RSS_10)
RDF_11_BINDINGS = rdf_bindings(RSS_11)
RDF_090_BINDINGS = rdf_bindings(RSS_090)
