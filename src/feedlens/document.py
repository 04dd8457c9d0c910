"""Turn raw feed bytes into an lxml tree."""

from __future__ import annotations

from lxml import etree

from feedlens.errors import MalformedDocument


def _xml_parser(*, recover: bool, encoding: str | None = None) -> etree.XMLParser:
    return etree.XMLParser(
        ns_clean=True,
        recover=recover,
        collect_ids=False,
        resolve_entities=False,
        no_network=True,
        encoding=encoding,
    )


def parse_document(content: str | bytes, *, recover: bool = False) -> etree._ElementTree:
    """Parse ``content`` into a tree or raise MalformedDocument.

    Bytes are decoded according to the XML declaration. Text is encoded as
    UTF-8 and the declared encoding, if any, is overridden.
    """
    if isinstance(content, str):
        data = content.encode("utf-8")
        parser = _xml_parser(recover=recover, encoding="utf-8")
    else:
        data = content
        parser = _xml_parser(recover=recover)

    if not data.strip():
        raise MalformedDocument("Failed to parse XML: received empty content")

    try:
        root = etree.fromstring(data, parser=parser)
    except etree.XMLSyntaxError as exc:
        raise MalformedDocument(f"Failed to parse XML content: {exc}") from exc

    if root is None:
        raise MalformedDocument("Failed to parse XML: no root element")
    return root.getroottree()
