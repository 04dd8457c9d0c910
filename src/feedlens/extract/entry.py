"""Entry-level extraction over a single copied entry sub-tree."""

from __future__ import annotations

from lxml import etree

from feedlens.diagnostics import DiagnosticLog
from feedlens.dialects.descriptors import DialectDescriptor
from feedlens.extract.base import FeedEntry
from feedlens.extract.query import first_non_empty, first_present, first_text


class EntryExtractor:
    """Answers entry queries for one ``<entry>`` or ``<item>``.

    The element is expected to be the root of its own document, so the
    entry does not depend on its position in the parent feed.
    """

    def __init__(
        self,
        element: etree._Element,
        descriptor: DialectDescriptor,
        diagnostics: DiagnosticLog | None = None,
    ):
        self._element = element
        self._descriptor = descriptor
        self._diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()

    @property
    def element(self) -> etree._Element:
        return self._element

    @property
    def descriptor(self) -> DialectDescriptor:
        return self._descriptor

    @property
    def title(self) -> str:
        return first_text(
            self._element,
            self._descriptor.entry_title_path,
            self._descriptor.namespaces,
            self._diagnostics,
            field="entry title",
        )

    @property
    def content(self) -> str:
        return first_non_empty(
            self._element,
            self._descriptor.entry_content_paths,
            self._descriptor.namespaces,
        )

    @property
    def pub_date(self) -> str:
        # Atom requires exactly one <updated>, so <published> is not consulted.
        return first_text(self._element, self._descriptor.entry_date_path, self._descriptor.namespaces)

    @property
    def link(self) -> str:
        return first_present(self._element, self._descriptor.entry_link_paths, self._descriptor.namespaces)

    def to_entry(self) -> FeedEntry:
        return FeedEntry(
            title=self.title,
            content=self.content,
            pub_date=self.pub_date,
            link=self.link,
        )

    def __repr__(self) -> str:
        return f"EntryExtractor(dialect={self._descriptor.dialect.value!r}, tag={self._element.tag!r})"
