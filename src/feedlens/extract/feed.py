"""Feed-level extraction driven by a dialect descriptor."""

from __future__ import annotations

import copy
from collections.abc import Iterator

import structlog
from lxml import etree

from feedlens.diagnostics import DiagnosticLog
from feedlens.dialects.descriptors import Dialect, DialectDescriptor
from feedlens.extract.base import FeedEntry, FeedSummary
from feedlens.extract.entry import EntryExtractor
from feedlens.extract.query import first_present, first_text, select

logger = structlog.get_logger()


class FeedExtractor:
    """Answers feed-level queries for a document of a known dialect.

    Every property is evaluated against the document on access; nothing is
    cached, including ``items``.
    """

    def __init__(
        self,
        tree: etree._ElementTree,
        descriptor: DialectDescriptor,
        diagnostics: DiagnosticLog | None = None,
    ):
        self._tree = tree
        self._descriptor = descriptor
        self._diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()

    @property
    def document(self) -> etree._ElementTree:
        return self._tree

    @property
    def descriptor(self) -> DialectDescriptor:
        return self._descriptor

    @property
    def dialect(self) -> Dialect:
        return self._descriptor.dialect

    @property
    def diagnostics(self) -> DiagnosticLog:
        return self._diagnostics

    @property
    def feed_type(self) -> str:
        return self._descriptor.name

    @property
    def title(self) -> str:
        return self._feed_text(self._descriptor.title_path, "feed title")

    @property
    def description(self) -> str:
        return self._feed_text(self._descriptor.description_path, "feed description")

    @property
    def link(self) -> str:
        node = self._feed_node()
        if node is None:
            return ""
        paths = self._descriptor.link_paths
        # A lone link path is expected to match once; fallback chains may legitimately match many.
        diagnostics = self._diagnostics if len(paths) == 1 else None
        return first_present(node, paths, self._descriptor.namespaces, diagnostics, field="feed link")

    @property
    def feed_link(self) -> str:
        path = self._descriptor.feed_link_path
        if path is None:
            return ""
        node = self._feed_node()
        if node is None:
            return ""
        return first_text(node, path, self._descriptor.namespaces)

    @property
    def items(self) -> list[EntryExtractor]:
        return list(self.iter_items())

    def iter_items(self) -> Iterator[EntryExtractor]:
        """Yield an extractor per entry, each over its own copy of the sub-tree."""
        for element in select(self._tree, self._descriptor.items_path, self._descriptor.namespaces):
            yield EntryExtractor(copy.deepcopy(element), self._descriptor, self._diagnostics)

    def entries(self) -> list[FeedEntry]:
        return [item.to_entry() for item in self.iter_items()]

    def summary(self) -> FeedSummary:
        return FeedSummary(
            feed_type=self.feed_type,
            title=self.title,
            description=self.description,
            link=self.link,
            feed_link=self.feed_link,
            item_count=len(select(self._tree, self._descriptor.items_path, self._descriptor.namespaces)),
        )

    def _feed_node(self) -> etree._Element | None:
        nodes = select(self._tree, self._descriptor.feed_path, self._descriptor.namespaces)
        if not nodes:
            logger.debug("Feed element not found", path=self._descriptor.feed_path)
            return None
        return nodes[0]

    def _feed_text(self, path: str, field: str) -> str:
        node = self._feed_node()
        if node is None:
            return ""
        return first_text(node, path, self._descriptor.namespaces, self._diagnostics, field=field)

    def __repr__(self) -> str:
        return f"FeedExtractor(feed_type={self.feed_type!r})"
