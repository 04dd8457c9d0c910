"""Read-only capability interfaces and value objects for extracted feeds."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class FeedEntry:
    title: str
    content: str
    pub_date: str
    link: str


@dataclass(frozen=True)
class FeedSummary:
    feed_type: str
    title: str
    description: str
    link: str
    feed_link: str
    item_count: int


@runtime_checkable
class EntryReader(Protocol):
    @property
    def title(self) -> str: ...

    @property
    def content(self) -> str: ...

    @property
    def pub_date(self) -> str: ...

    @property
    def link(self) -> str: ...

    def to_entry(self) -> FeedEntry: ...


@runtime_checkable
class FeedReader(Protocol):
    @property
    def feed_type(self) -> str: ...

    @property
    def title(self) -> str: ...

    @property
    def description(self) -> str: ...

    @property
    def link(self) -> str: ...

    @property
    def feed_link(self) -> str: ...

    @property
    def items(self) -> list[EntryReader]: ...

    def iter_items(self) -> Iterator[EntryReader]: ...
