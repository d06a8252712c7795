"""Shared test fixtures."""

from typing import Any

import pytest

from contentarea import Areas, ContentRecord, LookupCache, OwnerTypeRegistry, Query, RecordId
from contentarea.config import AreaSettings
from contentarea.core.record import BaseElement
from contentarea.storage import LocalRecordStore


class FixturePage(ContentRecord):
    elemental_area_id: RecordId | None = None
    sidebar_id: RecordId | None = None
    editors: frozenset[str] = frozenset()
    viewers: frozenset[str] = frozenset()

    def can_edit(self, actor: Any) -> bool:
        return actor.name in self.editors or super().can_edit(actor)

    def can_view(self, actor: Any) -> bool:
        return actor.name in self.viewers or self.can_edit(actor)


class FixtureBlogPost(ContentRecord):
    elemental_area_id: RecordId | None = None


class FixtureElement(BaseElement):
    hidden: bool = False

    def can_view(self, actor: Any) -> bool:
        return not self.hidden


class CountingStore(LocalRecordStore):
    """LocalRecordStore that records every query it answers.

    ``first`` goes through ``all``, so each lookup is recorded once.
    """

    def __init__(self) -> None:
        super().__init__()
        self.queries: list[Query] = []
        self.writes: int = 0

    def all(self, query: Query, copy: bool = True) -> list[Any]:
        self.queries.append(query)
        return super().all(query, copy=copy)

    def write(self, record: Any) -> RecordId:
        self.writes += 1
        return super().write(record)

    def reset(self) -> None:
        self.queries.clear()
        self.writes = 0


@pytest.fixture
def registry():
    """Fresh registry with pages (two relations) before blog posts (one)."""
    reg = OwnerTypeRegistry()
    reg.register(FixturePage, relations=("elemental_area", "sidebar"), tag="Page")
    reg.register(FixtureBlogPost, relations=("elemental_area",), tag="BlogPost")
    return reg


@pytest.fixture
def cache():
    """Fresh, unlocked lookup cache."""
    return LookupCache()


@pytest.fixture
def store():
    """Fresh counting in-memory store."""
    return CountingStore()


@pytest.fixture
def settings():
    """Default settings, isolated from the environment."""
    return AreaSettings(_env_file=None)


@pytest.fixture
def areas(store, registry, cache, settings):
    """Areas coordinator over the fresh fixtures."""
    return Areas(store=store, registry=registry, cache=cache, settings=settings)


@pytest.fixture
def page_cls():
    return FixturePage


@pytest.fixture
def blog_cls():
    return FixtureBlogPost


@pytest.fixture
def element_cls():
    return FixtureElement
