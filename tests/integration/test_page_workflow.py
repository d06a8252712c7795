"""End-to-end workflow: a page hosting an area, edited, published and copied."""

import pytest

from contentarea import (
    Actor,
    Areas,
    BaseElement,
    Capability,
    ContentRecord,
    Grant,
    LookupCache,
    OwnerTypeRegistry,
    RecordId,
    Stage,
    area_host,
)
from contentarea.config import AreaSettings
from contentarea.core.record import Area

REGISTRY = OwnerTypeRegistry()


@area_host(relations=("elemental_area", "sidebar"), tag="WorkflowPage", registry=REGISTRY)
class WorkflowPage(ContentRecord):
    elemental_area_id: RecordId | None = None
    sidebar_id: RecordId | None = None


@area_host(registry=REGISTRY, tag="WorkflowNews")
class WorkflowNews(ContentRecord):
    elemental_area_id: RecordId | None = None


class Text(BaseElement):
    body: str = ""
    members_only: bool = False

    def can_view(self, actor):
        return not self.members_only or actor.name != "anonymous"


@pytest.fixture
def areas():
    return Areas(registry=REGISTRY, cache=LookupCache(), settings=AreaSettings(_env_file=None))


def test_supported_owner_types_follow_registration():
    assert REGISTRY.supported_owner_types() == ["WorkflowPage", "WorkflowNews"]


def test_page_workflow(areas):
    sidebar = areas.create_area(
        Text(title="Welcome", body="Hello"),
        Text(title="Members", body="Secret", members_only=True),
    )
    page = WorkflowPage(title="Home", sidebar_id=sidebar.id)
    areas.store.write(page)

    # Discovery persists the hint
    assert areas.owner_page(sidebar).id == page.id
    assert areas.store.get(Area, sidebar.id).owner_type_hint == "WorkflowPage"

    # Access follows the page
    editor = Actor("editor", grants=frozenset({Grant("WorkflowPage", page.id, Capability.EDIT)}))
    assert areas.can_edit(sidebar, editor)
    assert areas.can_view(sidebar, editor)
    assert not areas.can_edit(sidebar, Actor("anonymous"))

    # Display hides members-only blocks from anonymous visitors
    anonymous_view = areas.element_controllers(sidebar, Actor("anonymous"))
    member_view = areas.element_controllers(sidebar, editor)
    assert [c.element.title for c in anonymous_view] == ["Welcome"]
    assert [c.element.title for c in member_view] == ["Welcome", "Members"]
    assert areas.breadcrumbs(sidebar).text == "Home"

    # Publish, copy, delete
    areas.publish(sidebar)
    assert len(areas.elements(sidebar, Stage.LIVE)) == 2

    copy = areas.duplicate(sidebar)
    assert copy.owner_type_hint == "WorkflowPage"
    assert areas.owner_page(copy) is None

    assert areas.delete(sidebar)
    assert areas.store.get(Area, sidebar.id) is None
    assert len(areas.elements(copy)) == 2


def test_moving_area_to_another_owner_type(areas):
    area = areas.create_area()
    news = WorkflowNews(title="Launch", elemental_area_id=area.id)
    areas.store.write(news)

    assert isinstance(areas.owner_page(area), WorkflowNews)
    assert area.owner_type_hint == "WorkflowNews"
