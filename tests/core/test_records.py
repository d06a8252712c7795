"""Tests for record models and permission primitives."""

import pytest
from pydantic import ValidationError

from contentarea import ANONYMOUS, Actor, Grant, RecordId
from contentarea.core.record import Area, BaseElement, ContentRecord, relation_field
from contentarea.core.types import Capability


def test_new_records_are_unsaved():
    assert Area().id is None
    assert not Area().is_saved()
    assert Area(id=RecordId(4)).is_saved()


def test_owner_type_hint_length_is_validated():
    with pytest.raises(ValidationError):
        Area(owner_type_hint="x" * 256)


def test_area_declares_cascade_policy():
    assert Area.cascade_deletes == ("elements",)
    assert Area.cascade_duplicates == ("elements",)
    assert Area.owns == ("elements",)
    assert Area.summary_fields == {"Title": "breadcrumbs"}


def test_pending_elements_are_per_instance():
    first, second = Area(), Area()
    first.pending_elements().append(BaseElement(title="a"))

    assert len(first.pending_elements()) == 1
    assert second.pending_elements() == []


def test_relation_field_naming():
    assert relation_field("elemental_area") == "elemental_area_id"


def test_default_permissions_follow_grants():
    page = ContentRecord(id=RecordId(9), title="Home")
    tag = ContentRecord.record_tag()
    editor = Actor("editor", grants=frozenset({Grant(tag, RecordId(9), Capability.EDIT)}))
    viewer = Actor("viewer", grants=frozenset({Grant(tag, RecordId(9), Capability.VIEW)}))

    assert page.can_edit(editor) and page.can_view(editor)
    assert not page.can_edit(viewer) and page.can_view(viewer)
    assert not page.can_view(ANONYMOUS)
    assert page.can_edit(Actor("root", is_admin=True))


def test_grants_never_apply_to_unsaved_records():
    grant = Grant(ContentRecord.record_tag(), RecordId(1), Capability.EDIT)
    actor = Actor("a", grants=frozenset({grant}))

    assert not actor.has_grant(ContentRecord(), Capability.EDIT)


def test_edit_link():
    assert ContentRecord(id=RecordId(3)).edit_link() == "/admin/pages/edit/show/3"
    assert ContentRecord().edit_link() == ""


def test_element_controller_wraps_element():
    element = BaseElement(id=RecordId(2), title="Intro")
    controller = element.controller()

    assert controller.element is element
    assert controller.record_id == RecordId(2)
    assert controller.template_name() == "elements/BaseElement"
