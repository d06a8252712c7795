"""Core type definitions for contentarea."""

from enum import Enum


class Stage(Enum):
    """Storage stage of a versioned record set."""

    DRAFT = "Stage"
    LIVE = "Live"


class Capability(Enum):
    """Per-record capability an actor can hold."""

    VIEW = "view"
    EDIT = "edit"
