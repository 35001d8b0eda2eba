"""Project field contracts.

Fields on a GitHub project are discovered at runtime. These models carry the
normalized schema (:class:`FieldInfo`) and the outcome of matching semantic
roles against it (:class:`FieldResolution`).
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum

from pydantic import BaseModel, Field


class FieldKind(StrEnum):
    """Closed set of remote field shapes the engine understands."""

    SINGLE_SELECT = "ProjectV2SingleSelectField"
    ITERATION = "ProjectV2IterationField"
    UNKNOWN = "unknown"

    @classmethod
    def from_typename(cls, typename: object) -> FieldKind:
        for kind in (cls.SINGLE_SELECT, cls.ITERATION):
            if typename == kind.value:
                return kind
        return cls.UNKNOWN


class FieldRole(StrEnum):
    """Semantic roles resolved against the project schema."""

    RELEASE = "release"
    VIEW = "view"
    STATUS = "status"
    BOARD = "board"

    @property
    def display_name(self) -> str:
        return _ROLE_DISPLAY_NAMES[self]


_ROLE_DISPLAY_NAMES: dict[FieldRole, str] = {
    FieldRole.RELEASE: "K8s Release",
    FieldRole.VIEW: "View",
    FieldRole.STATUS: "Status",
    FieldRole.BOARD: "Testgrid Board",
}


class FieldInfo(BaseModel):
    """One project field as seen by the engine."""

    id: str
    name: str
    kind: FieldKind = FieldKind.SINGLE_SELECT
    options: dict[str, str] = Field(default_factory=dict)
    """Option display name → opaque option ID, in response order."""

    model_config = {"frozen": True}


class FieldSelection(BaseModel):
    """A ``(field_id, option_id)`` pair; empty strings mean "not found"."""

    field_id: str = ""
    option_id: str = ""

    model_config = {"frozen": True}

    @property
    def is_complete(self) -> bool:
        return bool(self.field_id) and bool(self.option_id)


class FieldResolution(BaseModel):
    """Semantic roles matched to project fields and options."""

    release: FieldSelection = Field(default_factory=FieldSelection)
    view: FieldSelection = Field(default_factory=FieldSelection)
    status: FieldSelection = Field(default_factory=FieldSelection)
    board: FieldSelection = Field(default_factory=FieldSelection)
    release_version: str = ""
    """Version extracted from the selected release option label."""

    model_config = {"frozen": True}

    def get(self, role: FieldRole) -> FieldSelection:
        return getattr(self, role.value)

    def updates(self) -> Iterator[tuple[FieldRole, FieldSelection]]:
        """Yield selections in update order: release, view, status, board."""
        for role in (FieldRole.RELEASE, FieldRole.VIEW, FieldRole.STATUS, FieldRole.BOARD):
            yield role, self.get(role)
