"""Issue and draft-item result contracts."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

from signalhound.contracts.fields import FieldRole


class Issue(BaseModel):
    """A project item backed by a full GitHub issue."""

    number: int
    title: str
    body: str = ""
    state: str
    url: str

    model_config = {"frozen": True}


class UpdateStatus(StrEnum):
    APPLIED = "applied"
    FAILED = "failed"
    SKIPPED = "skipped"


class FieldUpdateOutcome(BaseModel):
    """Result of setting one semantic field on a freshly created draft item."""

    role: FieldRole
    field_id: str = ""
    option_id: str = ""
    status: UpdateStatus
    error: str | None = None

    model_config = {"frozen": True}


class DraftItemResult(BaseModel):
    """Draft item creation result.

    The draft exists whenever this object is returned. ``updates`` records,
    per role, whether its field value was applied, failed or skipped, so
    callers must not assume every field is populated.
    """

    item_id: str
    updates: list[FieldUpdateOutcome] = Field(default_factory=list)

    @property
    def applied(self) -> list[FieldRole]:
        return [u.role for u in self.updates if u.status == UpdateStatus.APPLIED]

    @property
    def failed(self) -> list[FieldRole]:
        return [u.role for u in self.updates if u.status == UpdateStatus.FAILED]

    @property
    def skipped(self) -> list[FieldRole]:
        return [u.role for u in self.updates if u.status == UpdateStatus.SKIPPED]
