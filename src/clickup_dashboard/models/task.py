"""
ClickUp Task Models.

Immutable snapshots of the task payload returned by
``GET /list/{list_id}/task``. Only the fields the dashboard consumes are
modelled; everything else in the payload is ignored.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ClickUpModel(BaseModel):
    """Base model for all ClickUp payload snapshots."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )


class User(ClickUpModel):
    """A ClickUp account (creator, assignee or checklist item assignee)."""

    id: int
    username: str
    email: Optional[str] = None
    color: Optional[str] = None
    profile_picture: Optional[str] = Field(default=None, alias="profilePicture")


class Status(ClickUpModel):
    """Task status as configured on the list."""

    status: str
    color: str
    id: Optional[str] = None
    type: Optional[str] = None
    orderindex: Optional[int] = None

    @property
    def name(self) -> str:
        return self.status


class Priority(ClickUpModel):
    """Task priority (urgent, high, normal, low)."""

    priority: str
    color: Optional[str] = None
    id: Optional[str] = None
    orderindex: Optional[str] = None

    @property
    def name(self) -> str:
        return self.priority


class Tag(ClickUpModel):
    """Task tag."""

    name: str
    tag_fg: Optional[str] = None
    tag_bg: Optional[str] = None


class ChecklistItem(ClickUpModel):
    """A single checklist entry (subtask)."""

    id: Optional[str] = None
    name: str = ""
    resolved: bool
    assignee: Optional[User] = None
    orderindex: Optional[float] = None
    parent: Optional[str] = None


class Checklist(ClickUpModel):
    """
    A named group of checklist items.

    ``resolved`` and ``unresolved`` are the counts precomputed by ClickUp.
    They are trusted as-is for every aggregate; ``is_consistent`` reports
    whether they agree with the item flags.
    """

    id: Optional[str] = None
    name: str = ""
    resolved: int = Field(ge=0)
    unresolved: int = Field(ge=0)
    items: List[ChecklistItem] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return self.resolved + self.unresolved

    @property
    def is_consistent(self) -> bool:
        done = sum(1 for item in self.items if item.resolved)
        return done == self.resolved and len(self.items) - done == self.unresolved


class ListRef(ClickUpModel):
    """Back-reference from a task to the list it belongs to."""

    id: str
    name: str = ""


class Task(ClickUpModel):
    """A ClickUp task."""

    id: str
    name: str
    description: Optional[str] = ""
    status: Status
    priority: Optional[Priority] = None
    creator: Optional[User] = None
    assignees: List[User] = Field(default_factory=list)
    checklists: List[Checklist] = Field(default_factory=list)
    tags: List[Tag] = Field(default_factory=list)
    date_created: Optional[str] = ""
    date_updated: Optional[str] = ""
    due_date: Optional[str] = None
    time_estimate: Optional[int] = None
    time_spent: Optional[int] = None
    url: Optional[str] = ""
    list_ref: Optional[ListRef] = Field(default=None, alias="list")

    @field_validator("assignees", "checklists", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("tags", mode="before")
    @classmethod
    def coerce_tag_names(cls, v: Any) -> Any:
        if v is None:
            return []
        # Older payloads carry tags as bare names.
        return [{"name": t} if isinstance(t, str) else t for t in v]

    @property
    def assignee_names(self) -> list[str]:
        return [a.username for a in self.assignees]

    @property
    def has_checklists(self) -> bool:
        return len(self.checklists) > 0

    @property
    def checklist_resolved(self) -> int:
        """Resolved checklist items across all of this task's checklists."""
        return sum(cl.resolved for cl in self.checklists)

    @property
    def checklist_total(self) -> int:
        """All checklist items across all of this task's checklists."""
        return sum(cl.total for cl in self.checklists)
