"""
ClickUp Dashboard Data Models.

This package provides immutable Pydantic models for the ClickUp task
payload and for the aggregated dashboard built from it.

Models:
    - Task: ClickUp task snapshot
    - Status, Priority, Tag: Task attributes
    - Checklist, ChecklistItem: Subtask groups and entries
    - User: Creator/assignee identity
    - ListRef: Task-to-list back-reference
    - DashboardSummary: List-level aggregate
    - Dashboard: Summary plus chart-ready distributions
"""

from clickup_dashboard.models.task import (
    Task,
    Status,
    Priority,
    Tag,
    Checklist,
    ChecklistItem,
    User,
    ListRef,
)
from clickup_dashboard.models.dashboard import (
    DashboardSummary,
    StatusSlice,
    PriorityBar,
    AssigneeLoad,
    SubtaskSlice,
    ChecklistStats,
    Dashboard,
)

__all__ = [
    "Task",
    "Status",
    "Priority",
    "Tag",
    "Checklist",
    "ChecklistItem",
    "User",
    "ListRef",
    "DashboardSummary",
    "StatusSlice",
    "PriorityBar",
    "AssigneeLoad",
    "SubtaskSlice",
    "ChecklistStats",
    "Dashboard",
]
