"""
Dashboard Models.

The aggregation engine's output: the list-level summary, chart-ready
distribution entries and the complete dashboard snapshot handed to the
presentation layer.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from clickup_dashboard.models.task import Task


class DashboardModel(BaseModel):
    """Base model for aggregation output."""

    model_config = ConfigDict(frozen=True)


class DashboardSummary(DashboardModel):
    """
    Aggregated record representing an entire list.

    ``list_id``, ``creator``, ``date_created`` and ``date_updated`` are
    taken from the first task of the list, not computed across all tasks.
    ``tags`` and ``due_date`` are never aggregated and stay empty.
    """

    list_id: str
    name: str
    status: str
    priority: Optional[str] = None
    assignees: List[str] = Field(default_factory=list)
    time_estimate: int = 0
    time_spent: int = 0
    due_date: Optional[str] = None
    creator: str
    date_created: str = ""
    date_updated: str = ""
    tags: List[str] = Field(default_factory=list)
    url: str = ""
    tasks: List[Task] = Field(default_factory=list)

    @property
    def task_count(self) -> int:
        return len(self.tasks)


class StatusSlice(DashboardModel):
    """Status pie chart entry."""

    label: str
    value: int
    color: str


class PriorityBar(DashboardModel):
    """Priority bar chart entry."""

    label: str
    count: int
    color: str


class AssigneeLoad(DashboardModel):
    """Assignee workload bar chart entry."""

    label: str
    tasks: int


class SubtaskSlice(DashboardModel):
    """Subtask completion pie chart entry."""

    label: str
    value: int
    color: str


class ChecklistStats(DashboardModel):
    """
    Checklist/subtask totals for a set of tasks.

    ``completion_percent`` is the pooled ratio of resolved items over all
    items. ``average_progress_percent`` averages each task's own ratio over
    the tasks that have checklists. The two are not equivalent.
    """

    total_checklists: int = 0
    total_subtasks: int = 0
    completed_subtasks: int = 0
    tasks_with_checklists: int = 0
    completion_percent: float = 0.0
    average_progress_percent: float = 0.0

    @property
    def incomplete_subtasks(self) -> int:
        return self.total_subtasks - self.completed_subtasks


class Dashboard(DashboardModel):
    """Complete dashboard snapshot: summary plus every derived metric."""

    summary: DashboardSummary
    status_distribution: List[StatusSlice] = Field(default_factory=list)
    priority_distribution: List[PriorityBar] = Field(default_factory=list)
    assignee_workload: List[AssigneeLoad] = Field(default_factory=list)
    subtask_distribution: List[SubtaskSlice] = Field(default_factory=list)
    checklist_stats: ChecklistStats = Field(default_factory=ChecklistStats)
    checklist_assignees: List[str] = Field(default_factory=list)

    @property
    def contributor_count(self) -> int:
        """Distinct checklist-item assignees."""
        return len(self.checklist_assignees)

    @property
    def tasks(self) -> list[Task]:
        return self.summary.tasks
