"""
Derived Distributions.

Chart-ready metrics computed from the raw task list (never from the
summary). Every function is pure; entries come out in first-seen order.

Two assignee scopes are kept apart on purpose: workload counts task-level
assignees, while the contributor set only looks at checklist items.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from clickup_dashboard.aggregation.summary import summarize
from clickup_dashboard.constants import (
    COMPLETED_COLOR,
    DEFAULT_STATUS_COLOR,
    IN_PROGRESS_COLOR,
    NO_PRIORITY,
    NO_PRIORITY_COLOR,
    PRIORITY_COLOR,
    SUBTASKS_COMPLETED,
    SUBTASKS_IN_PROGRESS,
    UNASSIGNED,
)
from clickup_dashboard.models import (
    AssigneeLoad,
    ChecklistStats,
    Dashboard,
    PriorityBar,
    StatusSlice,
    SubtaskSlice,
    Task,
)


# =============================================================================
# Status / Priority / Assignees
# =============================================================================


def status_distribution(tasks: Iterable[Task]) -> list[StatusSlice]:
    """Task count per status name, colored by the first task with that status."""
    counts: dict[str, int] = {}
    colors: dict[str, str] = {}
    for task in tasks:
        name = task.status.status
        counts[name] = counts.get(name, 0) + 1
        colors.setdefault(name, task.status.color or DEFAULT_STATUS_COLOR)
    return [
        StatusSlice(label=name, value=count, color=colors[name])
        for name, count in counts.items()
    ]


def priority_distribution(tasks: Iterable[Task]) -> list[PriorityBar]:
    """
    Task count per priority name.

    Tasks without a priority land in "No Priority", which is always the
    first entry, even with a count of zero.
    """
    counts: dict[str, int] = {NO_PRIORITY: 0}
    for task in tasks:
        name = task.priority.priority if task.priority else NO_PRIORITY
        counts[name] = counts.get(name, 0) + 1
    return [
        PriorityBar(
            label=name,
            count=count,
            color=NO_PRIORITY_COLOR if name == NO_PRIORITY else PRIORITY_COLOR,
        )
        for name, count in counts.items()
    ]


def assignee_workload(tasks: Iterable[Task]) -> list[AssigneeLoad]:
    """
    Task count per assignee username.

    A task with N assignees adds one to each of them; a task with none adds
    one to "Unassigned". "Unassigned" is always the first entry.
    """
    counts: dict[str, int] = {UNASSIGNED: 0}
    for task in tasks:
        if task.assignees:
            for username in task.assignee_names:
                counts[username] = counts.get(username, 0) + 1
        else:
            counts[UNASSIGNED] += 1
    return [AssigneeLoad(label=name, tasks=count) for name, count in counts.items()]


# =============================================================================
# Checklists
# =============================================================================


def task_checklist_progress(task: Task) -> float:
    """Percentage of resolved checklist items for one task (0 when it has none)."""
    total = task.checklist_total
    if total == 0:
        return 0.0
    return task.checklist_resolved / total * 100


def checklist_completion(tasks: Iterable[Task]) -> float:
    """Pooled completion: resolved items over all items, across every task."""
    resolved = 0
    total = 0
    for task in tasks:
        resolved += task.checklist_resolved
        total += task.checklist_total
    if total == 0:
        return 0.0
    return resolved / total * 100


def average_task_progress(tasks: Iterable[Task]) -> float:
    """
    Mean of each task's own completion percentage.

    Only tasks that have at least one checklist count. This is not the
    same number as checklist_completion().
    """
    progress = [task_checklist_progress(t) for t in tasks if t.has_checklists]
    if not progress:
        return 0.0
    return sum(progress) / len(progress)


def subtask_distribution(tasks: Iterable[Task]) -> list[SubtaskSlice]:
    """Completed vs. in-progress checklist items; zero entries are dropped."""
    completed = 0
    total = 0
    for task in tasks:
        completed += task.checklist_resolved
        total += task.checklist_total
    slices = [
        SubtaskSlice(label=SUBTASKS_COMPLETED, value=completed, color=COMPLETED_COLOR),
        SubtaskSlice(label=SUBTASKS_IN_PROGRESS, value=total - completed, color=IN_PROGRESS_COLOR),
    ]
    return [s for s in slices if s.value > 0]


def checklist_stats(tasks: Sequence[Task]) -> ChecklistStats:
    return ChecklistStats(
        total_checklists=sum(len(t.checklists) for t in tasks),
        total_subtasks=sum(t.checklist_total for t in tasks),
        completed_subtasks=sum(t.checklist_resolved for t in tasks),
        tasks_with_checklists=sum(1 for t in tasks if t.has_checklists),
        completion_percent=checklist_completion(tasks),
        average_progress_percent=average_task_progress(tasks),
    )


def checklist_assignees(tasks: Iterable[Task]) -> list[str]:
    """Distinct checklist-item assignee usernames, in first-seen order."""
    seen: dict[str, None] = {}
    for task in tasks:
        for checklist in task.checklists:
            for item in checklist.items:
                if item.assignee and item.assignee.username:
                    seen.setdefault(item.assignee.username)
    return list(seen)


def unique_contributor_count(tasks: Iterable[Task]) -> int:
    return len(checklist_assignees(tasks))


# =============================================================================
# Dashboard
# =============================================================================


def build_dashboard(tasks: Sequence[Task]) -> Dashboard:
    """Summarize a non-empty task list and attach every derived metric."""
    return Dashboard(
        summary=summarize(tasks),
        status_distribution=status_distribution(tasks),
        priority_distribution=priority_distribution(tasks),
        assignee_workload=assignee_workload(tasks),
        subtask_distribution=subtask_distribution(tasks),
        checklist_stats=checklist_stats(tasks),
        checklist_assignees=checklist_assignees(tasks),
    )
