"""
Task Aggregation.

Pure functions turning a list of tasks into the dashboard summary and its
chart-ready distributions.
"""

from clickup_dashboard.aggregation.summary import (
    most_common,
    summarize,
    unique_assignees,
)
from clickup_dashboard.aggregation.distributions import (
    assignee_workload,
    average_task_progress,
    build_dashboard,
    checklist_assignees,
    checklist_completion,
    checklist_stats,
    priority_distribution,
    status_distribution,
    subtask_distribution,
    task_checklist_progress,
    unique_contributor_count,
)

__all__ = [
    "most_common",
    "summarize",
    "unique_assignees",
    "assignee_workload",
    "average_task_progress",
    "build_dashboard",
    "checklist_assignees",
    "checklist_completion",
    "checklist_stats",
    "priority_distribution",
    "status_distribution",
    "subtask_distribution",
    "task_checklist_progress",
    "unique_contributor_count",
]
