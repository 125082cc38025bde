"""
Response Formatting for ClickUp Dashboard Tools.

Renders dashboards and tasks as Markdown (for humans) or JSON-ready
dictionaries (for machines).
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any

from clickup_dashboard.aggregation import task_checklist_progress
from clickup_dashboard.constants import MS_PER_HOUR
from clickup_dashboard.models import Dashboard, Task


# =============================================================================
# Value Helpers
# =============================================================================


def format_duration(milliseconds: int | None) -> str:
    """Format a millisecond duration as hours, e.g. '1.5h'."""
    if not milliseconds:
        return "N/A"
    return f"{milliseconds / MS_PER_HOUR:.1f}h"


def format_date(timestamp: str | None) -> str:
    """Format a millisecond epoch timestamp string as an ISO date."""
    if not timestamp:
        return "Not set"
    try:
        ms = int(timestamp)
    except ValueError:
        return timestamp
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc).date().isoformat()


def format_percent(value: float) -> str:
    """Round half up to a whole percentage."""
    return f"{math.floor(value + 0.5)}%"


def preview_names(names: list[str], limit: int = 2) -> str:
    """First few names, with '...' when more exist."""
    if not names:
        return "No assignments"
    shown = ", ".join(names[:limit])
    return shown + ("..." if len(names) > limit else "")


def error_message(message: str, hint: str | None = None) -> str:
    lines = [f"**Error**: {message}"]
    if hint:
        lines.append(f"\n_Hint_: {hint}")
    return "\n".join(lines)


# =============================================================================
# Tasks
# =============================================================================


def format_task_markdown(task: Task) -> str:
    """Format a single task as Markdown."""
    lines = [f"## {task.name}", ""]
    lines.append(f"- **ID**: `{task.id}`")
    lines.append(f"- **Status**: {task.status.status}")
    lines.append(f"- **Priority**: {task.priority.priority if task.priority else 'None'}")
    lines.append(f"- **Assignees**: {', '.join(task.assignee_names) or 'None'}")
    lines.append(f"- **Created**: {format_date(task.date_created)}")
    lines.append(f"- **Due**: {format_date(task.due_date)}")
    lines.append(
        f"- **Time**: {format_duration(task.time_spent)} spent / "
        f"{format_duration(task.time_estimate)} estimated"
    )

    if task.has_checklists:
        lines.append(
            f"- **Checklists ({len(task.checklists)})**: "
            f"{task.checklist_resolved}/{task.checklist_total} "
            f"({format_percent(task_checklist_progress(task))})"
        )
        for checklist in task.checklists:
            progress = checklist.resolved / checklist.total * 100 if checklist.total else 0.0
            lines.append(
                f"  - {checklist.name}: {checklist.resolved}/{checklist.total} "
                f"({format_percent(progress)} complete)"
            )
            for item in checklist.items:
                mark = "x" if item.resolved else " "
                owner = f" ({item.assignee.username})" if item.assignee else ""
                lines.append(f"    - [{mark}] {item.name}{owner}")

    if task.tags:
        lines.append(f"- **Tags**: {', '.join(tag.name for tag in task.tags)}")
    if task.url:
        lines.append(f"- **Link**: {task.url}")

    return "\n".join(lines)


def format_task_json(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "name": task.name,
        "status": task.status.status,
        "priority": task.priority.priority if task.priority else None,
        "assignees": task.assignee_names,
        "creator": task.creator.username if task.creator else None,
        "date_created": task.date_created,
        "due_date": task.due_date,
        "time_estimate": task.time_estimate,
        "time_spent": task.time_spent,
        "checklists": len(task.checklists),
        "subtasks_completed": task.checklist_resolved,
        "subtasks_total": task.checklist_total,
        "progress_percent": task_checklist_progress(task),
        "tags": [tag.name for tag in task.tags],
        "url": task.url,
    }


def format_tasks_markdown(tasks: list[Task], total: int | None = None) -> str:
    total = len(tasks) if total is None else total
    if not tasks:
        return "No tasks found."
    header = f"# Tasks ({len(tasks)} of {total})" if total != len(tasks) else f"# Tasks ({total})"
    return "\n\n".join([header] + [format_task_markdown(t) for t in tasks])


def format_tasks_json(tasks: list[Task], total: int | None = None) -> dict[str, Any]:
    return {
        "count": len(tasks),
        "total": len(tasks) if total is None else total,
        "tasks": [format_task_json(t) for t in tasks],
    }


# =============================================================================
# Dashboard
# =============================================================================


def format_dashboard_markdown(dashboard: Dashboard) -> str:
    """Format a dashboard snapshot as Markdown."""
    summary = dashboard.summary
    stats = dashboard.checklist_stats

    lines = [
        f"# {summary.name}",
        "",
        "## Overview",
        "",
        f"- **List ID**: `{summary.list_id}`",
        f"- **Overall Status**: {summary.status}",
        f"- **Top Priority**: {summary.priority or 'None'}",
        f"- **Creator**: {summary.creator}",
        f"- **Created**: {format_date(summary.date_created)}",
        f"- **Updated**: {format_date(summary.date_updated)}",
        f"- **Time Estimate**: {format_duration(summary.time_estimate)}",
        f"- **Time Spent**: {format_duration(summary.time_spent)}",
        f"- **Assignees**: {', '.join(summary.assignees) or 'None'}",
    ]
    if summary.url:
        lines.append(f"- **Open in ClickUp**: {summary.url}")

    lines.extend([
        "",
        "## Checklists",
        "",
        f"- **Total Checklists**: {stats.total_checklists}",
        f"- **All Subtasks**: {stats.total_subtasks}",
        f"- **Completed**: {stats.completed_subtasks}",
        f"- **With Checklists**: {stats.tasks_with_checklists}",
        f"- **Completion**: {format_percent(stats.completion_percent)}",
        f"- **Avg Progress**: {format_percent(stats.average_progress_percent)}",
        f"- **Assigned Members**: {dashboard.contributor_count} "
        f"({preview_names(dashboard.checklist_assignees)})",
        "",
        "## Status Distribution",
        "",
    ])
    lines.extend(f"- {s.label}: {s.value}" for s in dashboard.status_distribution)

    lines.extend(["", "## Priority Distribution", ""])
    lines.extend(f"- {p.label}: {p.count}" for p in dashboard.priority_distribution)

    lines.extend(["", "## Assignee Workload", ""])
    lines.extend(f"- {a.label}: {a.tasks}" for a in dashboard.assignee_workload)

    if dashboard.subtask_distribution:
        lines.extend(["", "## Subtask Status", ""])
        lines.extend(f"- {s.label}: {s.value}" for s in dashboard.subtask_distribution)

    return "\n".join(lines)


def format_dashboard_json(dashboard: Dashboard) -> dict[str, Any]:
    """Format a dashboard snapshot as a JSON-ready dictionary."""
    summary = dashboard.summary.model_dump(mode="json", exclude={"tasks"})
    summary["task_count"] = dashboard.summary.task_count
    stats = dashboard.checklist_stats.model_dump(mode="json")
    stats["incomplete_subtasks"] = dashboard.checklist_stats.incomplete_subtasks
    return {
        "summary": summary,
        "status_distribution": [s.model_dump(mode="json") for s in dashboard.status_distribution],
        "priority_distribution": [p.model_dump(mode="json") for p in dashboard.priority_distribution],
        "assignee_workload": [a.model_dump(mode="json") for a in dashboard.assignee_workload],
        "subtask_distribution": [s.model_dump(mode="json") for s in dashboard.subtask_distribution],
        "checklist_stats": stats,
        "checklist_assignees": dashboard.checklist_assignees,
        "contributor_count": dashboard.contributor_count,
    }
