"""
List Summary Aggregation.

Builds the DashboardSummary for a list from its tasks. The list name, list
id, creator and timestamps come from the first task: the summary uses one
member as the representative of the whole list.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, Optional, Sequence

from clickup_dashboard.constants import (
    CLICKUP_WEB_TASK_URL,
    UNKNOWN_CREATOR,
    UNKNOWN_LIST_ID,
    UNKNOWN_LIST_NAME,
)
from clickup_dashboard.models import DashboardSummary, Task

logger = logging.getLogger(__name__)


def most_common(values: Iterable[str]) -> Optional[str]:
    """
    Return the most frequent value, or None for an empty iterable.

    Ties go to the value seen first.
    """
    counts = Counter(values)
    if not counts:
        return None
    # Counter keeps insertion order and max() returns the first maximum.
    return max(counts, key=counts.__getitem__)


def unique_assignees(tasks: Iterable[Task]) -> list[str]:
    """Task-level assignee usernames, deduplicated in first-seen order."""
    seen: dict[str, None] = {}
    for task in tasks:
        for username in task.assignee_names:
            seen.setdefault(username)
    return list(seen)


def summarize(tasks: Sequence[Task]) -> DashboardSummary:
    """
    Aggregate a list's tasks into a single summary.

    Args:
        tasks: Non-empty list of tasks. Callers must not pass an empty list.

    Returns:
        DashboardSummary retaining the full task list
    """
    first = tasks[0]
    list_ref = first.list_ref
    list_name = list_ref.name if list_ref and list_ref.name else UNKNOWN_LIST_NAME
    list_id = list_ref.id if list_ref and list_ref.id else UNKNOWN_LIST_ID

    status = most_common(task.status.status for task in tasks)
    priority = most_common(task.priority.priority for task in tasks if task.priority)

    summary = DashboardSummary(
        list_id=list_id,
        name=f"{list_name} ({len(tasks)} tasks)",
        status=status,
        priority=priority,
        assignees=unique_assignees(tasks),
        time_estimate=sum(task.time_estimate or 0 for task in tasks),
        time_spent=sum(task.time_spent or 0 for task in tasks),
        due_date=None,
        creator=first.creator.username if first.creator else UNKNOWN_CREATOR,
        date_created=first.date_created or "",
        date_updated=first.date_updated or "",
        tags=[],
        url=CLICKUP_WEB_TASK_URL.format(id=list_id) if list_ref and list_ref.id else "",
        tasks=list(tasks),
    )
    logger.debug(
        "Summarized %d tasks for list %s (status=%s, priority=%s)",
        len(tasks), list_id, status, priority,
    )
    return summary
