"""
ClickUp Dashboard Constants.

Endpoints, synthetic bucket labels and the fixed chart palette.
"""

from __future__ import annotations

from typing import Final

# =============================================================================
# API
# =============================================================================

CLICKUP_API_BASE_URL: Final = "https://api.clickup.com/api/v2"
CLICKUP_WEB_TASK_URL: Final = "https://app.clickup.com/t/{id}"

DEFAULT_TIMEOUT: Final = 30.0

# =============================================================================
# Synthetic labels
# =============================================================================

NO_PRIORITY: Final = "No Priority"
UNASSIGNED: Final = "Unassigned"
UNKNOWN_LIST_NAME: Final = "Unknown List"
UNKNOWN_LIST_ID: Final = "unknown"
UNKNOWN_CREATOR: Final = "Unknown"

SUBTASKS_COMPLETED: Final = "Completed"
SUBTASKS_IN_PROGRESS: Final = "In Progress"

# =============================================================================
# Chart colors
# =============================================================================

DEFAULT_STATUS_COLOR: Final = "#3b82f6"
NO_PRIORITY_COLOR: Final = "#9ca3af"
PRIORITY_COLOR: Final = "#ef4444"
COMPLETED_COLOR: Final = "#10b981"
IN_PROGRESS_COLOR: Final = "#f59e0b"

MS_PER_HOUR: Final = 1000 * 60 * 60
