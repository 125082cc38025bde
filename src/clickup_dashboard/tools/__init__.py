"""
ClickUp Dashboard Tools Package.

This package provides the MCP tool inputs and output formatting:
    - Input models (dashboard, task listing)
    - Markdown/JSON formatting of dashboards and tasks
"""

from clickup_dashboard.tools.inputs import (
    ResponseFormat,
    ListDashboardInput,
    ListTasksInput,
)

__all__ = [
    "ResponseFormat",
    "ListDashboardInput",
    "ListTasksInput",
]
