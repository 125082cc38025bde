"""
ClickUp Dashboard - task list analytics for ClickUp.

This package fetches every task of a ClickUp list and turns them into
aggregated, chart-ready metrics: status and priority distributions,
assignee workload, checklist completion and contributor counts.

Architecture:
    MCP Tools Layer
         │
         ▼
    ClickUpDashboardClient (fetch → summarize → dashboard)
         │
    ┌────┴─────────┐
    ▼              ▼
  ClickUpAPI    Aggregation
  (httpx)       (pure functions)
"""

__version__ = "0.1.0"
__author__ = "ClickUp Dashboard Contributors"

from clickup_dashboard.exceptions import (
    ClickUpError,
    ClickUpNetworkError,
    ClickUpAPIError,
    ClickUpEmptyResultError,
    ClickUpValidationError,
    ClickUpConfigurationError,
)

__all__ = [
    "__version__",
    "ClickUpError",
    "ClickUpNetworkError",
    "ClickUpAPIError",
    "ClickUpEmptyResultError",
    "ClickUpValidationError",
    "ClickUpConfigurationError",
]
