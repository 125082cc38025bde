#!/usr/bin/env python3
"""
ClickUp Dashboard MCP Server.

This server exposes ClickUp list analytics as MCP tools: the tasks of a
list are fetched once and aggregated into status, priority, workload and
checklist metrics.

Features:
    - List dashboard (summary, distributions, checklist completion)
    - Per-task details for a list

Environment Variables:
    CLICKUP_API_KEY       Default API token (tools may pass their own)
    CLICKUP_API_BASE_URL  Optional API root override
    CLICKUP_TIMEOUT       Optional request timeout in seconds
    CLICKUP_LOG_LEVEL     Optional logging level
"""

from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from mcp.server.fastmcp import FastMCP, Context

from clickup_dashboard.client import ClickUpDashboardClient
from clickup_dashboard.exceptions import (
    ClickUpAPIError,
    ClickUpConfigurationError,
    ClickUpEmptyResultError,
    ClickUpNetworkError,
    ClickUpValidationError,
)
from clickup_dashboard.settings import get_settings
from clickup_dashboard.tools.inputs import (
    ResponseFormat,
    ListDashboardInput,
    ListTasksInput,
)
from clickup_dashboard.tools.formatting import (
    format_dashboard_markdown,
    format_dashboard_json,
    format_tasks_markdown,
    format_tasks_json,
    error_message,
)

# Configure logging
logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Management
# =============================================================================


@asynccontextmanager
async def lifespan(mcp: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """
    Manage the ClickUp client lifecycle.

    Initializes the client on startup and closes it on shutdown.
    """
    logger.info("Initializing ClickUp Dashboard MCP Server...")

    client = ClickUpDashboardClient.from_settings()
    try:
        await client.connect()
        if not client.has_api_key:
            logger.warning("CLICKUP_API_KEY is not set; tools must pass api_key")
        yield {"client": client}
    finally:
        await client.disconnect()
        logger.info("ClickUp client disconnected")


# Initialize FastMCP server
mcp = FastMCP(
    "clickup_dashboard",
    lifespan=lifespan,
)


def get_client(ctx: Context) -> ClickUpDashboardClient:
    """Get the ClickUp client from context."""
    return ctx.request_context.lifespan_context["client"]


# =============================================================================
# Error Handling
# =============================================================================


def handle_error(e: Exception, operation: str) -> str:
    """Handle exceptions and return user-friendly error messages."""
    if isinstance(e, (ClickUpValidationError, ClickUpEmptyResultError)):
        logger.info("%s: %s", operation, e)
    else:
        logger.exception("Error in %s: %s", operation, e)

    if isinstance(e, ClickUpValidationError):
        return error_message(
            str(e),
            "Provide a list ID and an API key, or set CLICKUP_API_KEY.",
        )
    elif isinstance(e, ClickUpNetworkError):
        return error_message(str(e), "Check your network connection and try again.")
    elif isinstance(e, ClickUpEmptyResultError):
        return error_message(str(e), "Verify the list ID points to a list with tasks.")
    elif isinstance(e, ClickUpAPIError):
        return error_message(str(e), "Verify the list ID and API key are correct.")
    elif isinstance(e, ClickUpConfigurationError):
        return error_message(
            f"Configuration error: {e}",
            "Check your environment variables and settings.",
        )
    else:
        return error_message(f"Unexpected error: {e}")


# =============================================================================
# Dashboard Tools
# =============================================================================


@mcp.tool(
    name="clickup_get_list_dashboard",
    annotations={
        "title": "Get List Dashboard",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": True,
    },
)
async def clickup_get_list_dashboard(params: ListDashboardInput, ctx: Context) -> str:
    """
    Build an analytics dashboard for a ClickUp list.

    Fetches every task of the list and aggregates them into a summary
    (most common status and priority, assignees, time totals) plus chart
    data: status and priority distributions, assignee workload and
    checklist completion.

    Args:
        params: Dashboard parameters including:
            - list_id (str): ClickUp list ID (required)
            - api_key (str): API token override
            - response_format (str): 'markdown' or 'json'

    Returns:
        Formatted dashboard or error message.
    """
    try:
        client = get_client(ctx)
        dashboard = await client.get_dashboard(params.list_id, params.api_key)

        if params.response_format == ResponseFormat.MARKDOWN:
            return format_dashboard_markdown(dashboard)
        else:
            return json.dumps(format_dashboard_json(dashboard), indent=2)

    except Exception as e:
        return handle_error(e, "get_list_dashboard")


@mcp.tool(
    name="clickup_list_tasks",
    annotations={
        "title": "List Tasks",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": True,
    },
)
async def clickup_list_tasks(params: ListTasksInput, ctx: Context) -> str:
    """
    List the tasks of a ClickUp list with per-task details.

    Each task shows its status, priority, assignees, time tracking and
    checklist progress.

    Args:
        params: Query parameters including:
            - list_id (str): ClickUp list ID (required)
            - api_key (str): API token override
            - limit (int): Maximum results (default 50)

    Returns:
        Formatted list of tasks or error message.
    """
    try:
        client = get_client(ctx)
        tasks = await client.fetch_tasks(params.list_id, params.api_key)
        shown = tasks[: params.limit]

        if params.response_format == ResponseFormat.MARKDOWN:
            return format_tasks_markdown(shown, total=len(tasks))
        else:
            return json.dumps(format_tasks_json(shown, total=len(tasks)), indent=2)

    except Exception as e:
        return handle_error(e, "list_tasks")


# =============================================================================
# Main Entry Point
# =============================================================================


def main():
    """Main entry point for the ClickUp Dashboard MCP server."""
    mcp.run()


if __name__ == "__main__":
    main()
