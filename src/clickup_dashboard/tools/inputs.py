"""
Pydantic Input Models for ClickUp Dashboard Tools.

This module defines the input validation models used by the MCP tools.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict, field_validator


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    MARKDOWN = "markdown"
    JSON = "json"


class BaseMCPInput(BaseModel):
    """Base input model with common configuration."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="forbid",
    )


class ListDashboardInput(BaseMCPInput):
    """Input for building the dashboard of a list."""

    list_id: str = Field(
        ...,
        description="ClickUp list ID (e.g., '901234567'), as shown in the list URL",
        min_length=1,
        max_length=64,
    )
    api_key: Optional[str] = Field(
        default=None,
        description="ClickUp API token. Defaults to the CLICKUP_API_KEY setting.",
    )
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable, 'json' for machine-readable",
    )

    @field_validator("api_key")
    @classmethod
    def blank_key_as_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None


class ListTasksInput(ListDashboardInput):
    """Input for listing the tasks of a list with per-task details."""

    limit: int = Field(
        default=50,
        description="Maximum number of tasks to return",
        ge=1,
        le=100,
    )
