"""ClickUp REST API access."""

from clickup_dashboard.api.client import ClickUpAPI, extract_error_message

__all__ = ["ClickUpAPI", "extract_error_message"]
