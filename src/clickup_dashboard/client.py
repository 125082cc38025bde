"""
ClickUp Dashboard Client.

High-level entry point: fetches a list's tasks and turns them into a
summary or a full dashboard snapshot.

Usage:
    async with ClickUpDashboardClient(api_key="pk_...") as client:
        dashboard = await client.get_dashboard("901234567")
        print(dashboard.summary.name)
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TypeVar

import httpx

from clickup_dashboard.aggregation import build_dashboard, summarize
from clickup_dashboard.api import ClickUpAPI
from clickup_dashboard.constants import CLICKUP_API_BASE_URL, DEFAULT_TIMEOUT
from clickup_dashboard.exceptions import (
    ClickUpConfigurationError,
    ClickUpValidationError,
)
from clickup_dashboard.models import Dashboard, DashboardSummary, Task
from clickup_dashboard.settings import Settings, get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="ClickUpDashboardClient")


class ClickUpDashboardClient:
    """
    Fetch-and-aggregate client for ClickUp lists.

    The API key given here is the default credential; every call may
    override it with its own ``api_key``.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = CLICKUP_API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._api = ClickUpAPI(base_url=base_url, timeout=timeout, transport=transport)
        self._connected = False

    @classmethod
    def from_settings(cls: type[T], settings: Settings | None = None) -> T:
        """Create a client from environment settings."""
        settings = settings or get_settings()
        return cls(
            api_key=settings.get_api_key(),
            base_url=settings.api_base_url,
            timeout=settings.timeout,
        )

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def connect(self) -> None:
        """Mark the client ready. The HTTP connection itself is opened lazily."""
        if self._connected:
            return
        self._connected = True
        logger.info("ClickUp dashboard client connected to %s", self._api.base_url)

    async def disconnect(self) -> None:
        """Release the HTTP connection."""
        await self._api.close()
        self._connected = False

    async def __aenter__(self: T) -> T:
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.disconnect()

    @property
    def is_connected(self) -> bool:
        return self._connected

    @property
    def has_api_key(self) -> bool:
        return bool(self._api_key)

    def _ensure_connected(self) -> None:
        if not self._connected:
            raise ClickUpConfigurationError(
                "Client not connected. Use 'await client.connect()' or async context manager."
            )

    def _resolve_api_key(self, api_key: str | None) -> str:
        key = (api_key or "").strip() or (self._api_key or "").strip()
        if not key:
            raise ClickUpValidationError("Please enter your ClickUp API key")
        return key

    # =========================================================================
    # Operations
    # =========================================================================

    async def fetch_tasks(self, list_id: str, api_key: str | None = None) -> list[Task]:
        """Fetch every task of a list."""
        self._ensure_connected()
        if not (list_id or "").strip():
            raise ClickUpValidationError("Please enter a list ID")
        return await self._api.fetch_tasks(list_id, self._resolve_api_key(api_key))

    async def get_summary(self, list_id: str, api_key: str | None = None) -> DashboardSummary:
        """Fetch a list and aggregate it into a DashboardSummary."""
        tasks = await self.fetch_tasks(list_id, api_key)
        return summarize(tasks)

    async def get_dashboard(self, list_id: str, api_key: str | None = None) -> Dashboard:
        """Fetch a list and build the full dashboard snapshot."""
        tasks = await self.fetch_tasks(list_id, api_key)
        return build_dashboard(tasks)
