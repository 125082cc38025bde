"""
ClickUp API Client.

Low-level async client for the ClickUp v2 REST API. It issues a single
``GET /list/{list_id}/task`` request and normalizes every failure into
one of the package exceptions:

    - ClickUpNetworkError: the API could not be reached
    - ClickUpAPIError: non-2xx response, or a payload that fails validation
    - ClickUpEmptyResultError: 2xx response without any task

There are no retries and no pagination; the first page is treated as the
complete list.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from clickup_dashboard.constants import CLICKUP_API_BASE_URL, DEFAULT_TIMEOUT
from clickup_dashboard.exceptions import (
    ClickUpAPIError,
    ClickUpEmptyResultError,
    ClickUpNetworkError,
    ClickUpValidationError,
)
from clickup_dashboard.models import Task

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="ClickUpAPI")


def extract_error_message(body: Any, status_code: int) -> str:
    """
    Pick the most useful message out of an error response body.

    Checked in order: ``err``, ``message``, ``ECODE``. Empty values fall
    through to the next candidate, and a synthesized message with the HTTP
    status is used when none is present.
    """
    if isinstance(body, dict):
        for key in ("err", "message", "ECODE"):
            value = body.get(key)
            if value:
                return str(value)
    return f"Failed to fetch tasks from ClickUp (Status: {status_code})"


class ClickUpAPI:
    """
    Async ClickUp v2 API client.

    Usage:
        async with ClickUpAPI() as api:
            tasks = await api.fetch_tasks("901234567", "pk_...")
    """

    def __init__(
        self,
        base_url: str = CLICKUP_API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def is_open(self) -> bool:
        return self._http is not None and not self._http.is_closed

    def _get_http(self) -> httpx.AsyncClient:
        if not self.is_open:
            self._http = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=httpx.Timeout(self._timeout),
                transport=self._transport,
            )
        return self._http  # type: ignore[return-value]

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def __aenter__(self: T) -> T:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    # =========================================================================
    # Tasks
    # =========================================================================

    async def fetch_tasks(self, list_id: str, credential: str) -> list[Task]:
        """
        Fetch all tasks of a list.

        Args:
            list_id: ClickUp list identifier
            credential: API token, sent verbatim as the Authorization header

        Returns:
            Non-empty list of tasks

        Raises:
            ClickUpValidationError: list_id or credential is blank
            ClickUpNetworkError: transport failure
            ClickUpAPIError: non-2xx response or malformed payload
            ClickUpEmptyResultError: the list has no tasks
        """
        list_id = (list_id or "").strip()
        credential = (credential or "").strip()
        if not list_id:
            raise ClickUpValidationError("Please enter a list ID")
        if not credential:
            raise ClickUpValidationError("Please enter your ClickUp API key")

        headers = {
            "Authorization": credential,
            "Content-Type": "application/json",
        }

        logger.debug("Fetching tasks for list %s", list_id)
        try:
            response = await self._get_http().get(
                f"/list/{quote(list_id, safe='')}/task", headers=headers
            )
        except httpx.RequestError as e:
            logger.warning("ClickUp request for list %s failed: %s", list_id, e)
            raise ClickUpNetworkError(f"Could not reach ClickUp: {e}", cause=e) from e

        if not response.is_success:
            body = self._json_or_none(response)
            message = extract_error_message(body, response.status_code)
            logger.warning(
                "ClickUp returned %s for list %s: %s",
                response.status_code, list_id, message,
            )
            raise ClickUpAPIError(
                message,
                status_code=response.status_code,
                response_body=body,
            )

        data = self._json_or_none(response)
        raw_tasks = data.get("tasks") if isinstance(data, dict) else None
        if not raw_tasks:
            raise ClickUpEmptyResultError("No tasks found in this list")

        try:
            tasks = [Task.model_validate(raw) for raw in raw_tasks]
        except ValidationError as e:
            logger.error("Malformed task payload for list %s: %s", list_id, e)
            raise ClickUpAPIError(
                f"Unexpected task data from ClickUp ({e.error_count()} invalid field(s))",
                status_code=response.status_code,
                response_body=data,
            ) from e

        logger.info("Fetched %d tasks for list %s", len(tasks), list_id)
        return tasks

    @staticmethod
    def _json_or_none(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None
