"""
Pytest Configuration and Fixtures for ClickUp Dashboard Tests.

This module provides fixtures, payload factories, and a mock ClickUp
server for testing the API client, the aggregation engine and the tools.

Architecture:
    - MockClickUpServer: httpx.MockTransport-backed fake of the ClickUp API
    - Factories: Generate ClickUp payloads and Task models
    - Fixtures: Provide configured clients and sample data
    - Markers: Custom pytest markers for test categorization
"""

from __future__ import annotations

from typing import Any, AsyncIterator, Callable

import httpx
import pytest

from clickup_dashboard.api import ClickUpAPI
from clickup_dashboard.client import ClickUpDashboardClient
from clickup_dashboard.models import Task


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "api: Fetch client tests")
    config.addinivalue_line("markers", "aggregation: Summary and distribution tests")
    config.addinivalue_line("markers", "tools: MCP tool and formatting tests")
    config.addinivalue_line("markers", "errors: Error handling tests")
    config.addinivalue_line("markers", "lifecycle: Client lifecycle tests")


# =============================================================================
# ID Generators
# =============================================================================


class IDGenerator:
    """Sequential ID generator for test objects."""

    _counter: int = 0

    @classmethod
    def reset(cls) -> None:
        """Reset counter (call in fixtures)."""
        cls._counter = 0

    @classmethod
    def next_int(cls) -> int:
        cls._counter += 1
        return cls._counter

    @classmethod
    def task_id(cls) -> str:
        """Generate a ClickUp-style task ID."""
        return f"86{cls.next_int():06x}"


# =============================================================================
# Test Data Factories
# =============================================================================


class UserFactory:
    """Factory for ClickUp user payloads."""

    @staticmethod
    def payload(username: str = "alice", id: int | None = None, **kwargs) -> dict[str, Any]:
        return {
            "id": id if id is not None else IDGenerator.next_int(),
            "username": username,
            "email": f"{username.lower().replace(' ', '.')}@example.com",
            "color": "#7b68ee",
            "profilePicture": None,
            **kwargs,
        }


class ChecklistFactory:
    """Factory for ClickUp checklist payloads."""

    @staticmethod
    def payload(
        resolved: int = 0,
        unresolved: int = 0,
        name: str = "Checklist",
        assignees: list[str | None] | None = None,
    ) -> dict[str, Any]:
        """
        Create a checklist whose items agree with the resolved/unresolved counts.

        ``assignees`` gives the item assignee usernames in item order.
        """
        flags = [True] * resolved + [False] * unresolved
        assignees = assignees or []
        items = []
        for i, flag in enumerate(flags):
            username = assignees[i] if i < len(assignees) else None
            items.append({
                "id": f"item-{IDGenerator.next_int()}",
                "name": f"Item {i + 1}",
                "orderindex": i,
                "resolved": flag,
                "assignee": UserFactory.payload(username) if username else None,
                "parent": None,
            })
        return {
            "id": f"cl-{IDGenerator.next_int()}",
            "name": name,
            "resolved": resolved,
            "unresolved": unresolved,
            "items": items,
        }


class TaskFactory:
    """Factory for ClickUp task payloads and Task models."""

    @staticmethod
    def payload(
        name: str = "Test Task",
        status: str = "to do",
        status_color: str = "#d3d3d3",
        priority: str | None = None,
        assignees: list[str] | None = None,
        checklists: list[dict[str, Any]] | None = None,
        creator: str = "creator",
        time_estimate: int | None = None,
        time_spent: int | None = None,
        list_id: str = "901234567",
        list_name: str = "Sprint Board",
        date_created: str = "1700000000000",
        date_updated: str = "1700000500000",
        **kwargs,
    ) -> dict[str, Any]:
        task_id = IDGenerator.task_id()
        return {
            "id": task_id,
            "name": name,
            "description": "",
            "status": {"id": "p1", "status": status, "color": status_color, "orderindex": 0, "type": "open"},
            "priority": (
                {"id": "2", "priority": priority, "color": "#ffcc00", "orderindex": "2"}
                if priority else None
            ),
            "creator": UserFactory.payload(creator),
            "assignees": [UserFactory.payload(a) for a in (assignees or [])],
            "watchers": [],
            "checklists": checklists or [],
            "tags": [],
            "date_created": date_created,
            "date_updated": date_updated,
            "due_date": None,
            "time_estimate": time_estimate,
            "time_spent": time_spent,
            "url": f"https://app.clickup.com/t/{task_id}",
            "list": {"id": list_id, "name": list_name, "access": True},
            "folder": {"id": "f1", "name": "Folder", "hidden": False, "access": True},
            "space": {"id": "s1"},
            **kwargs,
        }

    @staticmethod
    def create(**kwargs) -> Task:
        """Create a Task model from a payload with sensible defaults."""
        return Task.model_validate(TaskFactory.payload(**kwargs))

    @staticmethod
    def create_batch(count: int, **kwargs) -> list[Task]:
        return [TaskFactory.create(name=f"Task {i + 1}", **kwargs) for i in range(count)]

    @staticmethod
    def with_statuses(*statuses: str) -> list[Task]:
        return [TaskFactory.create(status=s) for s in statuses]

    @staticmethod
    def with_priorities(*priorities: str | None) -> list[Task]:
        return [TaskFactory.create(priority=p) for p in priorities]

    @staticmethod
    def with_checklists(*counts: tuple[int, int]) -> Task:
        """Create one task with one checklist per (resolved, unresolved) pair."""
        return TaskFactory.create(
            checklists=[ChecklistFactory.payload(r, u) for r, u in counts],
        )


# =============================================================================
# Mock ClickUp Server
# =============================================================================


class MockClickUpServer:
    """
    Fake ClickUp API behind an httpx.MockTransport.

    Configure ``status_code`` and ``body`` (or ``raw_body``) for the next
    responses, or ``error`` to raise a transport exception instead.
    """

    def __init__(self):
        self.status_code: int = 200
        self.body: Any = {"tasks": []}
        self.raw_body: bytes | None = None
        self.error: Callable[[httpx.Request], Exception] | None = None
        self.requests: list[httpx.Request] = []

    def set_tasks(self, tasks: list[dict[str, Any]]) -> None:
        self.status_code = 200
        self.body = {"tasks": tasks}

    def set_error_response(self, status_code: int, body: Any = None) -> None:
        self.status_code = status_code
        self.body = body

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(request)
        if self.raw_body is not None:
            return httpx.Response(self.status_code, content=self.raw_body)
        if self.body is None:
            return httpx.Response(self.status_code)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "No request was made"
        return self.requests[-1]


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def id_generator():
    """Reset and provide ID generator."""
    IDGenerator.reset()
    return IDGenerator


@pytest.fixture
def clickup_server() -> MockClickUpServer:
    """Create a fresh mock ClickUp server."""
    return MockClickUpServer()


@pytest.fixture
async def api(clickup_server: MockClickUpServer) -> AsyncIterator[ClickUpAPI]:
    """Create a ClickUpAPI wired to the mock server."""
    async with ClickUpAPI(transport=clickup_server.transport) as api:
        yield api


@pytest.fixture
async def client(clickup_server: MockClickUpServer) -> AsyncIterator[ClickUpDashboardClient]:
    """Create a connected ClickUpDashboardClient wired to the mock server."""
    async with ClickUpDashboardClient(
        api_key="pk_test_token",
        transport=clickup_server.transport,
    ) as client:
        yield client


@pytest.fixture
def task_factory() -> type[TaskFactory]:
    """Provide TaskFactory class."""
    return TaskFactory


@pytest.fixture
def sample_tasks() -> list[Task]:
    """A small list with mixed statuses, priorities, assignees and checklists."""
    return [
        TaskFactory.create(
            name="Design API",
            status="in progress",
            status_color="#4194f6",
            priority="high",
            assignees=["alice", "bob"],
            checklists=[ChecklistFactory.payload(2, 2, assignees=["carol", "dave"])],
            time_estimate=3_600_000,
            time_spent=1_800_000,
        ),
        TaskFactory.create(
            name="Write tests",
            status="in progress",
            status_color="#4194f6",
            priority="normal",
            assignees=["alice"],
            checklists=[ChecklistFactory.payload(1, 3, assignees=[None, "carol"])],
            time_estimate=7_200_000,
        ),
        TaskFactory.create(
            name="Ship it",
            status="to do",
            priority="high",
        ),
    ]
