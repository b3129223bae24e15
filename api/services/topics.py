"""Topics menu: fetch topics and hide those scheduled for future release."""

from __future__ import annotations

import os
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Any

import structlog
from motor.motor_asyncio import AsyncIOMotorDatabase
from opentelemetry import trace

from connectors.topics import TopicsConnector, TopicsError

from ..observability import get_app_metrics

logger = structlog.get_logger(__name__)
tracer = trace.get_tracer(__name__)

TOPICS_API_URL = os.getenv("TOPICS_API_URL", "http://localhost:3000/api/topics")
TOPICS_TIMEOUT = float(os.getenv("TOPICS_TIMEOUT", "10"))


def parse_schedule_time(value: Any) -> datetime | None:
    """Read a schedule_at value: epoch milliseconds, ISO text, or datetime."""
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return datetime.fromtimestamp(value / 1000, tz=UTC)
    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)
    return None


def filter_released_topics(
    topics: Iterable[dict[str, Any]],
    schedules: list[dict[str, Any]],
    now: datetime | None = None,
) -> list[dict[str, Any]]:
    """
    Drop topics whose scheduled release is not yet reached.

    Topics without a schedule entry are always shown; with no schedules at
    all, every topic is shown.
    """
    topics = list(topics)
    if not schedules:
        return topics

    now = now or datetime.now(UTC)
    release_at: dict[str, Any] = {}
    for schedule in schedules:
        if schedule and schedule.get("topic_id") is not None:
            release_at.setdefault(str(schedule["topic_id"]), schedule.get("schedule_at"))

    released = []
    for topic in topics:
        key = str(topic.get("id"))
        if key not in release_at:
            released.append(topic)
            continue
        scheduled = parse_schedule_time(release_at[key])
        # An unreadable time never passes the release check
        if scheduled is not None and scheduled < now:
            released.append(topic)

    return released


async def load_release_schedules(
    db: AsyncIOMotorDatabase, employee_id: str
) -> list[dict[str, Any]]:
    """
    Release schedules for the employee's organization.

    profiles.id -> admin_id (organization) -> schedule_organizations.parent_id
    -> schedules.
    """
    with tracer.start_as_current_span("topics.load_release_schedules") as span:
        span.set_attribute("employee.id", employee_id)

        profile = await db.profiles.find_one({"id": employee_id}, {"admin_id": 1})
        organization_id = profile.get("admin_id") if profile else None
        if not organization_id:
            logger.info("topics_no_organization", employee_id=employee_id)
            return []

        links = await db.schedule_organizations.find(
            {"organization_id": organization_id}, {"parent_id": 1}
        ).to_list(length=None)
        parent_ids = [link["parent_id"] for link in links if link.get("parent_id") is not None]
        if not parent_ids:
            return []

        schedules = await db.schedules.find(
            {"id": {"$in": parent_ids}}, {"_id": 0, "id": 1, "topic_id": 1, "schedule_at": 1}
        ).to_list(length=None)

        span.set_attribute("schedules.count", len(schedules))
        logger.debug(
            "topics_schedules_loaded", organization_id=organization_id, count=len(schedules)
        )
        return schedules


async def fetch_topics(url: str | None = None, timeout: float | None = None) -> list[dict]:
    """Fetch topic documents, returning an empty list if the endpoint fails."""
    connector = TopicsConnector(url or TOPICS_API_URL, timeout=timeout or TOPICS_TIMEOUT)
    try:
        async with connector:
            return await connector.list_topics()
    except TopicsError as e:
        logger.error("topics_fetch_failed", error=str(e))
        return []


def record_hidden_topics(before: int, after: int) -> None:
    hidden = before - after
    if hidden:
        get_app_metrics().topics_hidden.add(hidden)
        logger.info("topics_hidden_by_schedule", hidden=hidden)
