"""Topics menu endpoint."""

import structlog
from fastapi import APIRouter, Depends
from pymongo.errors import PyMongoError

from ..auth import get_optional_employee
from ..database import get_db
from ..models import TopicMenuResponse
from ..observability import get_tracer
from ..services.topics import (
    fetch_topics,
    filter_released_topics,
    load_release_schedules,
    record_hidden_topics,
)

# Initialize logger
logger = structlog.get_logger(__name__)

# Get tracer
tracer = get_tracer(__name__)

router = APIRouter(prefix="/topics", tags=["topics"])


@router.get("", response_model=TopicMenuResponse)
async def list_topics(employee: dict | None = Depends(get_optional_employee)):
    """
    Course topics for the navigation menu.

    With a valid backend token, topics scheduled for a future release in the
    employee's organization are hidden. Without one, every topic is listed.
    """
    with tracer.start_as_current_span("list_topics") as span:
        topics = await fetch_topics()
        span.set_attribute("topics.count", len(topics))

        if employee is None:
            logger.info("topics_listed_unfiltered", count=len(topics))
            return TopicMenuResponse(topics=topics, filtered=False)

        employee_id = employee["sub"]
        span.set_attribute("employee.id", employee_id)

        try:
            schedules = await load_release_schedules(get_db(), employee_id)
        except PyMongoError as e:
            # Empty menu when schedules cannot be read
            span.set_attribute("error", True)
            logger.error("topics_schedules_failed", employee_id=employee_id, error=str(e))
            return TopicMenuResponse(topics=[], filtered=True)

        released = filter_released_topics(topics, schedules)
        record_hidden_topics(len(topics), len(released))

        logger.info(
            "topics_listed", employee_id=employee_id, count=len(released), total=len(topics)
        )
        return TopicMenuResponse(topics=released, filtered=True)
