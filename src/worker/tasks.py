"""Celery tasks for the telemetry side channel."""

from functools import lru_cache

from celery.utils.log import get_task_logger
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from config import settings
from db.repositories import TelemetryEventRepository
from worker.celery_app import celery_app

# Logger for tasks
logger = get_task_logger(__name__)


@lru_cache(maxsize=1)
def _session_factory() -> sessionmaker:
    # Celery doesn't play well with async, so tasks use sync SQLAlchemy
    sync_database_url = (
        settings.database_url
        .replace("+asyncpg", "+psycopg2")
        .replace("+aiosqlite", "")
    )
    return sessionmaker(bind=create_engine(sync_database_url))


def get_sync_session() -> Session:
    """Get a synchronous database session for Celery tasks."""
    return _session_factory()()


@celery_app.task(bind=True, name="worker.tasks.record_event")
def record_event(self, name: str, properties: dict | None = None) -> dict:
    """
    Persist one telemetry event.

    Failures are logged and reported in the return value, never raised.
    """
    try:
        with get_sync_session() as session:
            event = TelemetryEventRepository(session).create(name, properties)
            session.commit()
            event_id = str(event.id)

    except Exception as e:
        logger.warning(f"Dropping telemetry event {name}: {e}")
        return {"event": name, "stored": False, "error": str(e)}

    logger.info(f"Recorded telemetry event {name}")
    return {"event": name, "stored": True, "id": event_id}
