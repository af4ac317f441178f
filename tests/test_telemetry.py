"""Telemetry backends and the worker task that stores events."""

from unittest.mock import patch

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db.models import Base
from db.repositories import TelemetryEventRepository
from engine.telemetry import CeleryTelemetry, LoggingTelemetry, get_telemetry
from worker.tasks import record_event


@pytest.fixture
def sync_session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine)
    engine.dispose()


def test_get_telemetry_backends():
    assert isinstance(get_telemetry("log"), LoggingTelemetry)
    assert isinstance(get_telemetry("CELERY"), CeleryTelemetry)
    assert isinstance(get_telemetry("carrier-pigeon"), LoggingTelemetry)


def test_default_backend_comes_from_settings():
    assert isinstance(get_telemetry(), LoggingTelemetry)


def test_logging_telemetry_writes_log(caplog):
    with caplog.at_level("INFO", logger="engine.telemetry"):
        LoggingTelemetry().log("seo_analysis_started", {"url": "example.com"})

    assert "seo_analysis_started" in caplog.text


def test_celery_telemetry_enqueues_task():
    with patch("worker.tasks.record_event") as task:
        CeleryTelemetry().log("seo_analysis_completed", {"score": 80})

    task.apply_async.assert_called_once_with(
        args=("seo_analysis_completed", {"score": 80}), retry=False
    )


def test_record_event_stores_event(sync_session_factory):
    with patch("worker.tasks.get_sync_session", side_effect=sync_session_factory):
        outcome = record_event("seo_analysis_completed", {"url": "https://example.com", "score": 77})

    assert outcome["stored"] is True
    assert outcome["event"] == "seo_analysis_completed"

    with sync_session_factory() as session:
        events = TelemetryEventRepository(session).list_by_name("seo_analysis_completed")

    assert len(events) == 1
    assert str(events[0].id) == outcome["id"]
    assert events[0].properties == {"url": "https://example.com", "score": 77}


def test_record_event_failure_is_reported_not_raised():
    with patch("worker.tasks.get_sync_session", side_effect=RuntimeError("database is down")):
        outcome = record_event("seo_analysis_failed", {})

    assert outcome == {
        "event": "seo_analysis_failed",
        "stored": False,
        "error": "database is down",
    }


@pytest.mark.asyncio
async def test_unreachable_broker_does_not_fail_analysis():
    from analyzers.signals import FixedSignalSource
    from conftest import StubFetcher
    from engine.analyzer import SEOAnalyzer

    analyzer = SEOAnalyzer(
        fetcher=StubFetcher(content="# Hello"),
        signals=FixedSignalSource(),
        telemetry=CeleryTelemetry(),
    )

    with patch("worker.tasks.record_event") as task:
        task.apply_async.side_effect = ConnectionRefusedError("broker down")
        result = await analyzer.analyze_website("example.com")

    assert result.url == "https://example.com"
    assert task.apply_async.call_count == 2
