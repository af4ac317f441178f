"""Celery application for the telemetry worker."""

from celery import Celery

from config import settings

celery_app = Celery(
    "seoscope",
    broker=settings.celery_broker_url,
    backend=settings.celery_result_backend,
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,

    # Events have their own queue: celery -A worker.celery_app worker -Q telemetry
    task_routes={
        "worker.tasks.record_event": {"queue": "telemetry"},
    },

    # Events are fire-and-forget
    task_ignore_result=True,
    task_acks_late=False,
    worker_prefetch_multiplier=16,

    broker_connection_retry_on_startup=True,
)

celery_app.autodiscover_tasks(["worker"])
