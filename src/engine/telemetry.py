"""Best-effort analytics events."""

import logging
from abc import ABC, abstractmethod

from config import settings

logger = logging.getLogger(__name__)


class Telemetry(ABC):
    """Side channel for analytics events. Callers never wait on delivery."""

    @abstractmethod
    def log(self, event: str, properties: dict) -> None:
        pass


class LoggingTelemetry(Telemetry):
    """Writes events to the application log."""

    def log(self, event: str, properties: dict) -> None:
        logger.info(f"telemetry event={event} properties={properties}")


class CeleryTelemetry(Telemetry):
    """Hands events to the worker, which persists them."""

    def log(self, event: str, properties: dict) -> None:
        from worker.tasks import record_event

        # No publish retries: a dead broker fails fast and the event is dropped
        record_event.apply_async(args=(event, properties), retry=False)


def get_telemetry(backend: str | None = None) -> Telemetry:
    """Build the telemetry backend named in settings ("log" or "celery")."""
    backend = (backend or settings.telemetry_backend).lower()
    if backend == "celery":
        return CeleryTelemetry()
    if backend != "log":
        logger.warning(f"Unknown telemetry backend {backend!r}, falling back to log")
    return LoggingTelemetry()
