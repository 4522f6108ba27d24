"""Demo analytics sink.

There is no real analytics backend; events are written to the structured log.
"""

from __future__ import annotations

import threading

from platformkit.analytics.events import AnalyticsEvent
from platformkit.core.interfaces import Analytics
from platformkit.utils.log import get_logger


class LoggingAnalytics(Analytics):
    """Writes each tracked event as one structured log line."""

    def __init__(self):
        self._log = get_logger(component="analytics")
        # structlog's processor chain is not guaranteed re-entrant across threads
        self._lock = threading.Lock()

    def track(self, event: AnalyticsEvent) -> None:
        parameters = event.parameters
        with self._lock:
            if parameters:
                self._log.info("analytics_event", event_name=event.name, parameters=parameters)
            else:
                self._log.info("analytics_event", event_name=event.name)
