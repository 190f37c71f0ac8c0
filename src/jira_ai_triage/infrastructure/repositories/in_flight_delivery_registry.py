from collections.abc import Iterator
from contextlib import contextmanager

from jira_ai_triage.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)


class InFlightDeliveryRegistry:
    """
    Process-local set of issue keys whose webhook delivery is currently being handled.

    Nothing is persisted: a key is claimed for the duration of one delivery and released
    afterwards, whatever the outcome. Claims are taken and released on the event loop
    thread only, so no lock is needed.
    """

    def __init__(self) -> None:
        self._active: set[str] = set()

    @contextmanager
    def claim(self, issue_key: str) -> Iterator[bool]:
        """Yields True if the caller now owns `issue_key`, False if another delivery holds it."""
        if issue_key in self._active:
            logger.info(f"Delivery for {issue_key} already in flight")
            yield False
            return

        self._active.add(issue_key)
        try:
            yield True
        finally:
            self._active.discard(issue_key)
