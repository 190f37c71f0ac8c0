from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from jira_ai_triage.core.exceptions.triage_error import TriageError


@dataclass(eq=False)
class UpstreamError(TriageError):
    """A remote call (AI provider or issue tracker) failed or returned something unusable.

    Carries the status code and response body when the remote side produced one, so
    callers can log the failure without knowing which HTTP library raised it.
    """

    provider: str
    message: str
    status_code: int | None = None
    body: Any = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def detail(self) -> Any:
        """Remote error payload when available, otherwise the message."""
        if self.body not in (None, "", {}, []):
            return self.body
        return self.message

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        return f"{self.provider}: {self.message}{code}"
