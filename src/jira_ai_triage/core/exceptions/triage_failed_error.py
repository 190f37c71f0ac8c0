from __future__ import annotations

from typing import Any

from jira_ai_triage.core.exceptions.triage_error import TriageError
from jira_ai_triage.core.exceptions.upstream_error import UpstreamError
from jira_ai_triage.core.value_objects.triage_stage import TriageStage


class TriageFailedError(TriageError):
    """Raised when a triage run aborts; `stage` is the last stage that completed."""

    def __init__(self, stage: TriageStage, cause: Exception):
        self.stage = stage
        self.cause = cause
        super().__init__(f"Triage failed after stage {stage.value}: {cause}")

    def detail(self) -> Any:
        if isinstance(self.cause, UpstreamError):
            return self.cause.detail()
        return str(self.cause)
