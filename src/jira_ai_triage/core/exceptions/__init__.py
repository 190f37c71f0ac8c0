from jira_ai_triage.core.exceptions.configuration_error import ConfigurationError
from jira_ai_triage.core.exceptions.triage_error import TriageError
from jira_ai_triage.core.exceptions.triage_failed_error import TriageFailedError
from jira_ai_triage.core.exceptions.upstream_error import UpstreamError

__all__ = [
    "ConfigurationError",
    "TriageError",
    "TriageFailedError",
    "UpstreamError",
]
