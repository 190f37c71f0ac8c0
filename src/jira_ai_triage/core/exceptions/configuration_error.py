from jira_ai_triage.core.exceptions.triage_error import TriageError


class ConfigurationError(TriageError):
    """Raised when configuration is invalid or incomplete."""
