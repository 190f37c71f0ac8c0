class TriageError(Exception):
    """Base class for all errors raised by the triage service."""
