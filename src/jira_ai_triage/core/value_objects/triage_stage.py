from enum import StrEnum


class TriageStage(StrEnum):
    """Lifecycle of a single webhook delivery."""

    RECEIVED = "received"
    VALIDATED = "validated"
    ANALYZED = "analyzed"
    ENRICHED = "enriched"
    POSTED = "posted"
    RESPONDED = "responded"
    ERRORED = "errored"
