from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class JiraIssueFieldsDTO(BaseModel):
    """Only the fields triage reads. Values are untyped; JiraPayloadMapper coerces them."""

    model_config = ConfigDict(extra="ignore")

    summary: Any = None
    # Plain string on most webhooks, an ADF document on v3 payloads
    description: Any = None


class JiraIssueDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    key: str | None = None
    fields: JiraIssueFieldsDTO | None = None

    @field_validator("fields", mode="before")
    @classmethod
    def _drop_malformed_fields(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else None


class JiraWebhookDTO(BaseModel):
    """
    Jira webhook envelope. Everything except `issue.key` and its text fields is ignored,
    so unrelated attributes of any type never cause a delivery to be rejected.
    """

    model_config = ConfigDict(extra="ignore")

    issue: JiraIssueDTO | None = None
