from enum import StrEnum

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from jira_ai_triage.core.exceptions.configuration_error import ConfigurationError


class JiraAuthMode(StrEnum):
    BASIC = "basic"
    BEARER = "bearer"


class ToolSettings(BaseSettings):
    # Jira Config
    jira_base_url: str = Field(..., description="Jira Base URL, e.g. https://myorg.atlassian.net")
    jira_auth_mode: JiraAuthMode = Field(default=JiraAuthMode.BASIC)
    jira_email: str | None = None
    jira_api_token: SecretStr | None = None
    jira_bearer_token: SecretStr | None = None

    def validate_jira_credentials(self) -> None:
        """
        Validates that the necessary credentials for the selected JiraAuthMode are present.
        """
        if not self.jira_base_url:
            raise ConfigurationError("JIRA_BASE_URL is required.")

        if self.jira_auth_mode == JiraAuthMode.BASIC:
            if not self.jira_email:
                raise ConfigurationError("JiraAuthMode.BASIC requires 'jira_email'.")
            if not self.jira_api_token:
                raise ConfigurationError("JiraAuthMode.BASIC requires 'jira_api_token'.")

        elif self.jira_auth_mode == JiraAuthMode.BEARER:
            if not self.jira_bearer_token:
                raise ConfigurationError("JiraAuthMode.BEARER requires 'jira_bearer_token'.")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
