from jira_ai_triage.configuration.application.app_settings import AppSettings
from jira_ai_triage.configuration.llms.llm_settings import LlmSettings
from jira_ai_triage.configuration.tools.tool_settings import ToolSettings


class GlobalSettings(AppSettings, LlmSettings, ToolSettings):
    """
    Master configuration class that aggregates all setting modules.
    Usage:
        settings = GlobalSettings()
    """

    def validate_credentials(self) -> None:
        self.validate_llm_credentials()
        self.validate_jira_credentials()


Settings = GlobalSettings
