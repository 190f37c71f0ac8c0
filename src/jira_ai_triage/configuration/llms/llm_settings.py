from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from jira_ai_triage.core.exceptions.configuration_error import ConfigurationError

GROQ_OPENAI_BASE_URL = "https://api.groq.com/openai/v1"
DEFAULT_TRIAGE_MODEL = "llama-3.1-8b-instant"


class LlmSettings(BaseSettings):
    # LLM Config (OpenAI-compatible endpoint, Groq by default)
    groq_api_key: SecretStr | None = None
    llm_base_url: str = Field(default=GROQ_OPENAI_BASE_URL)
    llm_model: str = Field(default=DEFAULT_TRIAGE_MODEL)

    def validate_llm_credentials(self) -> None:
        if not self.groq_api_key or not self.groq_api_key.get_secret_value():
            raise ConfigurationError("GROQ_API_KEY is required for AI analysis.")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
