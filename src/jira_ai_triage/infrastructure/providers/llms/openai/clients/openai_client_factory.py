from __future__ import annotations

from dataclasses import dataclass

from openai import AsyncOpenAI

from jira_ai_triage.configuration.llms.llm_settings import LlmSettings


@dataclass(frozen=True)
class OpenAiClientFactory:
    settings: LlmSettings

    def create(self) -> AsyncOpenAI:
        self.settings.validate_llm_credentials()
        # The SDK retries twice by default; one round trip per request is wanted here.
        return AsyncOpenAI(
            api_key=self.settings.groq_api_key.get_secret_value(),
            base_url=self.settings.llm_base_url,
            max_retries=0,
        )
