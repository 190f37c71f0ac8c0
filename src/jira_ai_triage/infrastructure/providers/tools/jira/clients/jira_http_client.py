import base64
from typing import Any

import httpx

from jira_ai_triage.configuration.tools.tool_settings import JiraAuthMode, ToolSettings
from jira_ai_triage.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)


class JiraHttpClient:
    """
    Thin JSON client over one shared httpx.AsyncClient.

    Built once per process; holds no per-request state so concurrent requests can reuse it.
    """

    def __init__(self, settings: ToolSettings, transport: httpx.AsyncBaseTransport | None = None):
        settings.validate_jira_credentials()
        self.settings = settings
        self.base_url = settings.jira_base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=self._get_headers(),
            transport=transport,
        )

    def _get_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

        if self.settings.jira_auth_mode == JiraAuthMode.BASIC:
            token = self.settings.jira_api_token.get_secret_value() if self.settings.jira_api_token else ""
            creds = f"{self.settings.jira_email}:{token}"
            encoded = base64.b64encode(creds.encode("utf-8")).decode("utf-8")
            headers["Authorization"] = f"Basic {encoded}"

        elif self.settings.jira_auth_mode == JiraAuthMode.BEARER:
            token = self.settings.jira_bearer_token.get_secret_value() if self.settings.jira_bearer_token else ""
            headers["Authorization"] = f"Bearer {token}"

        return headers

    async def post(self, path: str, json_data: dict[str, Any]) -> httpx.Response:
        url = f"/{path.lstrip('/')}"
        logger.debug(f"POST {self.base_url}{url}")
        return await self._client.post(url, json=json_data)

    async def aclose(self) -> None:
        await self._client.aclose()
