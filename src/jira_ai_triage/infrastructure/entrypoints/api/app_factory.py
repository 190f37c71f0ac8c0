from contextlib import asynccontextmanager

from fastapi import FastAPI

from jira_ai_triage.configuration.main_settings import Settings
from jira_ai_triage.infrastructure.entrypoints.api.health_router import router as health_router
from jira_ai_triage.infrastructure.entrypoints.api.jira_webhook_router import router as jira_router
from jira_ai_triage.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
    set_level,
)
from jira_ai_triage.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from jira_ai_triage.infrastructure.resolution.container import TriageContainer

logger = LoggerFactoryService.build_logger(__name__)


def create_app(settings: Settings, container: TriageContainer | None = None) -> FastAPI:
    """Builds the ASGI app. `container` replaces the real Groq/Jira wiring, e.g. with test doubles."""
    set_level(settings.log_level)

    logger.info("--- BOOT DIAGNOSTICS ---")
    logger.info(f"App Name: {settings.app_name}")
    logger.info(f"Jira: {settings.jira_base_url} (auth={settings.jira_auth_mode.value})")
    logger.info(f"LLM: {settings.llm_model} via {settings.llm_base_url}, key present={bool(settings.groq_api_key)}")
    logger.info("------------------------")

    container = container or TriageContainer.build(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await container.aclose()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.container = container

    app.add_middleware(CorrelationMiddleware)
    app.include_router(health_router)
    app.include_router(jira_router)

    return app
