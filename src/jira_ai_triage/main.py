import uvicorn

from jira_ai_triage.configuration.main_settings import Settings
from jira_ai_triage.infrastructure.entrypoints.api.app_factory import create_app


def serve():
    """Run the webhook server on PORT (default 1000)."""
    # log_config=None keeps uvicorn's loggers on the structlog bridge
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


# Instantiate global app for ASGI
settings = Settings()
app = create_app(settings)


if __name__ == "__main__":
    serve()
