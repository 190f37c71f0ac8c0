from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    # App Config
    app_name: str = "Jira AI Triage"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=1000, description="Listen port, read from PORT")

    # Delivery policy
    webhook_skip_in_flight_duplicates: bool = Field(
        default=False,
        description="Ignore a delivery while another one for the same issue key is still being processed",
    )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
