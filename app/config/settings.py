from pydantic_settings import BaseSettings, SettingsConfigDict

from app.page.reporter import DEFAULT_READY_MESSAGE


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    upload_container_dir: str = "./uploads"
    upload_poll_interval_seconds: int = 5

    page_ready_message: str = DEFAULT_READY_MESSAGE
