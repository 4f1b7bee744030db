"""Configuration and environment settings for the Expense Tracker API."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings for the Expense Tracker API."""

    data_dir: str = "data"
    expenses_file: str = "expenses.json"
    todos_file: str = "todos.json"
    storage_backend: str = "local"
    s3_endpoint_url: str | None = None
    s3_access_key: str | None = None
    s3_secret_key: str | None = None
    s3_bucket: str = "tracker-data"
    s3_prefix: str = ""
    log_file: str = "data/tracker.log"
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]
    server_host: str = "127.0.0.1"
    server_port: int = 3000

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


def get_settings() -> "Settings":
    """Return an instance of the application settings."""
    return Settings()
