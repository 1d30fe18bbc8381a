from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "letters"
    db_username: str = "letters"
    db_password: str = "secret"
    db_pool_max_size: int = 4

    storage_backend: str = "s3"
    files_root: str = "/app/files"
    aws_region: str | None = None
    documents_bucket: str = ""

    pdf_engine: str = "pdfplumber"

    summary_provider: str = "anthropic"
    summary_max_input_chars: int = 10_000
    summary_max_tokens: int = 1024

    anthropic_api_key: str = ""
    anthropic_model_name: str = "claude-sonnet-4-20250514"
    anthropic_timeout_seconds: int = 30

    openai_api_key: str = ""
    openai_model_name: str = ""
    openai_timeout_seconds: int = 30

    stale_processing_seconds: int = 900
    sweep_interval_seconds: int = 60
    sweep_batch_size: int = 20
    max_sweep_attempts: int = 3
