from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    host: str = "0.0.0.0"
    port: int = 7652
    debug: bool = False

    request_timeout: int = 30
    max_retries: int = 3
    # Upper bound for one whole resolution (page fetch + player API + manifest)
    resolve_timeout: float = 60.0

    default_client: str = "web"
    hl: str = "en"
    gl: str = "US"

    # Comma-separated origins for CORS. Empty = allow "*" with no credentials.
    cors_origins: str = ""

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
