"""Atlas configuration — loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "ATLAS_", "env_file": ".env"}

    # LLM API key (Gemini)
    google_api_key: str = ""

    # Models
    search_model: str = "gemini-2.5-flash-lite"
    extraction_model: str = "gemini-2.5-flash-lite"
    request_timeout: float = 120.0

    # Server
    allowed_origins: list[str] = ["http://localhost:5173"]
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


settings = Settings()
