"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    intentlens_env: str = "development"
    intentlens_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Region catalog used when a request names an unknown image
    default_image: str = "v2_with_bench.jpg"

    # Canvas size assumed when a request omits it
    default_canvas_width: float = 800.0
    default_canvas_height: float = 600.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
