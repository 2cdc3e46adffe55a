# app/shared/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from enum import Enum
from typing import List, Optional

class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "lexique-api"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    OTEL_SERVICE_NAME: str = "lexique-api"
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None

    # --- Lexicon Data ---
    # Lexique 3.83 export; the demo dataset is served when the file is missing.
    LEXIQUE_PATH: str = "Lexique383.tsv"

    # --- Search ---
    SEARCH_DEFAULT_LIMIT: int = 100
    SEARCH_MAX_LIMIT: int = 1000

    # --- HTTP Server ---
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
