from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import field_validator, model_validator
from typing import Annotated, Any
import json
from pathlib import Path
import os


class Settings(BaseSettings):
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Artistly Booking API"

    # The sample catalog lives in memory; point this at a file-backed or
    # server database to keep data across restarts.
    SQLALCHEMY_DATABASE_URL: str = "sqlite://"

    # Seed the sample artists, categories and booking requests on startup
    SEED_SAMPLE_DATA: bool = True

    # CORS origins
    CORS_ORIGINS: Annotated[list[str], NoDecode] = ["http://localhost:3000"]
    CORS_ALLOW_ALL: bool = False

    LOG_LEVEL: str = "INFO"

    # Artificial latency (seconds) standing in for a booking backend round trip
    STATUS_TRANSITION_DELAY_SECONDS: float = 1.0
    INTAKE_SUBMIT_DELAY_SECONDS: float = 2.0

    # Only pending requests may be approved or rejected. Disable to let the
    # dashboard re-decide requests that were already approved or rejected.
    ENFORCE_PENDING_TRANSITIONS: bool = True

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=True,
    )

    @field_validator("CORS_ORIGINS", mode="before")
    def split_origins(cls, v: Any) -> list[str]:
        """Parse comma-separated or JSON list of origins from environment."""
        if isinstance(v, str):
            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return parsed
            except json.JSONDecodeError:
                pass
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("STATUS_TRANSITION_DELAY_SECONDS", "INTAKE_SUBMIT_DELAY_SECONDS")
    def non_negative_delay(cls, v: float) -> float:
        if v < 0:
            raise ValueError("delay must be >= 0")
        return v

    @model_validator(mode="after")
    def allow_all_if_requested(self) -> "Settings":
        if self.CORS_ALLOW_ALL:
            self.CORS_ORIGINS = ["*"]
        return self


def load_settings() -> "Settings":
    return Settings(_env_file=os.getenv("ENV_FILE", str(Path(__file__).resolve().parents[3] / ".env")))


settings = load_settings()
