"""Application configuration with validation."""
from typing import Dict, List, Literal, Optional
from functools import lru_cache
from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# REFERENCE DATA
# =============================================================================
# Schools Division Offices of the National Capital Region, offered as the
# division choices on the nomination form.
# =============================================================================

NCR_DIVISIONS: List[str] = [
    "Caloocan", "Las Piñas", "Makati", "Malabon", "Mandaluyong", "Manila",
    "Marikina", "Muntinlupa", "Navotas", "Parañaque", "Pasay", "Pasig",
    "Quezon City", "San Juan", "Taguig City and Pateros", "Valenzuela",
]

# Panel interview dimensions -> display label (max 2.0 points each, 10 total)
INTERVIEW_DIMENSIONS: Dict[str, str] = {
    "principles": "Journalism Principles",
    "leadership": "Mentorship Potential",
    "experience": "Work Engagement",
    "growth": "Personal Growth",
    "communication": "Communication Skills",
}


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "OSPA Scorer"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "console"

    # API
    API_V1_PREFIX: str = "/api/v1"

    # Candidate record store
    STORE_BACKEND: Literal["json", "redis"] = "json"
    STORE_PATH: str = "data/ospa_store.json"
    STORE_KEY: str = "ospa_candidates"
    LAST_SYNC_KEY: str = "ospa_last_sync"

    # Redis
    REDIS_URL: str = "redis://localhost:6379/0"

    # Spreadsheet sync (Apps Script web app)
    SYNC_URL: Optional[str] = Field(
        default=None,
        description="Spreadsheet ingestion endpoint; sync is disabled when unset",
    )
    SYNC_TOKEN: Optional[SecretStr] = None
    SYNC_TIMEOUT_SECONDS: Optional[float] = Field(default=None, gt=0)

    # CSV export
    EXPORT_DIR: str = "exports"

    @field_validator("SYNC_URL")
    @classmethod
    def validate_sync_url(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        if not v.startswith(("http://", "https://")):
            raise ValueError("SYNC_URL must be an http(s) URL")
        return v.strip()

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production has required security settings."""
        if self.APP_ENV == "production":
            if self.DEBUG:
                raise ValueError("DEBUG must be False in production")
            if self.SYNC_URL and self.SYNC_TOKEN is None:
                raise ValueError("SYNC_TOKEN is required when SYNC_URL is set in production")
        return self

    @property
    def sync_enabled(self) -> bool:
        return self.SYNC_URL is not None


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
