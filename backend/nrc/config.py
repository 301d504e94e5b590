from pydantic_settings import BaseSettings
from pydantic import Field
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = Field(default="NRC Management System", env="APP_NAME")
    version: str = Field(default="5.0.0", env="APP_VERSION")
    environment: str = Field(default="development", env="ENVIRONMENT")

    # Storage
    data_dir: str = Field(default="data", env="DATA_DIR")
    storage_backend: str = Field(default="csv", env="STORAGE_BACKEND")  # "csv" | "sqlite"
    database_url: str = Field(default="", env="DATABASE_URL")
    seed_sample_data: bool = Field(default=True, env="SEED_SAMPLE_DATA")

    # Auth
    jwt_secret_key: str = Field(default="default-secret", env="JWT_SECRET_KEY")
    jwt_expire_seconds: int = Field(default=86400, env="JWT_EXPIRE_SECONDS")
    auth_required: bool = Field(default=False, env="AUTH_REQUIRED")

    # HTTP
    frontend_url: str = Field(default="http://localhost:5173", env="FRONTEND_URL")

    # Logging
    log_level: str = Field(default="INFO", env="LOG_LEVEL")

    # Patients with a risk score above this raise a supervisor alert
    high_risk_threshold: int = Field(default=80, env="HIGH_RISK_THRESHOLD")

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def sqlite_url(self) -> str:
        return self.database_url or f"sqlite:///{self.data_dir}/nrc.db"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
