# scim_webhook/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, computed_field


class Settings(BaseSettings):
    # -------------------------------------------------
    # Project
    # -------------------------------------------------
    APP_NAME: str = "SCIM Provisioning Webhook"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # -------------------------------------------------
    # Listener
    # -------------------------------------------------
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # -------------------------------------------------
    # Database Settings (org lookup only)
    # -------------------------------------------------
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_USER: str = "scim_app"
    DATABASE_PASSWORD: str = "app_password"
    DATABASE_NAME: str = "scim_db"

    DATABASE_POOL_MIN_SIZE: int = 1
    DATABASE_POOL_SIZE: int = 5

    # -------------------------------------------------
    # Security
    # -------------------------------------------------
    # Fernet key protecting orgs.scim_secret at rest. Required; set in .env:
    #   FIELD_ENCRYPTION_KEY=<output of Fernet.generate_key()>
    FIELD_ENCRYPTION_KEY: str = Field(..., min_length=1)

    # -------------------------------------------------
    # Pydantic Settings
    # -------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",        # ignore unknown env vars
        case_sensitive=False,
    )

    @computed_field
    @property
    def DATABASE_URL(self) -> str:  # type: ignore[override]
        """
        Convenience DSN string for libraries that want a URL.
        """
        return (
            f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}"
            f"@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}"
        )


settings = Settings()
