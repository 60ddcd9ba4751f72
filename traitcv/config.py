from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central config loaded from environment variables and optionally .env (local).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -------------------------
    # Logging
    # -------------------------
    log_level: str = Field("WARNING", alias="TRAITCV_LOG_LEVEL")
    log_format: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        alias="TRAITCV_LOG_FORMAT",
    )

    # -------------------------
    # Estimation
    # Minimum cleaned sample size; never below 10.
    # -------------------------
    min_sample_size: int = Field(10, ge=10, alias="TRAITCV_MIN_SAMPLE_SIZE")

    def model_post_init(self, __context) -> None:
        """Normalize the log level so 'debug' and 'DEBUG' both work."""
        self.log_level = self.log_level.strip().upper() or "WARNING"


settings = Settings()
