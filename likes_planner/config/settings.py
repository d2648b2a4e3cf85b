from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from likes_planner.i18n import DEFAULT_LOCALE, SUPPORTED_LOCALES


class Settings(BaseSettings):
    locale: str = Field(
        default=DEFAULT_LOCALE,
        validation_alias="LIKES_LOCALE",
        description="Display language for labels, advice and decoded workout names",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(
        default=None,
        validation_alias="LOG_FILE",
        description="Optional log file path (console only when unset)",
    )
    log_rotation: str = Field(default="5 MB", validation_alias="LOG_ROTATION")
    log_retention: int = Field(
        default=5,
        validation_alias="LOG_RETENTION",
        description="Number of rotated log files to keep",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, value: str) -> str:
        """Fall back to the default locale when an unsupported one is configured."""
        lower_value = value.lower()
        if lower_value not in SUPPORTED_LOCALES:
            logger.warning(
                f"Unsupported LIKES_LOCALE '{value}'. Supported: {', '.join(SUPPORTED_LOCALES)}. Defaulting to {DEFAULT_LOCALE}."
            )
            return DEFAULT_LOCALE
        return lower_value

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
