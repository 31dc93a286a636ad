from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    # Output diagnostics
    LOG_OUTPUT_VALUES: bool = True  # Include the rejected value in scalar.output_invalid events
    LOG_VALUE_MAX_LENGTH: int = 200

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
