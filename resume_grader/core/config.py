from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Resume Grader"
    LOG_LEVEL: str = "INFO"

    # Gemini
    LLM_API_KEY: str | None = None
    LL_MODEL: str = "gemini-1.5-pro"
    LLM_BASE_URL: str | None = None
    LLM_TEMPERATURE: float = 0.0
    LLM_TIMEOUT_SECONDS: int = 60
    LLM_MAX_OUTPUT_TOKENS: int = 8192

    # Bundled assets
    TRAINING_DATA_DIR: str = "public"
    PUBLIC_DIR: str = "."
    TEMPLATE_URL: str = "https://typst.app/universe/package/silver-dev-cv"
    TEMPLATE_AUTHOR_SENTINEL: str = "silver"

    MAX_FILE_SIZE: int = 10 * 1024 * 1024

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
