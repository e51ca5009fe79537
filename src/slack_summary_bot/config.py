from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from functools import lru_cache

class Settings(BaseSettings):
    SLACK_BOT_TOKEN: str = Field(..., description="Slack Bot User OAuth Token")
    SLACK_APP_TOKEN: str = Field("", description="Slack App-Level Token (for Socket Mode)")
    SLACK_SIGNING_SECRET: str = Field("", description="Slack Signing Secret (for the Events API endpoint)")
    OPENAI_API_KEY: str = Field(..., description="OpenAI API Key")
    OPENAI_MODEL: str = "gpt-4o"
    OPENAI_TEMPERATURE: float = 0.7
    OPENAI_MAX_TOKENS: int = 1500
    FETCH_TIMEOUT_SECONDS: float = 10.0
    FETCH_MAX_REDIRECTS: int = 5
    MIN_CONTENT_LENGTH: int = 50
    LOG_LEVEL: str = "INFO"
    PORT: int = Field(3000, description="Port for the Events API endpoint")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @field_validator("OPENAI_API_KEY")
    @classmethod
    def _check_openai_key(cls, value: str) -> str:
        # Keys pasted into .env often carry stray whitespace
        key = value.strip()
        if not key.startswith("sk-") or len(key) <= 40:
            raise ValueError("OPENAI_API_KEY must start with 'sk-' and be of sufficient length")
        return key

@lru_cache()
def get_settings() -> Settings:
    return Settings()
