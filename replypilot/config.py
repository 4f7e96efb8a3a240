from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    llm_provider: str = "groq"
    groq_api_key: str = ""
    anthropic_api_key: str = ""
    model_name: str = "llama-3.1-8b-instant"
    anthropic_model_name: str = "claude-haiku-4-5-20251001"
    temperature: float = 0.5
    max_tokens: int = 256
    host: str = "0.0.0.0"
    port: int = 4000
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"


settings = Settings()
