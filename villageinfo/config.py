from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    dataset_dir: str = "village_dataset"
    dataset_cache_size: int = 32
    llm_provider: str = "gemini"
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-20250514"
    llm_max_tokens: int = 2048
    cors_origins: str = "*"
    host: str = "0.0.0.0"
    port: int = 3000
    log_format: str = "text"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
