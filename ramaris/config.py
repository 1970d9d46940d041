from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "https://www.ramaris.app/api/v1"


class Settings(BaseSettings):
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    log_format: str = "text"
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "RAMARIS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
