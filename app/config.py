from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

BEHNEVIS_CONVERT_URL = "https://9mkhzfaym3.execute-api.us-east-1.amazonaws.com/production/convert"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    telegram_bot_token: str = ""
    telegram_api_base_url: str = "https://api.telegram.org"

    transliteration_backend: Literal["local", "remote"] = "local"
    transliteration_service_url: str = BEHNEVIS_CONVERT_URL

    outbound_timeout_seconds: float = 15.0
    start_command: str = "/start"
    log_level: str = "INFO"


settings = Settings()
