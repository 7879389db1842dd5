# core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # OpenLigaDB league table endpoint; the season is appended verbatim.
    API_BASE_URL: str = "https://www.openligadb.de/api/getbltable/bl1/"
    DEFAULT_SEASON: str = "2021"
    REQUEST_TIMEOUT: float = 10.0
    USER_AGENT: str = "league-table/0.1.0"

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False


settings = Settings()
