from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str
    jwt_secret: str
    jwt_algorithm: str = "HS256"

    # Передача сессии от провайдера аутентификации
    session_cookie_name: str = "notes_session"
    session_ttl_minutes: int = 60 * 24 * 7

    api_prefix: str = "/api"
    cors_origins: List[str] = ["http://localhost:3000", "https://localhost:3000"]

    log_level: str = "INFO"
    sql_echo: bool = False

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
