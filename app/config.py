from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database (one JSON document per tournament)
    database_url: str = "sqlite+aiosqlite:///./tournaments.db"
    sql_echo: bool = False

    # CORS
    allowed_origins: str = "*"  # Comma-separated origins, e.g. "https://cricket.example.com"

    # Logging
    log_level: str = "INFO"

    # Defaults applied when a tournament is created without an explicit config
    default_series_length: str = "3-5"
    default_schedule_format: str = "SINGLE ROUND ROBIN (SRR)"
    default_playoff_system: str = "SEMI-FINAL SYSTEM (TOP 4)"
    default_points_for_win: int = 12
    default_points_for_draw: int = 6
    default_points_for_loss: int = 4
    default_count_series_bonus: bool = True
    default_points_for_series_win: int = 4
    default_points_for_series_draw: int = 2

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    return Settings()
