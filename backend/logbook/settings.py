from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    ENV: str = "local"
    DATABASE_URL: str = "sqlite:///./logbook.db"
    AUTO_CREATE_SCHEMA: bool = True  # alembic owns the schema outside local use

    # Query bounds
    HISTORY_LIMIT: int = 200
    SESSIONS_LIMIT: int = 50
    PR_HISTORY_LIMIT: int = 2000
    CSV_HISTORY_LIMIT: int = 2000

    # Backup document format
    BACKUP_VERSION: int = 2

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

@lru_cache
def get_settings() -> Settings:
    return Settings()
