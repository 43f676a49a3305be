
from datetime import time
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


def parse_time_of_day(value: str) -> time:
    """Parse an ``HH:MM`` string into a ``datetime.time``."""
    hours, _, minutes = value.strip().partition(":")
    return time(hour=int(hours), minute=int(minutes or 0))


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    PROJECT_NAME: str = "Daily Tasks"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    CORS_ORIGINS: List[str] = ["*"]

    # Database
    DATABASE_PATH: str = "tasks.db"

    # Daily cycle (local wall-clock time, HH:MM)
    ARCHIVE_TIME: str = "23:59"
    RESET_TIME: str = "00:00"
    SCHEDULER_ENABLED: bool = True

    LOG_LEVEL: str = "INFO"

    @field_validator("ARCHIVE_TIME", "RESET_TIME")
    @classmethod
    def check_time_of_day(cls, value: str) -> str:
        try:
            parse_time_of_day(value)
        except ValueError:
            raise ValueError(f"expected HH:MM, got {value!r}")
        return value.strip()

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        return f"sqlite:///{self.DATABASE_PATH}"

    @property
    def archive_at(self) -> time:
        return parse_time_of_day(self.ARCHIVE_TIME)

    @property
    def reset_at(self) -> time:
        return parse_time_of_day(self.RESET_TIME)

settings = Settings()
