"""Application configuration helpers."""

from functools import lru_cache
from typing import Optional, Union

from sqlalchemy.engine import URL
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration loaded from environment variables."""

    app_name: str = "Card Monitor"
    api_host: str = "127.0.0.1"
    api_port: int = 8787
    mysql_host: str = "localhost"
    mysql_user: str = "root"
    mysql_password: str = ""
    mysql_dbname: str = "mfst"
    mysql_port: int = 3306
    mysql_connect_timeout: int = 5
    database_url: Optional[str] = None
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="CARDMONITOR_", env_file=".env", env_file_encoding="utf-8", extra="ignore")

    def sqlalchemy_url(self) -> Union[str, URL]:
        """Return the explicit database URL, or a MySQL URL built from the mysql_* fields."""
        if self.database_url:
            return self.database_url
        return URL.create(
            "mysql+pymysql",
            username=self.mysql_user,
            password=self.mysql_password or None,
            host=self.mysql_host,
            port=self.mysql_port,
            database=self.mysql_dbname,
        )


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return Settings()
