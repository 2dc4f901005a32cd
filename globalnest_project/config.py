"""Environment-driven configuration read once by ``settings.py``.

Values come from ``GLOBALNEST_*`` environment variables or a local ``.env`` file.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GLOBALNEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    secret_key: str = "django-insecure-globalnest-dev-key-replace-me"
    debug: bool = True
    allowed_hosts: str = "localhost,127.0.0.1,testserver"

    # SQLite for local work; point at PostgreSQL in deployments.
    database_engine: str = "django.db.backends.sqlite3"
    database_name: str = "globalnest.sqlite3"
    database_user: str = ""
    database_password: str = ""
    database_host: str = ""
    database_port: str = ""

    media_root: str = "media"
    profile_image_max_bytes: int = 5 * 1024 * 1024

    log_level: str = "INFO"

    @property
    def allowed_hosts_list(self) -> list[str]:
        return [host.strip() for host in self.allowed_hosts.split(",") if host.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()
