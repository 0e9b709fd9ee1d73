import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

TRUTHY = {"1", "true", "yes", "on"}


def _as_bool(value: Optional[str], default: bool) -> bool:
    if value is None or value == "":
        return default
    return value.strip().lower() in TRUTHY


class Settings(BaseModel):
    environment: str = "development"
    log_level: str = "INFO"

    server_url: str = "http://localhost:3000"
    server_port: int = 3000
    global_prefix: str = "v1"

    # database
    database_url: Optional[str] = None
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_name: str = "postgres"
    search_path: tuple = ("public", "core", "discovery_source")

    # redis
    redis_host: str = "127.0.0.1"
    redis_port: int = 6378
    redis_db: int = 0
    redis_tls: bool = False
    redis_tls_insecure: bool = True

    github_personal_token: str = ""

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_name}"
        )


def load_settings(env: Mapping[str, str] = os.environ) -> Settings:
    """Build settings from environment variables, falling back to defaults."""
    defaults = Settings()
    return Settings(
        environment=env.get("NODE_ENV", defaults.environment),
        log_level=env.get("LOG_LEVEL", defaults.log_level),
        server_url=env.get("SERVER_URL", defaults.server_url),
        server_port=int(env.get("SERVER_PORT", defaults.server_port)),
        database_url=env.get("DATABASE_URL") or None,
        postgres_host=env.get("POSTGRES_HOST", defaults.postgres_host),
        postgres_port=int(env.get("POSTGRES_PORT", defaults.postgres_port)),
        postgres_user=env.get("POSTGRES_USER", defaults.postgres_user),
        postgres_password=env.get("POSTGRES_PASSWORD", defaults.postgres_password),
        postgres_name=env.get("POSTGRES_NAME", defaults.postgres_name),
        redis_host=env.get("REDIS_HOST", defaults.redis_host),
        redis_port=int(env.get("REDIS_PORT", defaults.redis_port)),
        redis_db=int(env.get("REDIS_DB", defaults.redis_db)),
        redis_tls=_as_bool(env.get("REDIS_TLS"), defaults.redis_tls),
        redis_tls_insecure=_as_bool(env.get("REDIS_TLS_INSECURE"), defaults.redis_tls_insecure),
        github_personal_token=env.get("GITHUB_PERSONAL_TOKEN", defaults.github_personal_token),
    )


settings = load_settings()


def get_settings() -> Settings:
    return settings
