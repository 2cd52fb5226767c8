from pydantic_settings import BaseSettings
from pydantic import BaseModel, Field
from dotenv import load_dotenv, find_dotenv
from os import getenv
from typing import Optional

_env_path = find_dotenv()  # locate a .env file in this folder or parent folders
if _env_path:
    load_dotenv(_env_path)


class RelationalStoreConfig(BaseModel):
    """Connection settings handed to the relational store engine factory."""
    url: Optional[str] = None
    # seconds; None keeps the driver default of waiting indefinitely
    connect_timeout: Optional[float] = Field(None, gt=0)
    echo: bool = False


class KeyValueStoreConfig(BaseModel):
    """Connection settings handed to the key-value store client factory."""
    url: str = "redis://localhost:6379"
    socket_timeout: Optional[float] = Field(None, gt=0)


class Settings(BaseSettings):
    # Relational store. DATABASE_URL wins over the individual parts.
    DATABASE_URL: Optional[str] = getenv('DATABASE_URL')
    DB_HOST_IP: Optional[str] = getenv('DB_HOST_IP')
    DB_PORT: int = int(getenv('DB_PORT', '5432'))
    DB_USER: Optional[str] = getenv('DB_USER')
    DB_PASSWORD: Optional[str] = getenv('DB_PASSWORD')
    DB_NAME: Optional[str] = getenv('DB_NAME')

    # Key-value store
    REDIS_URL: str = getenv('REDIS_URL') or "redis://localhost:6379"

    # Probing. Unset means no bounded wait on either backend.
    PROBE_TIMEOUT_SECONDS: Optional[float] = Field(None, gt=0)

    # Service metadata reported by the health endpoint
    APP_VERSION: str = getenv('APP_VERSION', '1.0.0')
    ENVIRONMENT: str = getenv('ENVIRONMENT', 'development')
    LOG_LEVEL: str = getenv('LOG_LEVEL', 'DEBUG')

    def database_url(self) -> Optional[str]:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if not (self.DB_HOST_IP and self.DB_USER and self.DB_NAME):
            return None
        return (
            f"postgresql+psycopg2://{self.DB_USER}:{self.DB_PASSWORD or ''}"
            f"@{self.DB_HOST_IP}:{self.DB_PORT}/{self.DB_NAME}"
        )

    def relational_store(self) -> RelationalStoreConfig:
        return RelationalStoreConfig(
            url=self.database_url(),
            connect_timeout=self.PROBE_TIMEOUT_SECONDS,
        )

    def key_value_store(self) -> KeyValueStoreConfig:
        return KeyValueStoreConfig(
            url=self.REDIS_URL,
            socket_timeout=self.PROBE_TIMEOUT_SECONDS,
        )


settings = Settings()
