import math
from typing import Any, Dict, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.config.settings import RelationalStoreConfig
from app.core.exceptions.exceptions import BackendUnavailableError, ConfigurationError

DIAGNOSTIC_QUERY = text("SELECT NOW() AS \"current_time\", 'Hello from Neon!' AS message")


def normalize_database_url(url: str) -> str:
    """Hosted providers hand out ``postgres://`` urls; SQLAlchemy wants a dialect."""
    if url.startswith("postgres://"):
        return "postgresql+psycopg2://" + url[len("postgres://"):]
    if url.startswith("postgresql://"):
        return "postgresql+psycopg2://" + url[len("postgresql://"):]
    return url


def create_db_engine(config: RelationalStoreConfig) -> Optional[Engine]:
    """
    create the engine for the relational store, or None when no url is configured.
    """
    if not config.url:
        return None

    url = normalize_database_url(config.url)
    connect_args: Dict[str, Any] = {}
    if config.connect_timeout is not None and url.startswith("postgresql+psycopg2"):
        # libpq only takes whole seconds
        connect_args["connect_timeout"] = max(1, math.ceil(config.connect_timeout))

    return create_engine(
        url,
        pool_pre_ping=True,
        connect_args=connect_args,
        echo=config.echo,
    )


def query_server_time(engine: Optional[Engine]) -> Dict[str, Any]:
    """Run the read-only diagnostic query and return its single row."""
    if engine is None:
        raise ConfigurationError("DATABASE_URL")
    try:
        with engine.connect() as conn:
            row = conn.execute(DIAGNOSTIC_QUERY).mappings().first()
    except SQLAlchemyError as e:
        # surface the driver message, not SQLAlchemy's wrapper text
        orig = getattr(e, "orig", None)
        raise BackendUnavailableError("postgresql", str(orig) if orig is not None else str(e)) from e

    if row is None:
        raise BackendUnavailableError("postgresql", "diagnostic query returned no rows")
    return dict(row)
