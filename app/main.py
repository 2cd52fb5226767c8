from fastapi import FastAPI
from contextlib import asynccontextmanager
from typing import Optional

from app.api.test_db import router as test_db_router
from app.api.diagnostics import router as diagnostics_router
from app.api.health import router as health_router
from app.api.language import router as language_router
from app.config.settings import Settings, settings as default_settings
from app.services.cache import create_redis_client
from app.services.database import create_db_engine
from app.services.health_service import HealthService
from app.services.prober_service import ConnectivityProber
from app.utils.log import app_logger


def create_app(settings: Optional[Settings] = None, prober: Optional[ConnectivityProber] = None) -> FastAPI:
    """Build the application.

    Passing `prober` skips building real store clients (tests hand in fakes).
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup logic
        engine = redis_client = None
        if prober is None:
            relational_config = settings.relational_store()
            if relational_config.url is None:
                app_logger.warning("startup.database_url_missing")
            engine = create_db_engine(relational_config)
            redis_client = create_redis_client(settings.key_value_store())
            app.state.prober = ConnectivityProber(engine, redis_client)
        else:
            app.state.prober = prober

        app.state.health = HealthService(
            app.state.prober,
            version=settings.APP_VERSION,
            environment=settings.ENVIRONMENT,
        )
        app_logger.info("startup.ready", environment=settings.ENVIRONMENT,
                        probe_timeout=settings.PROBE_TIMEOUT_SECONDS)
        yield
        # Shutdown logic
        if engine is not None:
            engine.dispose()
        if redis_client is not None:
            redis_client.close()
        app_logger.info("shutdown.complete")

    app = FastAPI(title="opsprobe", version=settings.APP_VERSION, lifespan=lifespan)

    # include routes
    app.include_router(test_db_router)
    app.include_router(diagnostics_router)
    app.include_router(health_router)
    app.include_router(language_router)
    return app


app = create_app()
