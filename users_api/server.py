"""
FastAPI server implementation for the Users API.
"""

import logging
import signal
import sys

import sentry_sdk
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sentry_sdk.integrations.fastapi import FastApiIntegration

from users_api.database.engine import ConnectionPool, create_pool
from users_api.models.base import Envelope
from users_api.routes import health_router, user_router

from .settings import Settings, settings

logger = logging.getLogger(__name__)


def configure_logging(level: str = 'INFO') -> None:
    logging.basicConfig(
        level=level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def init_sentry(app_settings: Settings) -> None:
    if app_settings.API_SENTRY_DSN:
        sentry_sdk.init(
            dsn=app_settings.API_SENTRY_DSN,
            integrations=[FastApiIntegration()],
            traces_sample_rate=0.0,
            environment=app_settings.ENVIRONMENT,
        )
        logger.info('Sentry initialized for backend')
    else:
        logger.warning(
            'API_SENTRY_DSN not found in environment variables. Sentry is disabled.'
        )


def create_app(pool: ConnectionPool, app_settings: Settings = settings) -> FastAPI:
    """Build the application around an already constructed connection pool.

    The pool is drained when the application shuts down.
    """
    app = FastAPI(
        title='Users API',
        description='CRUD service for the users resource',
        version='1.0.0',
    )
    app.state.pool = pool
    app.state.settings = app_settings

    # Cross-origin requests are allowed unconditionally
    app.add_middleware(
        CORSMiddleware,
        allow_origins=['*'],
        allow_methods=['*'],
        allow_headers=['*'],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_body_handler(request: Request, exc: RequestValidationError):
        """Malformed JSON or a body that is not an object."""
        return Envelope(success=False, message='Invalid request body').to_response(
            status.HTTP_400_BAD_REQUEST
        )

    app.include_router(health_router)
    app.include_router(user_router)

    @app.on_event('shutdown')
    async def shutdown_event():
        """Drain the connection pool once in-flight requests have finished."""
        logger.info('Shutting down API server...')
        pool.close()

    return app


def _exit_on_sigterm(signum, frame):
    sys.exit(0)


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    init_sentry(settings)

    pool = create_pool(settings)
    app = create_app(pool, settings)

    # uvicorn drains on SIGTERM and then re-raises it; exit with 0 afterwards
    signal.signal(signal.SIGTERM, _exit_on_sigterm)

    logger.info(f'API server running on port {settings.PORT}')
    try:
        uvicorn.run(
            app,
            host=settings.HOST,
            port=settings.PORT,
            log_level=settings.LOG_LEVEL.lower(),
        )
    finally:
        pool.close()


if __name__ == '__main__':
    main()
