"""
Connection pool for the users store.

The pool is an explicitly constructed object: it is built once at process
start, handed to the application, and drained once on shutdown.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import QueuePool
from sqlalchemy.sql.expression import Executable

from users_api.database.models import metadata
from users_api.settings import Settings
from users_api.utils.exceptions import PoolClosedError, StoreError

logger = logging.getLogger(__name__)


@dataclass
class StatementResult:
    """Materialized outcome of a single statement."""

    rows: List[Dict[str, Any]] = field(default_factory=list)
    rowcount: int = 0
    inserted_id: Optional[Any] = None


def _error_text(exc: SQLAlchemyError) -> str:
    # Prefer the driver's own message over SQLAlchemy's wrapped one
    orig = getattr(exc, 'orig', None)
    return str(orig) if orig is not None else str(exc)


class ConnectionPool:
    """Bounded set of reusable connections; one statement per checkout."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self._closed = False
        self._lock = threading.Lock()

    @property
    def closed(self) -> bool:
        return self._closed

    def execute(self, statement: Executable) -> StatementResult:
        """Acquire a connection, run one statement in its own transaction, release.

        Rows are read before the connection goes back to the pool, so callers
        never hold a connection across statements.

        Raises:
            StoreError: If the pool is closed or the statement fails.
        """
        if self._closed:
            raise PoolClosedError('Connection pool is closed')

        try:
            with self.engine.begin() as conn:
                result = conn.execute(statement)
                rows = (
                    [dict(row) for row in result.mappings()]
                    if result.returns_rows
                    else []
                )
                inserted_id = None
                if result.is_insert and result.inserted_primary_key:
                    inserted_id = result.inserted_primary_key[0]
                return StatementResult(
                    rows=rows, rowcount=result.rowcount, inserted_id=inserted_id
                )
        except SQLAlchemyError as e:
            raise StoreError(_error_text(e)) from e
        except (TypeError, ValueError, OverflowError) as e:
            # Raised by the driver itself for values it cannot bind
            raise StoreError(str(e)) from e

    def stats(self) -> Dict[str, Any]:
        """Current pool usage. Does not touch the database."""
        pool = self.engine.pool
        if not isinstance(pool, QueuePool):
            return {'status': pool.status()}

        return {
            'pool_size': pool.size(),
            'checked_in': pool.checkedin(),
            'checked_out': pool.checkedout(),
            'overflow': pool.overflow(),
            'total_connections': pool.checkedin() + pool.checkedout(),
            'available_connections': pool.checkedin(),
        }

    def close(self) -> None:
        """Close every pooled connection. Safe to call more than once."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self.engine.dispose()
        logger.info('Database connection pool closed.')


def create_pool(settings: Settings) -> ConnectionPool:
    """Build the production pool from application settings.

    Callers beyond DATABASE_POOL_SIZE wait for a free connection, in arrival
    order and without a timeout; nothing is ever rejected.
    """
    engine = create_engine(
        settings.database_url,
        pool_size=settings.DATABASE_POOL_SIZE,
        max_overflow=0,
        pool_timeout=None,
        pool_recycle=settings.DATABASE_POOL_RECYCLE,
        pool_pre_ping=settings.DATABASE_POOL_PRE_PING,
    )
    logger.info(
        f'Database connection pool created for {settings.database_url.render_as_string(hide_password=True)} '
        f'(size {settings.DATABASE_POOL_SIZE})'
    )
    return ConnectionPool(engine)


def init_schema(pool: ConnectionPool) -> None:
    """Create the users table if it does not exist yet."""
    metadata.create_all(pool.engine)
