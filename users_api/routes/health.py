"""
Liveness and connection pool monitoring endpoints.

Neither endpoint issues a statement, so both answer even when the database
is unreachable.
"""

from fastapi import APIRouter, Depends

from users_api.database.engine import ConnectionPool
from users_api.models.base import HealthStatus
from users_api.utils.db_dependencies import get_pool

health_router = APIRouter(prefix='/health', tags=['Health'])


@health_router.get('', response_model=HealthStatus)
async def health_check():
    return {'status': 'OK', 'message': 'API service is running'}


@health_router.get('/db')
async def get_database_pool_status(pool: ConnectionPool = Depends(get_pool)):
    """Get current database connection pool status."""
    return pool.stats()
