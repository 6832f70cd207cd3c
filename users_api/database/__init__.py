"""
Database package for the Users API.
"""

from .engine import ConnectionPool, StatementResult, create_pool, init_schema
from .service import UserService

__all__ = [
    'ConnectionPool',
    'StatementResult',
    'UserService',
    'create_pool',
    'init_schema',
]
