"""
Request-scoped dependencies backed by the application's connection pool.
"""

from fastapi import Request

from users_api.database.engine import ConnectionPool
from users_api.database.service import UserService
from users_api.settings import Settings


def get_pool(request: Request) -> ConnectionPool:
    """The pool created at startup and attached to the application."""
    return request.app.state.pool


def get_user_service(request: Request) -> UserService:
    return UserService(get_pool(request))


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
