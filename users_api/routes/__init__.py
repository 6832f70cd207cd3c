"""
Routes package for the Users API.
"""

from .health import health_router
from .users import user_router

__all__ = [
    'health_router',
    'user_router',
]
