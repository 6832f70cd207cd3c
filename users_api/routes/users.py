"""
User management routes.

Handlers are sync, so FastAPI runs them on its worker threads.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from users_api.database.service import UserService
from users_api.models.base import Envelope, UserPayload
from users_api.settings import Settings
from users_api.utils.db_dependencies import get_app_settings, get_user_service
from users_api.utils.exceptions import StoreError

logger = logging.getLogger(__name__)

USER_NOT_FOUND = 'User not found'
MISSING_FIELDS = 'Name and age are required'

# Create router
user_router = APIRouter(prefix='/api/users', tags=['Users'])


def parse_user_id(user_id: str) -> Optional[int]:
    """Path ids that are not integers can never match a row."""
    try:
        return int(user_id)
    except ValueError:
        return None


def not_found() -> JSONResponse:
    return Envelope(success=False, message=USER_NOT_FOUND).to_response(
        status.HTTP_404_NOT_FOUND
    )


def missing_fields() -> JSONResponse:
    return Envelope(success=False, message=MISSING_FIELDS).to_response(
        status.HTTP_400_BAD_REQUEST
    )


def store_failure(message: str, exc: StoreError, settings: Settings) -> JSONResponse:
    logger.error(f'{message}: {exc}')
    if settings.EXPOSE_ERROR_DETAILS:
        envelope = Envelope(success=False, message=message, error=str(exc))
    else:
        envelope = Envelope(success=False, message=message)
    return envelope.to_response(status.HTTP_500_INTERNAL_SERVER_ERROR)


@user_router.get('')
def list_users(
    users: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_app_settings),
):
    """List every user, newest id first."""
    try:
        rows = users.list_users()
    except StoreError as e:
        return store_failure('Failed to fetch users', e, settings)
    return Envelope(success=True, data=rows).to_response()


@user_router.get('/{user_id}')
def get_user(
    user_id: str,
    users: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_app_settings),
):
    """Get a single user."""
    parsed_id = parse_user_id(user_id)
    if parsed_id is None:
        return not_found()

    try:
        user = users.get_user(parsed_id)
    except StoreError as e:
        return store_failure('Failed to fetch user', e, settings)

    if not user:
        return not_found()
    return Envelope(success=True, data=user).to_response()


@user_router.post('')
def create_user(
    payload: Optional[UserPayload] = None,
    users: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_app_settings),
):
    """Create a new user."""
    if payload is None or not payload.is_complete():
        return missing_fields()

    try:
        user = users.create_user(payload.name, payload.age)
    except StoreError as e:
        return store_failure('Failed to create user', e, settings)

    logger.info(f'Created user {user["id"]}')
    return Envelope(
        success=True, message='User created successfully', data=user
    ).to_response(status.HTTP_201_CREATED)


@user_router.put('/{user_id}')
def update_user(
    user_id: str,
    payload: Optional[UserPayload] = None,
    users: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_app_settings),
):
    """Overwrite a user's name and age."""
    if payload is None or not payload.is_complete():
        return missing_fields()

    parsed_id = parse_user_id(user_id)
    if parsed_id is None:
        return not_found()

    try:
        updated = users.update_user(parsed_id, payload.name, payload.age)
    except StoreError as e:
        return store_failure('Failed to update user', e, settings)

    if not updated:
        return not_found()
    return Envelope(
        success=True,
        message='User updated successfully',
        data={'id': parsed_id, 'name': payload.name, 'age': payload.age},
    ).to_response()


@user_router.delete('/{user_id}')
def delete_user(
    user_id: str,
    users: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_app_settings),
):
    """Permanently delete a user."""
    parsed_id = parse_user_id(user_id)
    if parsed_id is None:
        return not_found()

    try:
        deleted = users.delete_user(parsed_id)
    except StoreError as e:
        return store_failure('Failed to delete user', e, settings)

    if not deleted:
        return not_found()
    return Envelope(success=True, message='User deleted successfully').to_response()
