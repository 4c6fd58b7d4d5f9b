"""
QuickBite Backend: User Routes
===============================

What:  PUT /api/user/{id}/password and GET /api/user/{id}.

The password change does not ask for the current password and the routes
are not token-protected; any caller that knows an id can use them.
"""

import logging

from fastapi import APIRouter, Depends

from quickbite.datastore.base import DataStore
from quickbite.dependencies import get_datastore
from quickbite.schemas.common import ErrorResponse, MessageResponse
from quickbite.schemas.user import ChangePasswordRequest, UserResponse
from quickbite.services.auth_service import auth_service
from quickbite.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/user", tags=["Users"])


@router.put(
    "/{user_id}/password",
    response_model=MessageResponse,
    responses={400: {"description": "Update rejected by the store", "model": ErrorResponse}},
    summary="Replace a user's password",
)
async def change_password(
    user_id: str,
    payload: ChangePasswordRequest,
    store: DataStore = Depends(get_datastore),
) -> MessageResponse:
    logger.info("Received password change for user %s", user_id)
    return await auth_service.change_password(store, user_id, payload.new_password)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={400: {"description": "Unknown user or store failure", "model": ErrorResponse}},
    summary="Get a user's public profile",
)
async def get_user(
    user_id: str,
    store: DataStore = Depends(get_datastore),
) -> UserResponse:
    return await user_service.get_user(store, user_id)
