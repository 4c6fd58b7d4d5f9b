"""
QuickBite Backend: Registration & Login Routes
===============================================

What:  POST /api/register and POST /api/login.
How:   Validate the body against its schema, delegate to AuthService.
       Errors are raised, not returned; the global handlers in main.py
       turn them into `{"error": ...}` responses.
"""

import logging

from fastapi import APIRouter, Depends

from quickbite.datastore.base import DataStore
from quickbite.dependencies import get_datastore
from quickbite.schemas.common import ErrorResponse, MessageResponse
from quickbite.schemas.user import LoginRequest, LoginResponse, RegisterRequest
from quickbite.services.auth_service import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Auth"])


@router.post(
    "/register",
    response_model=MessageResponse,
    responses={400: {"description": "Insert rejected by the store", "model": ErrorResponse}},
    summary="Register a new user",
)
async def register(
    payload: RegisterRequest,
    store: DataStore = Depends(get_datastore),
) -> MessageResponse:
    logger.info("Received registration request")
    return await auth_service.register(
        store,
        name=payload.name,
        email=payload.email,
        password=payload.password,
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"description": "Email or password missing", "model": ErrorResponse},
        401: {"description": "Invalid credentials", "model": ErrorResponse},
    },
    summary="Exchange credentials for a bearer token",
)
async def login(
    payload: LoginRequest,
    store: DataStore = Depends(get_datastore),
) -> LoginResponse:
    """
    Returns a 2-hour HS256 token plus the user's display name and id.

    400 when either field is missing or blank, 401 for an unknown email
    or a wrong password.
    """
    logger.info("Received login request")
    return await auth_service.login(store, email=payload.email, password=payload.password)
