"""
QuickBite Backend: Auth Service (Credential Workflow)
======================================================

What:  Registration, login and password change.
How:   Hash on write, compare on read, sign a bearer token on success.
       The data store is passed in on every call; the service keeps no state.
Who:   Called by the account route handlers.

Login Flow:
    ┌──────────┐    ┌──────────────┐    ┌──────────────┐    ┌──────────┐
    │ Presence │───▶│ Lookup user  │───▶│ bcrypt check │───▶│ Sign JWT │
    │  check   │    │  by email    │    │              │    │  (2h)    │
    └──────────┘    └──────────────┘    └──────────────┘    └──────────┘
         │ 400             │ 401               │ 401
    "Email and password    "Invalid           "Incorrect
     are required"          credentials"       password"

An unknown email and a failed lookup both answer "Invalid credentials", so
the response does not reveal whether the address is registered.
"""

import logging
from typing import Optional, Union

from starlette.concurrency import run_in_threadpool

from quickbite.config import settings
from quickbite.datastore.base import DataStore
from quickbite.exceptions import AuthError, StorageError, ValidationError
from quickbite.schemas.common import MessageResponse
from quickbite.schemas.user import LoginResponse
from quickbite.security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)


class AuthService:
    """
    Credential operations.

    Responsibilities:
        - register(): hash the password and insert the user row
        - login(): verify credentials and issue a token
        - change_password(): re-hash and overwrite, no old-password check

    Uniqueness of emails is left to the store. A duplicate registration
    fails on insert and surfaces as StorageError with the store's message.
    """

    async def register(
        self,
        store: DataStore,
        name: str,
        email: str,
        password: str,
    ) -> MessageResponse:
        password_hash = await run_in_threadpool(hash_password, password, settings.bcrypt_rounds)

        await store.insert(
            settings.users_table,
            [{"name": name, "email": email, "password_hash": password_hash}],
        )

        logger.info("User registered")
        return MessageResponse(message="User registered")

    async def login(
        self,
        store: DataStore,
        email: Optional[str],
        password: Optional[str],
    ) -> LoginResponse:
        """
        Verify credentials and issue a bearer token.

        Raises:
            ValidationError: email or password missing or blank (→ 400)
            AuthError: unknown email or wrong password (→ 401)
        """
        if not email or not password or not email.strip() or not password.strip():
            raise ValidationError("Email and password are required")

        try:
            user = await store.select_one(settings.users_table, filters={"email": email})
        except StorageError as e:
            logger.warning("Login failed: no user for the given email")
            raise AuthError("Invalid credentials", context={"reason": e.message}) from e

        valid = await run_in_threadpool(
            verify_password, password, user.get("password_hash") or ""
        )
        if not valid:
            logger.warning("Login failed: incorrect password for user %s", user.get("id"))
            raise AuthError("Incorrect password")

        token = create_access_token(
            user["id"],
            user.get("email") or email,
            secret=settings.jwt_secret,
            ttl_seconds=settings.token_ttl_seconds,
            algorithm=settings.jwt_algorithm,
        )

        logger.info("User %s logged in", user["id"])
        return LoginResponse(token=token, name=user.get("name"), user_id=user["id"])

    async def change_password(
        self,
        store: DataStore,
        user_id: Union[int, str],
        new_password: str,
    ) -> MessageResponse:
        password_hash = await run_in_threadpool(
            hash_password, new_password, settings.bcrypt_rounds
        )

        await store.update(
            settings.users_table,
            {"password_hash": password_hash},
            filters={"id": user_id},
        )

        logger.info("Password changed for user %s", user_id)
        return MessageResponse(message="Password changed")


auth_service = AuthService()
