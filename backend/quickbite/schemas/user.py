"""
QuickBite Backend: Account Request/Response Schemas
====================================================

What:  Pydantic models for registration, login, password change and lookup.
How:   Wire names are camelCase (`userId`, `newPassword`) through field
       aliases; Python code uses snake_case. `populate_by_name` lets services
       build responses from snake_case store rows.

Presence rules:
    - RegisterRequest: name and email may be empty; password must be present
    - LoginRequest: both fields optional at the schema level so that a
      missing field and a blank one produce the same 400 from AuthService
    - ChangePasswordRequest: newPassword must be present
"""

from typing import Optional, Union

from pydantic import BaseModel, Field

Identifier = Union[int, str]


class RegisterRequest(BaseModel):
    name: str = Field(default="", description="Display name")
    email: str = Field(default="", description="Login email (unique)")
    password: str = Field(description="Plaintext password, hashed before storage")


class LoginRequest(BaseModel):
    email: Optional[str] = Field(default=None)
    password: Optional[str] = Field(default=None)


class LoginResponse(BaseModel):
    """
    What:  Returned by POST /api/login on success.

    token:   HS256 bearer token, 2-hour expiry, payload {id, email}
    name:    Display name for the frontend greeting
    userId:  Id the frontend uses for /api/orders and /api/user calls
    """
    token: str
    name: Optional[str] = None
    user_id: Identifier = Field(alias="userId")

    model_config = {"populate_by_name": True}


class ChangePasswordRequest(BaseModel):
    new_password: str = Field(alias="newPassword", description="Replacement plaintext password")

    model_config = {"populate_by_name": True}


class UserResponse(BaseModel):
    """Public view of a user. The password hash is never selected."""
    id: Identifier
    name: Optional[str] = None
    email: Optional[str] = None
