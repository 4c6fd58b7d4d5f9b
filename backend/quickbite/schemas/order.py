"""
QuickBite Backend: Order & Menu Schemas
========================================

What:  Pydantic models for the order endpoints and the menu listing.

Items are passed through untouched: whatever list the client submits is
stored and returned as-is. Nothing checks them against the menu.
"""

from typing import Any, List, Union

from pydantic import BaseModel, Field

Identifier = Union[int, str]


class CreateOrderRequest(BaseModel):
    user_id: Identifier = Field(alias="userId", description="Owning user id (not verified)")
    items: List[Any] = Field(description="Ordered items, stored as sent")

    model_config = {"populate_by_name": True}


class OrderResponse(BaseModel):
    """
    What:  One stored order, as the store returned it.

    Fields are untyped on the way out: rows are passed through, so a
    legacy row (NULL owner, jsonb object for items) still lists.
    """
    id: Any = None
    user_id: Any = Field(default=None, alias="userId")
    items: Any = None

    model_config = {"populate_by_name": True}


class MenuItemResponse(BaseModel):
    """
    What:  One row of the menu.

    extra="allow": any additional columns the menu table carries
    (description, image, category, ...) are returned unchanged. Prices
    are not re-typed; a numeric column arrives as a number, a text one
    as a string.
    """
    id: Any = None
    name: Any = None
    price: Any = None

    model_config = {"extra": "allow"}
