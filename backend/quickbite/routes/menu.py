"""
QuickBite Backend: Menu Route
==============================

What:  GET /api/items, the full menu.
"""

from typing import List

from fastapi import APIRouter, Depends

from quickbite.datastore.base import DataStore
from quickbite.dependencies import get_datastore
from quickbite.schemas.common import ErrorResponse
from quickbite.schemas.order import MenuItemResponse
from quickbite.services.menu_service import menu_service

router = APIRouter(prefix="/api", tags=["Menu"])


@router.get(
    "/items",
    response_model=List[MenuItemResponse],
    responses={400: {"description": "Query rejected by the store", "model": ErrorResponse}},
    summary="List menu items",
)
async def list_items(store: DataStore = Depends(get_datastore)) -> List[MenuItemResponse]:
    return await menu_service.list_items(store)
