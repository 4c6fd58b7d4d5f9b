"""
QuickBite Backend: Order Routes
================================

What:  POST /api/orders, GET /api/orders/{user_id}, DELETE /api/orders/{order_id}.

Note the asymmetry inherited by the frontend contract: the GET path
segment is the owning user's id, the DELETE path segment is the order's id.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from quickbite.datastore.base import DataStore
from quickbite.dependencies import get_datastore
from quickbite.schemas.common import ErrorResponse, MessageResponse
from quickbite.schemas.order import CreateOrderRequest, OrderResponse
from quickbite.services.order_service import order_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/orders", tags=["Orders"])


@router.post(
    "",
    response_model=MessageResponse,
    responses={400: {"description": "Insert rejected by the store", "model": ErrorResponse}},
    summary="Submit an order",
)
async def create_order(
    payload: CreateOrderRequest,
    store: DataStore = Depends(get_datastore),
) -> MessageResponse:
    return await order_service.create_order(store, payload.user_id, payload.items)


@router.get(
    "/{user_id}",
    response_model=List[OrderResponse],
    responses={400: {"description": "Query rejected by the store", "model": ErrorResponse}},
    summary="List a user's orders",
)
async def list_orders(
    user_id: str,
    store: DataStore = Depends(get_datastore),
) -> List[OrderResponse]:
    return await order_service.list_orders(store, user_id)


@router.delete(
    "/{order_id}",
    response_model=MessageResponse,
    responses={
        400: {"description": "Delete rejected by the store", "model": ErrorResponse},
        404: {"description": "Order not found", "model": ErrorResponse},
        500: {"description": "Unexpected failure", "model": ErrorResponse},
    },
    summary="Delete an order",
)
async def delete_order(
    order_id: str,
    store: DataStore = Depends(get_datastore),
) -> MessageResponse:
    logger.info("Received delete request for order %s", order_id)
    return await order_service.delete_order(store, order_id)
