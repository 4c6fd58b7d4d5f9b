"""
QuickBite Backend: Order Service
=================================

What:  Create, list and delete orders.
Who:   Called by the order route handlers.

Orders have no lifecycle beyond existence: they are inserted as sent,
listed by owner and deleted by id. Neither the owning user nor the items
are validated.
"""

import logging
from typing import List, Union

from quickbite.config import settings
from quickbite.datastore.base import DataStore
from quickbite.exceptions import InternalError, NotFoundError, QuickBiteError, StorageError
from quickbite.schemas.common import MessageResponse
from quickbite.schemas.order import OrderResponse

logger = logging.getLogger(__name__)

Identifier = Union[int, str]


class OrderService:

    async def create_order(
        self,
        store: DataStore,
        user_id: Identifier,
        items: list,
    ) -> MessageResponse:
        await store.insert(settings.orders_table, [{"user_id": user_id, "items": items}])

        logger.info("Order created for user %s (%d items)", user_id, len(items))
        return MessageResponse(message="Order created")

    async def list_orders(self, store: DataStore, user_id: Identifier) -> List[OrderResponse]:
        """All orders owned by `user_id`; an empty list when there are none."""
        rows = await store.select(settings.orders_table, filters={"user_id": user_id})

        logger.info("Found %d orders for user %s", len(rows), user_id)
        return [OrderResponse.model_validate(row) for row in rows]

    async def delete_order(self, store: DataStore, order_id: Identifier) -> MessageResponse:
        """
        Delete one order by id.

        The order is looked up first so a missing id answers 404 instead of
        a silent no-op delete.

        Raises:
            NotFoundError: lookup failed or matched nothing (→ 404)
            StorageError: the delete itself was rejected (→ 400)
            InternalError: anything unexpected (→ 500)
        """
        try:
            try:
                await store.select_one(settings.orders_table, filters={"id": order_id})
            except StorageError as e:
                logger.warning("Order %s not found: %s", order_id, e.message)
                raise NotFoundError(
                    resource="order",
                    resource_id=str(order_id),
                    context={"reason": e.message},
                ) from e

            await store.delete(settings.orders_table, filters={"id": order_id})

            logger.info("Order %s deleted", order_id)
            return MessageResponse(message="Order deleted successfully")

        except QuickBiteError:
            raise
        except Exception as e:
            logger.error("Unexpected error deleting order %s: %s", order_id, str(e), exc_info=True)
            raise InternalError(context={"original_error": type(e).__name__}) from e


order_service = OrderService()
