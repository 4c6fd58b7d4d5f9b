"""
QuickBite Backend: Menu Service
================================

What:  Lists the menu. The menu table is read-only for the API.
"""

import logging
from typing import List

from quickbite.config import settings
from quickbite.datastore.base import DataStore
from quickbite.schemas.order import MenuItemResponse

logger = logging.getLogger(__name__)


class MenuService:

    async def list_items(self, store: DataStore) -> List[MenuItemResponse]:
        """Every menu row, unfiltered. Store failures propagate as StorageError."""
        rows = await store.select(settings.menu_items_table)

        logger.info("Found %d menu items", len(rows))
        for row in rows:
            logger.debug("- %s (%s)", row.get("name"), row.get("price"))

        return [MenuItemResponse.model_validate(row) for row in rows]


menu_service = MenuService()
