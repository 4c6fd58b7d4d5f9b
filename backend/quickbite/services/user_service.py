"""
QuickBite Backend: User Service
================================

What:  Public lookup of a single user.
Why only three columns: the password hash must never leave the store, so
the query selects id, name and email explicitly instead of "*".
"""

import logging
from typing import Union

from quickbite.config import settings
from quickbite.datastore.base import DataStore
from quickbite.schemas.user import UserResponse

logger = logging.getLogger(__name__)

PUBLIC_USER_COLUMNS = "id, name, email"


class UserService:

    async def get_user(self, store: DataStore, user_id: Union[int, str]) -> UserResponse:
        """
        Raises:
            StorageError: the user does not exist or the query failed. The two
                cases are not told apart; both answer 400.
        """
        row = await store.select_one(
            settings.users_table,
            columns=PUBLIC_USER_COLUMNS,
            filters={"id": user_id},
        )

        logger.info("User %s found", row.get("id"))
        return UserResponse.model_validate(row)


user_service = UserService()
