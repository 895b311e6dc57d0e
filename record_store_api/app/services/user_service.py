"""
Business logic for users.

Email and phone arrays are normalised by the schemas; this service
decides what gets replaced.  On update an array that is present
replaces the stored set, an absent one leaves it alone.
"""

import logging
from typing import List

from record_store_api.app.core.errors import NotFoundError, store_errors
from record_store_api.app.repositories.users import UserRepository
from record_store_api.app.schemas.user import UserCreate, UserRead, UserUpdate

logger = logging.getLogger(__name__)

NOT_FOUND = "User not found"


class UserService:
    def __init__(self, users: UserRepository) -> None:
        self.users = users

    async def list_users(self) -> List[UserRead]:
        return self.users.list()

    async def get_user(self, user_id: int) -> UserRead:
        user = self.users.get(user_id)
        if user is None:
            raise NotFoundError(NOT_FOUND)
        return user

    async def create_user(self, data: UserCreate) -> UserRead:
        with store_errors(NOT_FOUND):
            user = self.users.create(data.name, data.emails, data.phones)
        logger.info("Created user %s", user.id)
        return user

    async def update_user(self, user_id: int, data: UserUpdate) -> UserRead:
        if not self.users.exists(user_id):
            raise NotFoundError(NOT_FOUND)
        provided = data.model_fields_set
        changes = {"name": data.name} if "name" in provided else {}
        with store_errors(NOT_FOUND):
            user = self.users.update(
                user_id,
                changes,
                emails=data.emails if "emails" in provided else None,
                phones=data.phones if "phones" in provided else None,
            )
        logger.info("Updated user %s", user_id)
        return user

    async def delete_user(self, user_id: int) -> None:
        """Soft‑delete a user together with its contact rows."""
        if not self.users.soft_delete(user_id):
            raise NotFoundError(NOT_FOUND)
        logger.info("Deleted user %s", user_id)
