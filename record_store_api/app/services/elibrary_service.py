"""Business logic for e‑library items."""

import logging
from typing import List

from record_store_api.app.core.errors import NotFoundError, store_errors
from record_store_api.app.repositories.elibrary import ELibraryRepository
from record_store_api.app.schemas.elibrary import ELibraryItemCreate, ELibraryItemRead, ELibraryItemUpdate

logger = logging.getLogger(__name__)

NOT_FOUND = "Item not found"


class ELibraryService:
    def __init__(self, items: ELibraryRepository) -> None:
        self.items = items

    async def list_items(self) -> List[ELibraryItemRead]:
        return self.items.list()

    async def get_item(self, item_id: int) -> ELibraryItemRead:
        item = self.items.get(item_id)
        if item is None:
            raise NotFoundError(NOT_FOUND)
        return item

    async def create_item(self, data: ELibraryItemCreate) -> ELibraryItemRead:
        with store_errors(NOT_FOUND):
            item = self.items.create(data.model_dump(include={"author", "title", "organization"}))
        logger.info("Created e-library item %s", item.id)
        return item

    async def update_item(self, item_id: int, data: ELibraryItemUpdate) -> ELibraryItemRead:
        if not self.items.exists(item_id):
            raise NotFoundError(NOT_FOUND)
        with store_errors(NOT_FOUND):
            item = self.items.update(item_id, data.model_dump(include=data.model_fields_set))
        logger.info("Updated e-library item %s", item_id)
        return item

    async def delete_item(self, item_id: int) -> None:
        if not self.items.soft_delete(item_id):
            raise NotFoundError(NOT_FOUND)
        logger.info("Deleted e-library item %s", item_id)
