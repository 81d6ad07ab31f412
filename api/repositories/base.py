"""Generic CRUD-over-collection repository shared by every entity.

Each entity repository binds one collection and one document model; the
operations below are identical for all of them. Entity repositories add only
their filtered list queries.
"""

from typing import Any, ClassVar

from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from core.logger import get_logger
from models import DocumentModel, utcnow
from repositories.utils import parse_object_id, store_operation

logger = get_logger(__name__)


class MongoRepository[T: DocumentModel]:
    """Repository for one MongoDB collection.

    Subclasses set:
        collection_name: the collection backing the entity
        model: the document model class
        created_fields: timestamps stamped on insert only
        updated_fields: timestamps stamped on insert and on every replace
    """

    collection_name: ClassVar[str]
    model: type[T]
    created_fields: ClassVar[tuple[str, ...]] = ("fechaCreacion",)
    updated_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(
        self, db: AsyncDatabase, *, count_matched_as_updated: bool = False
    ) -> None:
        self.log = logger.bind(collection=self.collection_name)
        try:
            self.collection: AsyncCollection = db.get_collection(self.collection_name)
        except PyMongoError:
            self.log.error("repository.init.failed", exc_info=True)
            raise
        self.count_matched_as_updated = count_matched_as_updated
        self.log.debug("repository.ready")

    @store_operation("list_all")
    async def list_all(self) -> list[T]:
        self.log.info("repository.list_all")
        return await self._find({})

    @store_operation("get_by_id")
    async def get_by_id(self, entity_id: str) -> T | None:
        """Point lookup. A malformed id is reported as not found."""
        object_id = parse_object_id(entity_id)
        if object_id is None:
            self.log.warning("repository.invalid_id", id=entity_id)
            return None
        return await self._find_one({"_id": object_id})

    @store_operation("create")
    async def create(self, entity: T) -> T:
        """Stamp timestamps, insert, and write the assigned id back onto entity."""
        now = utcnow()
        for field in (*self.created_fields, *self.updated_fields):
            setattr(entity, field, now)
        entity.id = None

        result = await self.collection.insert_one(entity.to_document())
        entity.id = str(result.inserted_id)
        self.log.info("repository.created", id=entity.id)
        return entity

    @store_operation("update")
    async def update(self, entity_id: str, entity: T) -> bool:
        """Full-document replace by id (not a patch).

        The id in the path always wins over any id in the payload. Returns
        False for a malformed or unknown id, and also when MongoDB reports
        the replace modified nothing unless ``count_matched_as_updated`` is set.
        """
        object_id = parse_object_id(entity_id)
        if object_id is None:
            self.log.warning("repository.invalid_id", id=entity_id)
            return False

        now = utcnow()
        for field in self.updated_fields:
            setattr(entity, field, now)
        entity.id = entity_id

        result = await self.collection.replace_one(
            {"_id": object_id}, entity.to_document()
        )
        updated = result.modified_count > 0 or (
            self.count_matched_as_updated and result.matched_count > 0
        )
        if updated:
            self.log.info("repository.updated", id=entity_id)
        else:
            self.log.warning(
                "repository.update.no_match",
                id=entity_id,
                matched=result.matched_count,
            )
        return updated

    @store_operation("delete")
    async def delete(self, entity_id: str) -> bool:
        object_id = parse_object_id(entity_id)
        if object_id is None:
            self.log.warning("repository.invalid_id", id=entity_id)
            return False

        result = await self.collection.delete_one({"_id": object_id})
        if result.deleted_count > 0:
            self.log.info("repository.deleted", id=entity_id)
            return True
        self.log.warning("repository.delete.no_match", id=entity_id)
        return False

    async def _find(self, query: dict[str, Any]) -> list[T]:
        documents = await self.collection.find(query).to_list()
        return [self.model.from_document(document) for document in documents]

    async def _find_one(self, query: dict[str, Any]) -> T | None:
        document = await self.collection.find_one(query)
        if document is None:
            return None
        return self.model.from_document(document)
