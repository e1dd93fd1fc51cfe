"""
MongoDB document store backed by the async motor driver.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from config.settings import Settings
from database.store import (
    SKILLS_COLLECTION,
    USERS_COLLECTION,
    Document,
    DocumentCollection,
    DocumentStore,
)
from utils.errors import ConflictError, StoreError

logger = logging.getLogger(__name__)


def _to_object_id(doc_id: str) -> Optional[ObjectId]:
    if not ObjectId.is_valid(doc_id):
        return None
    return ObjectId(doc_id)


def _stringify_id(doc: Optional[Dict[str, Any]]) -> Optional[Document]:
    if doc is None:
        return None
    doc["_id"] = str(doc["_id"])
    return doc


class MongoDocumentCollection(DocumentCollection):
    """Wraps one motor collection and maps driver errors onto ``StoreError``."""

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        self._collection = collection
        self.name = collection.name

    def _fail(self, op: str, exc: PyMongoError) -> StoreError:
        logger.error("Error in %s: collection=%s, error=%s", op, self.name, exc)
        return StoreError("Database operation failed")

    async def insert_one(self, document: Document) -> Document:
        doc = dict(document)
        try:
            result = await self._collection.insert_one(doc)
        except DuplicateKeyError as exc:
            logger.info("Duplicate key rejected in '%s': %s", self.name, exc.details)
            raise ConflictError(f"Duplicate value for a unique field in '{self.name}'") from exc
        except PyMongoError as exc:
            raise self._fail("insert", exc) from exc
        doc["_id"] = str(result.inserted_id)
        return doc

    async def find_one(self, filter_dict: Document) -> Optional[Document]:
        try:
            doc = await self._collection.find_one(filter_dict)
        except PyMongoError as exc:
            raise self._fail("find", exc) from exc
        return _stringify_id(doc)

    async def find_many(self, filter_dict: Optional[Document] = None) -> List[Document]:
        try:
            docs = await self._collection.find(filter_dict or {}).to_list(length=None)
        except PyMongoError as exc:
            raise self._fail("list", exc) from exc
        return [_stringify_id(doc) for doc in docs]

    async def find_by_id(self, doc_id: str) -> Optional[Document]:
        oid = _to_object_id(doc_id)
        if oid is None:
            return None
        try:
            doc = await self._collection.find_one({"_id": oid})
        except PyMongoError as exc:
            raise self._fail("find", exc) from exc
        return _stringify_id(doc)

    async def update_by_id(self, doc_id: str, fields: Document) -> Optional[Document]:
        oid = _to_object_id(doc_id)
        if oid is None:
            return None
        try:
            doc = await self._collection.find_one_and_update(
                {"_id": oid},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as exc:
            raise ConflictError(f"Duplicate value for a unique field in '{self.name}'") from exc
        except PyMongoError as exc:
            raise self._fail("update", exc) from exc
        return _stringify_id(doc)

    async def delete_by_id(self, doc_id: str) -> Optional[Document]:
        oid = _to_object_id(doc_id)
        if oid is None:
            return None
        try:
            doc = await self._collection.find_one_and_delete({"_id": oid})
        except PyMongoError as exc:
            raise self._fail("delete", exc) from exc
        return _stringify_id(doc)


class MongoDocumentStore(DocumentStore):
    """``users`` and ``skills`` collections in one MongoDB database."""

    def __init__(self, client: AsyncIOMotorClient, database_name: str) -> None:
        self._client = client
        db = client[database_name]
        self._users_raw = db[USERS_COLLECTION]
        self.users = MongoDocumentCollection(self._users_raw)
        self.skills = MongoDocumentCollection(db[SKILLS_COLLECTION])
        logger.info("Using MongoDB database '%s'", database_name)

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoDocumentStore":
        client = AsyncIOMotorClient(settings.mongodb_uri, tz_aware=True)
        return cls(client, settings.mongodb_database)

    async def ensure_indexes(self) -> None:
        try:
            await self._users_raw.create_index([("email", ASCENDING)], unique=True)
        except PyMongoError as exc:
            logger.error("Could not create unique email index: %s", exc)
            raise StoreError("Database operation failed") from exc

    async def close(self) -> None:
        self._client.close()
        logger.info("Closed MongoDB connection")
