"""
In-process document store with the same contract as the MongoDB backend.

Used by the test-suite and by ``STORAGE_BACKEND=memory`` for local runs.
Data lives only as long as the process.
"""

from __future__ import annotations

import copy
import logging
from typing import Dict, Iterable, List, Optional

from bson import ObjectId

from database.store import (
    SKILLS_COLLECTION,
    USERS_COLLECTION,
    Document,
    DocumentCollection,
    DocumentStore,
)
from utils.errors import ConflictError

logger = logging.getLogger(__name__)


class InMemoryDocumentCollection(DocumentCollection):
    def __init__(self, name: str, unique_fields: Iterable[str] = ()) -> None:
        self.name = name
        self.unique_fields = set(unique_fields)
        self._docs: Dict[str, Document] = {}

    def _check_unique(self, document: Document, exclude_id: Optional[str] = None) -> None:
        for field in self.unique_fields:
            if field not in document:
                continue
            for doc_id, existing in self._docs.items():
                if doc_id != exclude_id and existing.get(field) == document[field]:
                    raise ConflictError(
                        f"Duplicate value for a unique field in '{self.name}'"
                    )

    @staticmethod
    def _matches(doc: Document, filter_dict: Document) -> bool:
        return all(doc.get(key) == value for key, value in filter_dict.items())

    async def insert_one(self, document: Document) -> Document:
        # check + write must not yield to the event loop
        self._check_unique(document)
        doc = copy.deepcopy(document)
        doc["_id"] = str(ObjectId())
        self._docs[doc["_id"]] = doc
        return copy.deepcopy(doc)

    async def find_one(self, filter_dict: Document) -> Optional[Document]:
        for doc in self._docs.values():
            if self._matches(doc, filter_dict):
                return copy.deepcopy(doc)
        return None

    async def find_many(self, filter_dict: Optional[Document] = None) -> List[Document]:
        return [
            copy.deepcopy(doc)
            for doc in self._docs.values()
            if self._matches(doc, filter_dict or {})
        ]

    async def find_by_id(self, doc_id: str) -> Optional[Document]:
        doc = self._docs.get(doc_id)
        return copy.deepcopy(doc) if doc is not None else None

    async def update_by_id(self, doc_id: str, fields: Document) -> Optional[Document]:
        doc = self._docs.get(doc_id)
        if doc is None:
            return None
        self._check_unique(fields, exclude_id=doc_id)
        doc.update(copy.deepcopy(fields))
        return copy.deepcopy(doc)

    async def delete_by_id(self, doc_id: str) -> Optional[Document]:
        return self._docs.pop(doc_id, None)


class InMemoryDocumentStore(DocumentStore):
    def __init__(self) -> None:
        self.users = InMemoryDocumentCollection(USERS_COLLECTION, unique_fields=("email",))
        self.skills = InMemoryDocumentCollection(SKILLS_COLLECTION)

    async def ensure_indexes(self) -> None:
        logger.debug("In-memory store: unique email enforced on insert")

    async def close(self) -> None:
        return None
