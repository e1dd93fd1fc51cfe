"""
Document-store interface used by the auth and skill services.

A store exposes two named collections (``users`` and ``skills``).  Documents
are plain dicts; the store generates the ``_id`` on insert and always hands
it back as a string.  Backends:

  • ``database.session.MongoDocumentStore`` — MongoDB via motor
  • ``database.memory.InMemoryDocumentStore`` — process-local, for tests/dev
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

Document = Dict[str, Any]

USERS_COLLECTION = "users"
SKILLS_COLLECTION = "skills"


class DocumentCollection(ABC):
    """One named collection of documents."""

    name: str

    @abstractmethod
    async def insert_one(self, document: Document) -> Document:
        """
        Insert ``document`` and return it with its generated ``_id``.

        Raises ``ConflictError`` when a unique field is already taken.
        """

    @abstractmethod
    async def find_one(self, filter_dict: Document) -> Optional[Document]:
        """Return the first document whose fields equal ``filter_dict``."""

    @abstractmethod
    async def find_many(self, filter_dict: Optional[Document] = None) -> List[Document]:
        ...

    @abstractmethod
    async def find_by_id(self, doc_id: str) -> Optional[Document]:
        """Unknown and malformed ids both yield ``None``."""

    @abstractmethod
    async def update_by_id(self, doc_id: str, fields: Document) -> Optional[Document]:
        """Set ``fields`` on the document and return the updated version."""

    @abstractmethod
    async def delete_by_id(self, doc_id: str) -> Optional[Document]:
        """Remove the document and return what was deleted."""


class DocumentStore(ABC):
    """Container for the collections the application needs."""

    users: DocumentCollection
    skills: DocumentCollection

    @abstractmethod
    async def ensure_indexes(self) -> None:
        """Create the unique email index (idempotent)."""

    @abstractmethod
    async def close(self) -> None:
        ...
