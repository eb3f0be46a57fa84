"""DocumentStore — in-memory upsert and point lookup.

The store owns the id -> Document map and is the only thing that
mutates it. No locking: callers sharing a store across threads must
synchronise externally.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator

from loguru import logger

from docrepo.core.exceptions import PreconditionError
from docrepo.core.types import IdFactory

from .models import Document, is_naive


def _uuid_id() -> str:
    return str(uuid.uuid4())


class DocumentStore:
    """In-memory document map keyed by document id."""

    def __init__(self, id_factory: IdFactory = _uuid_id) -> None:
        self._id_factory = id_factory
        self._documents: dict[str, Document] = {}
        # id() of each stored instance -> its key; stored instances are never released
        self._keys: dict[int, str] = {}

    def save(self, document: Document) -> Document:
        """Upsert *document* and return the stored instance.

        A missing or empty id is generated and set on *document*. When the
        id is already stored, title, content and author are copied onto the
        stored document; its id and ``created`` are left untouched.

        Raises:
            PreconditionError: If *document* is not a Document, is a stored
                instance whose id was changed, or is new with a naive ``created``.
        """
        if not isinstance(document, Document):
            raise PreconditionError(f"Expected a Document, got {type(document).__name__}")

        stored_key = self._keys.get(id(document))
        if stored_key is not None and stored_key != document.id:
            raise PreconditionError(f"Document is already stored under {stored_key!r}; its id cannot change")

        if document.id not in self._documents and is_naive(document.created):
            raise PreconditionError(f"Document {document.id!r} has a timezone-naive created timestamp")

        if not document.id:
            new_id = self._id_factory()
            if not new_id or new_id in self._documents:
                raise PreconditionError(f"id_factory produced an unusable id: {new_id!r}")
            document.id = new_id

        existing = self._documents.get(document.id)
        if existing is None:
            self._documents[document.id] = document
            self._keys[id(document)] = document.id
            logger.debug(f"Inserted document {document.id}")
            return document

        existing.title = document.title
        existing.content = document.content
        existing.author = document.author
        logger.debug(f"Updated document {existing.id}")
        return existing

    def find_by_id(self, document_id: str) -> Document | None:
        """Exact-key lookup. Returns None when nothing is stored under *document_id*."""
        return self._documents.get(document_id)

    def documents(self) -> list[Document]:
        """Snapshot of every stored document."""
        return list(self._documents.values())

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def __iter__(self) -> Iterator[Document]:
        return iter(self.documents())
