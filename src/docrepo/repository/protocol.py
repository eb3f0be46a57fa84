"""DocumentRepository protocol — the library-level contract.

Hosts that wrap the repository (an HTTP handler, a CLI, a persistent
backend) can depend on this protocol instead of the concrete manager.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import Document, SearchRequest


@runtime_checkable
class DocumentRepository(Protocol):
    """Protocol for saving, searching and fetching documents."""

    def save(self, document: Document) -> Document:
        """Upsert a document and return the stored instance.

        Args:
            document: The document to store. A missing id is generated.

        Returns:
            The stored document after merging with any existing entry.
        """
        ...

    def search(self, request: SearchRequest) -> list[Document]:
        """Return documents matching any active criterion of *request*.

        Returns:
            Deduplicated matches in no guaranteed order; never None.
        """
        ...

    def find_by_id(self, document_id: str) -> Document | None:
        """Return the document stored under *document_id*, or None."""
        ...
