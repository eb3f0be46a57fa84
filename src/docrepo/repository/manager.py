"""DocumentManager — the repository facade.

Ties a DocumentStore to a DocumentSearcher behind the three-call API
(save, search, find_by_id).
"""

from __future__ import annotations

from docrepo.core.config import Config

from .config import RepositoryConfig
from .models import Document, SearchRequest
from .search import DocumentSearcher
from .store import DocumentStore


class DocumentManager:
    """In-memory document repository.

    Example::

        manager = DocumentManager()
        doc = manager.save(Document(title="Report", content="...", created=now))
        manager.find_by_id(doc.id)
        manager.search(SearchRequest(title_prefixes=["Rep"]))
    """

    def __init__(
        self,
        config: RepositoryConfig | None = None,
        store: DocumentStore | None = None,
    ) -> None:
        self.config = config or RepositoryConfig()
        self.store = store if store is not None else DocumentStore()
        self._searcher = DocumentSearcher(self.store, self.config)

    @classmethod
    def from_config(cls, config: Config) -> DocumentManager:
        """Build a manager from the ``repository`` section of a Config."""
        section = config.validated().repository
        return cls(config=RepositoryConfig(missing_fields=section.missing_fields))

    def save(self, document: Document) -> Document:
        return self.store.save(document)

    def search(self, request: SearchRequest) -> list[Document]:
        return self._searcher.search(request)

    def find_by_id(self, document_id: str) -> Document | None:
        return self.store.find_by_id(document_id)
