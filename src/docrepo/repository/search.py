"""Multi-criteria document search.

Every active criterion of a SearchRequest is evaluated against the whole
store and the per-criterion matches are unioned. A document is returned
if it satisfies *any* criterion, not all of them.
"""

from __future__ import annotations

from loguru import logger

from docrepo.core.exceptions import MissingFieldError

from .config import MissingFieldPolicy, RepositoryConfig
from .models import Document, SearchRequest
from .predicates import Criterion
from .store import DocumentStore


class DocumentSearcher:
    """Union-of-criteria search over a DocumentStore.

    The two date bounds are separate criteria, not a range:
    ``created_from=50, created_to=10`` returns documents created after 50
    *or* before 10.

    Example::

        searcher = DocumentSearcher(store)
        hits = searcher.search(SearchRequest(title_prefixes=["Rep"], author_ids=["a-1"]))
    """

    def __init__(self, store: DocumentStore, config: RepositoryConfig | None = None):
        self.store = store
        self.config = config or RepositoryConfig()

    def search(self, request: SearchRequest | None) -> list[Document]:
        """Return every stored document matching at least one active criterion.

        Args:
            request: The query. None behaves like an empty request.

        Returns:
            Matching documents, each exactly once, in no guaranteed order.
            Empty when nothing matches or no criterion is active.

        Raises:
            MissingFieldError: Under ``MissingFieldPolicy.RAISE``, when a
                document lacks a field an active criterion tests.
        """
        if request is None or request.is_empty:
            return []

        results: dict[str, Document] = {}
        active = 0
        for criterion in request.active_criteria():
            active += 1
            for document in self.store.documents():
                if self._matches(criterion, document):
                    results[document.id] = document

        logger.debug(f"Search with {active} active criteria matched {len(results)} documents")
        return list(results.values())

    def _matches(self, criterion: Criterion, document: Document) -> bool:
        try:
            return criterion.matches(document)
        except MissingFieldError as e:
            if self.config.missing_fields is MissingFieldPolicy.RAISE:
                raise
            logger.debug(f"Skipping {criterion.kind} for document {e.document_id}: no {e.field}")
            return False
