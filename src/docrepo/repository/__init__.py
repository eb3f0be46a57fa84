"""Document repository: models, store, predicates and search.

Provides the Document/Author/SearchRequest models, an in-memory
DocumentStore, per-criterion predicate evaluators, a union-of-criteria
DocumentSearcher, and the DocumentManager facade tying them together.
"""

from .config import MissingFieldPolicy, RepositoryConfig
from .manager import DocumentManager
from .models import Author, Document, SearchRequest
from .predicates import Criterion, CriterionKind
from .protocol import DocumentRepository
from .search import DocumentSearcher
from .store import DocumentStore

__all__ = [
    "Author",
    "Criterion",
    "CriterionKind",
    "Document",
    "DocumentManager",
    "DocumentRepository",
    "DocumentSearcher",
    "DocumentStore",
    "MissingFieldPolicy",
    "RepositoryConfig",
    "SearchRequest",
]
