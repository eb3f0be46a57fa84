"""
docrepo — an embeddable in-memory document repository.

Upsert documents, look them up by id, and search them with a composite
query whose criteria are combined as a union.
"""

from .repository import (
    Author,
    Document,
    DocumentManager,
    DocumentRepository,
    DocumentSearcher,
    DocumentStore,
    MissingFieldPolicy,
    RepositoryConfig,
    SearchRequest,
)

__version__ = "0.1.0"

__all__ = [
    "Author",
    "Document",
    "DocumentManager",
    "DocumentRepository",
    "DocumentSearcher",
    "DocumentStore",
    "MissingFieldPolicy",
    "RepositoryConfig",
    "SearchRequest",
]
