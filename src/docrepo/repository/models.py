"""Core data models for the document repository.

Plain dataclasses stand in for builders: construct with keyword
arguments and leave out whatever is unknown.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from docrepo.core.exceptions import PreconditionError

if TYPE_CHECKING:
    from .predicates import Criterion


def is_naive(value: datetime | None) -> bool:
    """True for a datetime without a UTC offset. None is not naive."""
    return value is not None and (value.tzinfo is None or value.utcoffset() is None)


@dataclass
class Author:
    """The author of a document. Always embedded in a Document."""

    id: str
    name: str = ""


@dataclass(eq=False)
class Document:
    """A stored record.

    Mutable: an upsert copies title, content and author onto the stored
    instance. Identity is the ``id``, never field-wise equality.

    Attributes:
        id: Unique identifier. Assigned by the store when None or empty.
        title: Document title, matched by prefix.
        content: Body text, matched by substring.
        author: Embedded author record.
        created: Creation timestamp. Supplied by the caller, kept across updates.
    """

    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: datetime | None = None

    def __repr__(self) -> str:
        title = self.title or ""
        preview = title[:40] + "..." if len(title) > 40 else title
        return f"Document(id={self.id!r}, title={preview!r})"


@dataclass(frozen=True)
class SearchRequest:
    """A bag of independent, optional filter criteria.

    ``None`` means "do not filter on this dimension". An empty list is a
    present criterion that contributes no matches. Both date bounds are
    exclusive and must be timezone-aware.
    """

    title_prefixes: list[str] | None = None
    contains_contents: list[str] | None = None
    author_ids: list[str] | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None

    def __post_init__(self):
        for name in ("created_from", "created_to"):
            if is_naive(getattr(self, name)):
                raise PreconditionError(f"{name} must be timezone-aware")

    @property
    def is_empty(self) -> bool:
        """True when no criterion is present at all."""
        return (
            self.title_prefixes is None
            and self.contains_contents is None
            and self.author_ids is None
            and self.created_from is None
            and self.created_to is None
        )

    def active_criteria(self) -> Iterator[Criterion]:
        """Yield one Criterion per active scalar value, list fields expanded."""
        from .predicates import iter_criteria

        return iter_criteria(self)
