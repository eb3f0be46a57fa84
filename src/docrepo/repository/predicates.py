"""Predicate evaluators — one per criterion kind.

Each evaluator decides whether a single document satisfies a single
criterion value. A document lacking the tested field violates the
evaluator's precondition and raises ``MissingFieldError``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

from docrepo.core.exceptions import MissingFieldError

from .models import Document, SearchRequest


class CriterionKind(StrEnum):
    TITLE_PREFIX = "title_prefix"
    CONTENT_SUBSTRING = "content_substring"
    AUTHOR_ID = "author_id"
    CREATED_AFTER = "created_after"
    CREATED_BEFORE = "created_before"


def _require(document: Document, field: str) -> Any:
    value = getattr(document, field)
    if value is None:
        raise MissingFieldError(document.id, field)
    return value


def title_starts_with(document: Document, prefix: str) -> bool:
    """Case-sensitive, ordinal prefix match on the title."""
    return _require(document, "title").startswith(prefix)


def content_contains(document: Document, substring: str) -> bool:
    """Case-sensitive substring match anywhere in the content."""
    return substring in _require(document, "content")


def authored_by(document: Document, author_id: str) -> bool:
    author = _require(document, "author")
    if author.id is None:
        raise MissingFieldError(document.id, "author.id")
    return author.id == author_id


def created_after(document: Document, bound: datetime) -> bool:
    """Strictly later than *bound*."""
    return _require(document, "created") > bound


def created_before(document: Document, bound: datetime) -> bool:
    """Strictly earlier than *bound*."""
    return _require(document, "created") < bound


_EVALUATORS: dict[CriterionKind, Callable[[Document, Any], bool]] = {
    CriterionKind.TITLE_PREFIX: title_starts_with,
    CriterionKind.CONTENT_SUBSTRING: content_contains,
    CriterionKind.AUTHOR_ID: authored_by,
    CriterionKind.CREATED_AFTER: created_after,
    CriterionKind.CREATED_BEFORE: created_before,
}


@dataclass(frozen=True)
class Criterion:
    """One independent filter condition, e.g. a single title prefix."""

    kind: CriterionKind
    value: Any

    def matches(self, document: Document) -> bool:
        return _EVALUATORS[self.kind](document, self.value)


def iter_criteria(request: SearchRequest) -> Iterator[Criterion]:
    """Expand a request into its active scalar criteria.

    Order: title prefixes, content substrings, author ids, then the
    lower and upper date bounds. Absent fields yield nothing; so do
    empty lists.
    """
    for prefix in request.title_prefixes or ():
        yield Criterion(CriterionKind.TITLE_PREFIX, prefix)
    for substring in request.contains_contents or ():
        yield Criterion(CriterionKind.CONTENT_SUBSTRING, substring)
    for author_id in request.author_ids or ():
        yield Criterion(CriterionKind.AUTHOR_ID, author_id)
    if request.created_from is not None:
        yield Criterion(CriterionKind.CREATED_AFTER, request.created_from)
    if request.created_to is not None:
        yield Criterion(CriterionKind.CREATED_BEFORE, request.created_to)
