"""Tests for docrepo.repository.predicates."""

from datetime import UTC, datetime

import pytest

from docrepo.core.exceptions import MissingFieldError
from docrepo.repository.models import Author, Document
from docrepo.repository.predicates import (
    Criterion,
    CriterionKind,
    authored_by,
    content_contains,
    created_after,
    created_before,
    title_starts_with,
)

T100 = datetime.fromtimestamp(100, tz=UTC)


@pytest.fixture
def doc():
    return Document(
        id="d-1",
        title="Report Q1",
        content="The quarterly budget",
        author=Author(id="a-1", name="Alice"),
        created=T100,
    )


class TestTitleStartsWith:
    def test_prefix(self, doc):
        assert title_starts_with(doc, "Rep")
        assert title_starts_with(doc, "")
        assert title_starts_with(doc, "Report Q1")

    def test_case_sensitive(self, doc):
        assert not title_starts_with(doc, "rep")

    def test_not_a_prefix(self, doc):
        assert not title_starts_with(doc, "Q1")

    def test_missing_title_raises(self):
        with pytest.raises(MissingFieldError, match="title") as exc:
            title_starts_with(Document(id="d-x"), "R")
        assert exc.value.document_id == "d-x"
        assert exc.value.field == "title"


class TestContentContains:
    def test_substring_anywhere(self, doc):
        assert content_contains(doc, "budget")
        assert content_contains(doc, "The")
        assert content_contains(doc, "quarterly bud")

    def test_case_sensitive(self, doc):
        assert not content_contains(doc, "Budget")

    def test_missing_content_raises(self):
        with pytest.raises(MissingFieldError, match="content"):
            content_contains(Document(id="d-x", title="t"), "x")


class TestAuthoredBy:
    def test_exact_match(self, doc):
        assert authored_by(doc, "a-1")
        assert not authored_by(doc, "a-10")
        assert not authored_by(doc, "A-1")

    def test_missing_author_raises(self):
        with pytest.raises(MissingFieldError, match="author"):
            authored_by(Document(id="d-x"), "a-1")

    def test_missing_author_id_raises(self):
        with pytest.raises(MissingFieldError) as exc:
            authored_by(Document(id="d-x", author=Author(id=None)), "a-1")
        assert exc.value.field == "author.id"


class TestDateBounds:
    def test_created_after_is_strict(self, doc):
        assert created_after(doc, datetime.fromtimestamp(50, tz=UTC))
        assert not created_after(doc, T100)
        assert not created_after(doc, datetime.fromtimestamp(150, tz=UTC))

    def test_created_before_is_strict(self, doc):
        assert created_before(doc, datetime.fromtimestamp(150, tz=UTC))
        assert not created_before(doc, T100)
        assert not created_before(doc, datetime.fromtimestamp(10, tz=UTC))

    def test_missing_created_raises(self):
        with pytest.raises(MissingFieldError, match="created"):
            created_after(Document(id="d-x"), T100)
        with pytest.raises(MissingFieldError, match="created"):
            created_before(Document(id="d-x"), T100)


class TestCriterion:
    def test_dispatches_by_kind(self, doc):
        assert Criterion(CriterionKind.TITLE_PREFIX, "Rep").matches(doc)
        assert Criterion(CriterionKind.CONTENT_SUBSTRING, "budget").matches(doc)
        assert Criterion(CriterionKind.AUTHOR_ID, "a-1").matches(doc)
        assert not Criterion(CriterionKind.CREATED_BEFORE, T100).matches(doc)

    def test_kind_values(self):
        assert CriterionKind("title_prefix") is CriterionKind.TITLE_PREFIX
        assert CriterionKind.CREATED_AFTER == "created_after"
