"""
docrepo exception hierarchy.

All docrepo exceptions inherit from DocRepoError, making it easy for consumers
to catch library-level errors while still distinguishing specific failure modes.
"""


class DocRepoError(Exception):
    """Base exception class for all docrepo errors."""


class ConfigurationError(DocRepoError):
    """Raised for configuration errors (missing keys, invalid values)."""


class PreconditionError(DocRepoError, ValueError):
    """Raised when a caller violates an operation's precondition."""


class MissingFieldError(PreconditionError):
    """Raised when a predicate needs a document field that is not set."""

    def __init__(self, document_id: str | None, field: str):
        self.document_id = document_id
        self.field = field
        super().__init__(f"Document {document_id!r} has no {field}")
