"""Configuration dataclasses for the document repository.

These are pure data containers with sensible defaults.
Override them from YAML config, env vars, or constructor args.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from docrepo.core.exceptions import ConfigurationError


class MissingFieldPolicy(StrEnum):
    """What a search does when a predicate meets a document without the field it tests."""

    RAISE = "raise"  # Abort the whole search with MissingFieldError
    SKIP = "skip"  # Treat the document as a non-match for that criterion


@dataclass
class RepositoryConfig:
    """Settings for search behaviour.

    Attributes:
        missing_fields: Policy for documents lacking a field an active
            criterion needs. Accepts the enum or its string value.
    """

    missing_fields: MissingFieldPolicy = MissingFieldPolicy.RAISE

    def __post_init__(self):
        try:
            self.missing_fields = MissingFieldPolicy(str(self.missing_fields).strip().lower())
        except ValueError:
            allowed = [p.value for p in MissingFieldPolicy]
            raise ConfigurationError(
                f"missing_fields must be one of {allowed}, got {self.missing_fields!r}"
            ) from None
