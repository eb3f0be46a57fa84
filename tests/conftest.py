"""Shared test fixtures for docrepo."""

import os
import tempfile
from datetime import UTC, datetime

import pytest

from docrepo.repository.models import Author, Document


def _at(seconds: int) -> datetime:
    return datetime.fromtimestamp(seconds, tz=UTC)


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "repository": {"missing_fields": "skip"},
        "logging": {"level": "debug", "file": os.path.join(tmp_dir, "docrepo.log")},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def alice():
    return Author(id="a-1", name="Alice")


@pytest.fixture
def bob():
    return Author(id="a-2", name="Bob")


@pytest.fixture
def sample_documents(alice, bob):
    return [
        Document(id="d-report", title="Report Q1", content="Revenue grew", author=alice, created=_at(100)),
        Document(id="d-budget", title="Plan", content="The budget for 2025", author=bob, created=_at(200)),
        Document(id="d-notes", title="notes", content="meeting minutes", author=alice, created=_at(300)),
    ]
