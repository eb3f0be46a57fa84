"""Tests for docrepo.core.utils.logging."""

import os
import sys

import pytest
from loguru import logger

from docrepo.core.config import Config
from docrepo.core.utils.logging import setup_logging, setup_logging_from_config
from docrepo.repository.models import Document
from docrepo.repository.store import DocumentStore


@pytest.fixture(autouse=True)
def _restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_file_sink_receives_debug(tmp_dir):
    log_file = os.path.join(tmp_dir, "docrepo.log")
    setup_logging(level="DEBUG", log_file=log_file)

    DocumentStore().save(Document(id="d-1", title="t"))
    logger.complete()

    with open(log_file) as f:
        assert "Inserted document d-1" in f.read()


def test_level_filters(tmp_dir):
    log_file = os.path.join(tmp_dir, "docrepo.log")
    setup_logging(level="WARNING", log_file=log_file)

    DocumentStore().save(Document(id="d-1", title="t"))
    logger.complete()

    with open(log_file) as f:
        assert "d-1" not in f.read()


def test_from_config(tmp_config_file, tmp_dir):
    setup_logging_from_config(Config(config_file=tmp_config_file))

    store = DocumentStore()
    store.save(Document(id="d-1", title="old"))
    store.save(Document(id="d-1", title="new"))
    logger.complete()

    with open(os.path.join(tmp_dir, "docrepo.log")) as f:
        assert "Updated document d-1" in f.read()
