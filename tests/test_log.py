"""Tests for CLI logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from errortree.log import setup_logging


@pytest.fixture
def clean_logger():
    logger = logging.getLogger("errortree")
    saved = list(logger.handlers), logger.level
    logger.handlers = [h for h in logger.handlers if not isinstance(h, RichHandler)]
    yield logger
    logger.handlers, level = saved
    logger.setLevel(level)


def test_setup_logging_adds_one_rich_handler(clean_logger):
    setup_logging("debug")
    setup_logging("info")
    handlers = [h for h in clean_logger.handlers if isinstance(h, RichHandler)]
    assert len(handlers) == 1
    assert clean_logger.level == logging.INFO


def test_derive_logs_at_debug(caplog, fs_tree):
    from errortree.engine import DerivationConfig, Numbering, derive

    with caplog.at_level(logging.DEBUG, logger="errortree"):
        derive(fs_tree, DerivationConfig(numbering=Numbering.HIERARCHICAL, width=2))
    assert "derived 4 codes (hierarchical numbering)" in caplog.text
