import logging
from types import SimpleNamespace

import pytest

from src.logging.setup import setup_logging


@pytest.fixture
def bare_root():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    yield root
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def test_adds_single_stdout_handler(bare_root):
    setup_logging(SimpleNamespace(log_level="debug"))
    setup_logging(SimpleNamespace(log_level="debug"))

    assert len(bare_root.handlers) == 1
    assert bare_root.level == logging.DEBUG
    assert logging.getLogger("discord.http").level == logging.WARNING


def test_unknown_level_falls_back_to_info(bare_root):
    setup_logging(SimpleNamespace(log_level="chatty"))
    assert bare_root.level == logging.INFO
