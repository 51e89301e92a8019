"""Unit test fixtures shared across modules."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Drop handlers installed by setup_logging so streams do not leak between tests."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if getattr(handler, "_cnpcheck", False):
            root.removeHandler(handler)
    root.setLevel(level)
