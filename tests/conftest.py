"""Shared pytest fixtures for termquery tests."""

import logging

import pytest

from termquery.core.ir import MatchContext


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Undo ``logging.basicConfig`` calls made by CLI commands.

    CliRunner streams are closed after each invocation; a handler left on the
    root logger would write to them in later tests.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def context() -> MatchContext:
    """Return an empty match context."""
    return MatchContext()
