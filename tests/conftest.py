"""
Shared pytest fixtures and configuration for chaining_iter tests.
"""

import logging

import pytest

from chaining_iter import DoubleEndedIterChain, IterChain


@pytest.fixture
def chain():
    """Provide a fresh forward-only chain."""
    return IterChain()


@pytest.fixture
def double_chain():
    """Provide a fresh double-ended chain."""
    return DoubleEndedIterChain()


@pytest.fixture
def debug_log(caplog):
    """Capture debug records emitted while chains drop segments."""
    caplog.set_level(logging.DEBUG)
    return caplog
