"""Pytest configuration and shared fixtures for fluent-either tests."""

import pytest
from fluent_either._config import reset_config
from fluent_either._logging import clear_log_hooks


@pytest.fixture
def sample_left():
    """Sample Left value for testing."""
    from fluent_either import Left

    return Left('boom')


@pytest.fixture
def sample_right():
    """Sample Right value for testing."""
    from fluent_either import Right

    return Right(42)


@pytest.fixture
def clean_diagnostics():
    """Fresh diagnostics config and no log hooks, before and after the test."""
    reset_config()
    clear_log_hooks()
    yield
    reset_config()
    clear_log_hooks()
