"""Pytest configuration and shared fixtures."""

import pytest

from datestep.config import reset_datestep_config


@pytest.fixture(autouse=True)
def reset_config_for_all_tests():
    """Reset the configuration singleton before and after each test.

    The configuration is module-level state that persists across tests.
    """
    reset_datestep_config()
    yield
    reset_datestep_config()
