# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Shared fixtures for fixture_data tests."""

from typing import List

import logging

import pytest

from fixture_data.models import UserRecord
from fixture_data.registry import FixtureRegistry, default_registry
from fixture_data.user_data import UserData


@pytest.fixture
def user_data() -> UserData:
    """Provide a UserData provider."""
    return UserData()


@pytest.fixture
def user_records(user_data: UserData) -> List[UserRecord]:
    """Provide the sample user records."""
    return user_data.get_data()


@pytest.fixture
def registry() -> FixtureRegistry:
    """Provide a registry holding the built-in providers."""
    return default_registry()


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after the test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
