# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Fixture data providers for tests."""

# Set before the submodule imports; export.py reads it at import time
__version__ = "0.1.0"

from .base import FixtureData
from .config import Config, ConfigurationError
from .export import FixtureExport, dump_export, export_fixtures
from .models import UserRecord
from .registry import FixtureNotFoundError, FixtureRegistry, default_registry
from .user_data import USER_RECORDS, UserData

__all__ = [
    "FixtureData",
    "UserData",
    "UserRecord",
    "USER_RECORDS",
    "FixtureRegistry",
    "FixtureNotFoundError",
    "default_registry",
    "FixtureExport",
    "export_fixtures",
    "dump_export",
    "Config",
    "ConfigurationError",
]
