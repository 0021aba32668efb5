# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Registry of fixture data providers.

Providers are looked up by the name they report through FixtureData.name().
"""

import logging
from typing import Dict, List

from .base import FixtureData
from .logging_setup import fixture_fields
from .user_data import UserData

logger = logging.getLogger(__name__)


class FixtureNotFoundError(KeyError):
    """Raised when no provider is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"No fixture registered under '{self.name}'"


class FixtureRegistry:
    """Registry for fixture data providers.

    Thread Safety:
    - NOT thread-safe: Register all providers during setup, before lookups
    """

    def __init__(self) -> None:
        """Initialize empty fixture registry."""
        self._providers: Dict[str, FixtureData] = {}

    def register(self, provider: FixtureData) -> None:
        """Register a provider under its name.

        Args:
            provider: Provider to register.

        Raises:
            TypeError: If provider is not a FixtureData instance.
            ValueError: If a provider with the same name is already registered.
        """
        if not isinstance(provider, FixtureData):
            raise TypeError(f"Provider must be a FixtureData instance, got {type(provider)}")

        name = provider.name()
        if name in self._providers:
            raise ValueError(f"A fixture named '{name}' is already registered")

        self._providers[name] = provider
        logger.debug(
            f"Registered fixture '{name}'",
            extra=fixture_fields(fixture=name, provider=type(provider).__name__),
        )

    def get(self, name: str) -> FixtureData:
        """Get the provider registered under name.

        Raises:
            FixtureNotFoundError: If name is not registered.
        """
        try:
            return self._providers[name]
        except KeyError:
            raise FixtureNotFoundError(name) from None

    def names(self) -> List[str]:
        """Return registered names in sorted order."""
        return sorted(self._providers)

    def count(self) -> int:
        """Return number of registered providers."""
        return len(self._providers)

    def clear(self) -> None:
        """Remove all registered providers."""
        self._providers.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._providers


def default_registry() -> FixtureRegistry:
    """Create a registry holding every built-in provider."""
    registry = FixtureRegistry()
    registry.register(UserData())
    return registry
