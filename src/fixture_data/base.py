# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Base class for fixture data providers."""

from abc import ABC, abstractmethod
from typing import Any, List


class FixtureData(ABC):
    """Abstract base class for fixture data providers.

    A provider owns a constant table and hands out copies of it. Providers
    are registered by name in a FixtureRegistry.
    """

    @abstractmethod
    def name(self) -> str:
        """Return the name the provider is registered under.

        Returns:
            Provider name (e.g., "users").
        """
        pass

    @abstractmethod
    def get_data(self) -> List[Any]:
        """Return the provider's records in table order.

        Returns:
            A new list on every call. Callers may mutate it freely.
        """
        pass

    def count(self) -> int:
        """Return the number of records the provider holds."""
        return len(self.get_data())
