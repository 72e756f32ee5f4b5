"""
Resolver interface for nested dependency resolution.

This module defines the capability handed to every builder so it can
fetch its own dependencies from the registry that is building it.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from ..entities.registration_entity import RegistrationParams

LogSink = Callable[[str], None]


class ResolverInterface(ABC):
    """
    Interface for resolving registered types from inside a builder.

    ``resolver(SomeType, params)`` and ``resolver.get(SomeType, params)``
    behave the same.
    """

    @abstractmethod
    def get(self, type_id: Any, params: Optional[RegistrationParams] = None) -> Any:
        """
        Resolve an instance of a registered type.

        Args:
            type_id: Type identity to resolve
            params: Optional params forwarded to the builder

        Returns:
            Any: Resolved instance
        """
        pass

    def __call__(self, type_id: Any, params: Optional[RegistrationParams] = None) -> Any:
        return self.get(type_id, params)
