"""
Resolver handed to builders.

This module provides the capability object builders receive so they
can resolve their own dependencies from the same registry.
"""

from typing import TYPE_CHECKING, Any, Optional

from ...core.entities.registration_entity import RegistrationParams
from ...core.interfaces.resolver_interface import ResolverInterface

if TYPE_CHECKING:
    from .container import Registry


class Resolver(ResolverInterface):
    """Resolver bound to a single registry."""

    def __init__(self, registry: "Registry"):
        """
        Initialize the resolver.

        Args:
            registry: Registry that nested resolutions go to
        """
        self._registry = registry

    def get(self, type_id: Any, params: Optional[RegistrationParams] = None) -> Any:
        return self._registry.get(type_id, params)

    def __repr__(self) -> str:
        return f"Resolver({self._registry!r})"
