"""
Registrant store for the registry.

This module provides the mapping from type identity to registrant
record. It holds no lifecycle rules; those live in the lifetime
manager and the registry.
"""

from typing import Any, Dict, List, Optional, Tuple

from ...core.entities.registration_entity import Registrant


class RegistrantStore:
    """Mapping of type identities to their registrant records."""

    def __init__(self):
        """Initialize the store."""
        self._registrants: Dict[Any, Registrant] = {}

    def add(self, type_id: Any, registrant: Registrant) -> None:
        """
        Store a registrant, replacing any previous record for the type.

        Args:
            type_id: Type identity
            registrant: Registrant record
        """
        self._registrants[type_id] = registrant

    def get(self, type_id: Any) -> Optional[Registrant]:
        """
        Get the registrant for a type.

        Args:
            type_id: Type identity

        Returns:
            Optional[Registrant]: Registrant if found
        """
        return self._registrants.get(type_id)

    def discard(self, type_id: Any) -> None:
        """Drop the registrant for a type if present."""
        self._registrants.pop(type_id, None)

    def items(self) -> List[Tuple[Any, Registrant]]:
        """Snapshot of the stored ``(type_id, registrant)`` pairs."""
        return list(self._registrants.items())

    def keys(self) -> Tuple[Any, ...]:
        """Snapshot of the stored type identities."""
        return tuple(self._registrants)

    def clear(self) -> None:
        """Drop every registrant."""
        self._registrants.clear()

    def __contains__(self, type_id: Any) -> bool:
        return type_id in self._registrants

    def __len__(self) -> int:
        return len(self._registrants)
