"""
Registry error types.

This module provides the exceptions raised by the registry when a
caller breaks its contract. Builder and dispose callback failures are
not wrapped; they reach the caller unchanged.
"""

from typing import Any, List, Sequence, Tuple

from ...core.entities.registration_entity import describe_type


class RegistryError(Exception):
    """Base class for registry errors."""


class AlreadyRegisteredError(RegistryError):
    """Raised by put() when the type is registered and may not be replaced."""

    def __init__(self, type_id: Any):
        self.type_id = type_id
        self.message = (
            f"An object of type {describe_type(type_id)} has already been put in the registry."
        )
        super().__init__(self.message)


class NotFoundError(RegistryError, LookupError):
    """Raised when a type has never been registered or was removed."""

    def __init__(self, type_id: Any):
        self.type_id = type_id
        self.message = f"There are no objects of type {describe_type(type_id)} in the registry."
        super().__init__(self.message)


class CyclicDependencyError(RegistryError):
    """Raised when a builder resolves a type that is already being built."""

    def __init__(self, chain: Sequence[Any]):
        self.chain: Tuple[Any, ...] = tuple(chain)
        path = " -> ".join(describe_type(type_id) for type_id in self.chain)
        self.message = f"Cyclic dependency detected: {path}"
        super().__init__(self.message)


class InstanceTypeMismatchError(RegistryError, TypeError):
    """Raised when a builder returns an instance of the wrong type."""

    def __init__(self, type_id: Any, expected: type, actual: type):
        self.type_id = type_id
        self.expected = expected
        self.actual = actual
        self.message = (
            f"Builder for {describe_type(type_id)} returned {actual.__name__}, "
            f"expected an instance of {expected.__name__}."
        )
        super().__init__(self.message)


class DisposalError(RegistryError):
    """Raised by clear() when more than one dispose callback failed."""

    def __init__(self, failures: Sequence[Tuple[Any, BaseException]]):
        self.failures: List[Tuple[Any, BaseException]] = list(failures)
        details = ", ".join(
            f"{describe_type(type_id)}: {error!r}" for type_id, error in self.failures
        )
        self.message = f"{len(self.failures)} dispose callbacks failed ({details})"
        super().__init__(self.message)
