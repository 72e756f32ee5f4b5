"""
service_locator
──────────────────────────────────────────────────────────────
Type-keyed object registry.
Provides:
    - Lazy singletons, eager singletons and lazy factories
    - Nested resolution with runtime params
    - Dispose callbacks on refresh, removal and replacement
    - Cycle detection and instance type checks
──────────────────────────────────────────────────────────────
"""

__version__ = "1.0.0"

from service_locator.core.entities import RegistrationMode, RegistrationParams, TypeKey
from service_locator.core.interfaces import ResolverInterface
from service_locator.shared.di import Registry, Resolver, configure_registry
from service_locator.shared.exceptions import (
    RegistryError,
    AlreadyRegisteredError,
    NotFoundError,
    CyclicDependencyError,
    InstanceTypeMismatchError,
    DisposalError
)

__all__ = [
    "Registry",
    "Resolver",
    "ResolverInterface",
    "configure_registry",
    "RegistrationMode",
    "RegistrationParams",
    "TypeKey",
    "RegistryError",
    "AlreadyRegisteredError",
    "NotFoundError",
    "CyclicDependencyError",
    "InstanceTypeMismatchError",
    "DisposalError",
]
