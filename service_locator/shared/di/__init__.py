"""
Registry engine.

This package provides the registry, the resolver handed to builders
and the composition-root helper that configures a registry.
"""

from .container import Registry
from .lifetime_manager import LifetimeManager
from .registrant_store import RegistrantStore
from .registry_config import configure_registry
from .resolver import Resolver

__all__ = [
    'Registry',
    'LifetimeManager',
    'RegistrantStore',
    'configure_registry',
    'Resolver'
]
