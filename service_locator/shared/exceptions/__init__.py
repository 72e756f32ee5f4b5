"""Registry exceptions."""

from .registry_errors import (
    RegistryError,
    AlreadyRegisteredError,
    NotFoundError,
    CyclicDependencyError,
    InstanceTypeMismatchError,
    DisposalError
)

__all__ = [
    'RegistryError',
    'AlreadyRegisteredError',
    'NotFoundError',
    'CyclicDependencyError',
    'InstanceTypeMismatchError',
    'DisposalError'
]
