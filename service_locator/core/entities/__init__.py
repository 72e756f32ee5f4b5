"""
Core entities module for the service locator.

This module provides access to the value types shared by the
registry engine.
"""

from .registration_entity import (
    RegistrationMode,
    RegistrationParams,
    TypeKey,
    Registrant,
    describe_type
)

__all__ = [
    'RegistrationMode',
    'RegistrationParams',
    'TypeKey',
    'Registrant',
    'describe_type'
]
