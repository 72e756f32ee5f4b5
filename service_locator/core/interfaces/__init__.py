"""
Core interfaces module for the service locator.

This module provides access to the interfaces implemented by the
registry engine and its collaborators.
"""

from .resolver_interface import LogSink, ResolverInterface

__all__ = [
    'LogSink',
    'ResolverInterface'
]
