"""
Lifetime manager for the registry.

This module provides the lifetime manager that builds instances
according to a registrant's mode, guards against dependency cycles
and disposes instances that are discarded.
"""

from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Tuple

from ...core.entities.registration_entity import (
    Registrant,
    RegistrationMode,
    RegistrationParams,
    TypeKey
)
from ...core.interfaces.resolver_interface import ResolverInterface
from ..exceptions.registry_errors import CyclicDependencyError, InstanceTypeMismatchError


def expected_type_of(type_id: Any) -> Optional[type]:
    """
    Class that instances registered under ``type_id`` must belong to.

    Args:
        type_id: Type identity

    Returns:
        Optional[type]: The class, or None when the key carries no runtime type
    """
    if isinstance(type_id, type):
        return type_id
    if isinstance(type_id, TypeKey):
        return type_id.expected_type
    return None


class LifetimeManager:
    """
    Manager for registrant instance lifecycle.

    Builds instances for lazy singletons, eager singletons and lazy
    factories, tracks the types currently under construction and runs
    dispose callbacks.
    """

    def __init__(self, detect_cycles: bool = True, check_instance_types: bool = True):
        """
        Initialize lifetime manager.

        Args:
            detect_cycles: Fail fast when a builder re-enters a type under construction
            check_instance_types: Verify built instances against class keys
        """
        self.detect_cycles = detect_cycles
        self.check_instance_types = check_instance_types
        self._resolution_stack: List[Any] = []

    @property
    def resolution_chain(self) -> Tuple[Any, ...]:
        """Types currently being built, outermost first."""
        return tuple(self._resolution_stack)

    @contextmanager
    def _building(self, type_id: Any) -> Iterator[None]:
        if self.detect_cycles and type_id in self._resolution_stack:
            raise CyclicDependencyError(self._resolution_stack + [type_id])
        self._resolution_stack.append(type_id)
        try:
            yield
        finally:
            self._resolution_stack.pop()

    def build(
        self,
        type_id: Any,
        registrant: Registrant,
        resolver: ResolverInterface,
        params: Optional[RegistrationParams] = None
    ) -> Any:
        """
        Run a registrant's builder.

        Args:
            type_id: Type identity being built
            registrant: Registrant whose builder runs
            resolver: Resolver handed to the builder
            params: Params handed to the builder

        Returns:
            Any: Newly built instance

        Raises:
            CyclicDependencyError: If ``type_id`` is already under construction
            InstanceTypeMismatchError: If the instance does not match a class key
        """
        with self._building(type_id):
            instance = registrant.builder(resolver, params)
        self._check_type(type_id, instance)
        return instance

    def create_registrant(
        self,
        type_id: Any,
        builder: Any,
        register_mode: RegistrationMode,
        resolver: ResolverInterface,
        allow_one_reregistration: bool = False,
        on_dispose: Optional[Any] = None
    ) -> Registrant:
        """
        Create a registrant, building the instance right away for eager singletons.

        Eager builders never receive params.

        Returns:
            Registrant: New registrant record
        """
        registrant = Registrant(
            builder=builder,
            register_mode=register_mode,
            allow_one_reregistration=allow_one_reregistration,
            on_dispose=on_dispose
        )
        if register_mode == RegistrationMode.EAGER_SINGLETON:
            registrant.instance = self.build(type_id, registrant, resolver, None)
        return registrant

    def get_instance(
        self,
        type_id: Any,
        registrant: Registrant,
        resolver: ResolverInterface,
        params: Optional[RegistrationParams] = None
    ) -> Any:
        """
        Get or create an instance according to the registrant's mode.

        Args:
            type_id: Type identity being resolved
            registrant: Registrant for the type
            resolver: Resolver handed to the builder
            params: Params for a new build; ignored on a cache hit

        Returns:
            Any: Instance
        """
        if registrant.register_mode == RegistrationMode.LAZY_FACTORY:
            return self.build(type_id, registrant, resolver, params)

        if registrant.register_mode == RegistrationMode.LAZY_SINGLETON and not registrant.has_instance:
            instance = self.build(type_id, registrant, resolver, params)
            registrant.instance = instance
            registrant.last_params = params

        return registrant.instance

    def refresh(self, type_id: Any, registrant: Registrant, resolver: ResolverInterface) -> bool:
        """
        Rebuild a cached instance with the params of its last build.

        The new instance is built before the old one is disposed, so a
        failing builder leaves the cached instance in place.

        Returns:
            bool: Whether an instance was replaced
        """
        if not registrant.has_instance:
            return False

        new_instance = self.build(type_id, registrant, resolver, registrant.last_params)
        registrant.maybe_dispose()
        registrant.instance = new_instance
        return True

    def dispose(self, registrant: Registrant) -> None:
        """Dispose a registrant's instance if it has one."""
        registrant.maybe_dispose()

    def dispose_all(self, registrants: List[Tuple[Any, Registrant]]) -> List[Tuple[Any, Exception]]:
        """
        Dispose every registrant, continuing past failing callbacks.

        Args:
            registrants: ``(type_id, registrant)`` pairs

        Returns:
            List[Tuple[Any, Exception]]: Failures in the order they happened
        """
        failures: List[Tuple[Any, Exception]] = []
        for type_id, registrant in registrants:
            try:
                registrant.maybe_dispose()
            except Exception as e:
                failures.append((type_id, e))
        return failures

    def _check_type(self, type_id: Any, instance: Any) -> None:
        if not self.check_instance_types:
            return
        expected = expected_type_of(type_id)
        if expected is None:
            return
        try:
            matches = isinstance(instance, expected)
        except TypeError:
            # Non runtime-checkable protocols cannot be verified
            return
        if not matches:
            raise InstanceTypeMismatchError(type_id, expected, type(instance))
