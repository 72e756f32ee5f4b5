"""
Type-keyed object registry.

This module provides the registry that callers put builders into and
resolve instances from. A registry is created explicitly at the
composition root and torn down with ``clear()``; there is no hidden
global instance.
"""

import logging
from typing import Any, Callable, Optional, Tuple

from ...core.entities.registration_entity import (
    RegistrationMode,
    RegistrationParams,
    describe_type
)
from ...core.interfaces.resolver_interface import LogSink
from ..exceptions.registry_errors import AlreadyRegisteredError, DisposalError, NotFoundError
from ..logging.log_formatter import LogFormatter
from ..logging.logger_interface import LoggerInterface
from ..logging.structured_logger import StructuredLogger
from .lifetime_manager import LifetimeManager
from .registrant_store import RegistrantStore
from .resolver import Resolver

fallback_logger = logging.getLogger(__name__)

Builder = Callable[[Resolver, Optional[RegistrationParams]], Any]
DisposeCallback = Callable[[Any], None]


class Registry:
    """
    Service locator keyed by type identity.

    Builders are registered with ``put`` and called as
    ``builder(resolver, params)``; the resolver lets a builder fetch its
    own dependencies from this registry. The registry is not thread
    safe: callers sharing one across threads must serialize access.

    Example:
        registry = Registry()
        registry.put(Database, lambda get, params: Database(params.by_name("url")))
        registry.put(Repo, lambda get, params: Repo(get(Database, params)))
        repo = registry.get(Repo, RegistrationParams.named({"url": "sqlite://"}))
    """

    def __init__(
        self,
        debug_log: Optional[LogSink] = None,
        logger: Optional[LoggerInterface] = None,
        detect_cycles: bool = True,
        check_instance_types: bool = True
    ):
        """
        Initialize the registry.

        Args:
            debug_log: Optional sink receiving one formatted line per operation
            logger: Optional structured logger; defaults to a StructuredLogger
            detect_cycles: Fail fast on cyclic builder dependencies
            check_instance_types: Verify built instances against class keys
        """
        self.debug_log = debug_log
        self._logger = logger or StructuredLogger("service_locator.registry")
        self._store = RegistrantStore()
        self._lifetime_manager = LifetimeManager(
            detect_cycles=detect_cycles,
            check_instance_types=check_instance_types
        )
        self._resolver = Resolver(self)

    @property
    def resolver(self) -> Resolver:
        """Resolver handed to builders of this registry."""
        return self._resolver

    def put(
        self,
        type_id: Any,
        builder: Builder,
        registration_mode: RegistrationMode = RegistrationMode.LAZY_SINGLETON,
        allow_one_reregistration: bool = False,
        on_dispose: Optional[DisposeCallback] = None
    ) -> None:
        """
        Put a builder in the registry under a type identity.

        Eager singletons are built immediately, without params. Putting a
        type that is already registered is only allowed when the current
        registration was made with ``allow_one_reregistration=True``; the
        replacement is built first, then the old instance is disposed and
        the registration fully replaced.

        Args:
            type_id: Type identity, usually the interface or class
            builder: Factory called as ``builder(resolver, params)``
            registration_mode: When instances are created and whether they are cached
            allow_one_reregistration: Allow the next put() for this type to replace it
            on_dispose: Optional callback receiving instances that are discarded

        Raises:
            AlreadyRegisteredError: If the type is registered and may not be replaced
        """
        self._log(f"Put object of type {describe_type(type_id)}", "put", type_id)

        if not callable(builder):
            raise TypeError(f"Builder for {describe_type(type_id)} must be callable")
        if not isinstance(registration_mode, RegistrationMode):
            raise TypeError(f"Invalid registration mode: {registration_mode!r}")

        current = self._store.get(type_id)
        if current is not None and not current.allow_one_reregistration:
            raise AlreadyRegisteredError(type_id)

        # A failing eager build leaves the current registration untouched
        registrant = self._lifetime_manager.create_registrant(
            type_id,
            builder,
            registration_mode,
            self._resolver,
            allow_one_reregistration=allow_one_reregistration,
            on_dispose=on_dispose
        )

        try:
            if current is not None:
                self._lifetime_manager.dispose(current)
        finally:
            self._store.add(type_id, registrant)

    def get(self, type_id: Any, params: Optional[RegistrationParams] = None) -> Any:
        """
        Get an instance of a registered type.

        Lazy singletons are built on the first call and cached; params
        are ignored once cached. Lazy factories build on every call.
        Eager singletons always return the instance built by ``put``.

        Args:
            type_id: Type identity
            params: Optional params handed to the builder

        Returns:
            Any: Instance

        Raises:
            NotFoundError: If the type is not registered
            CyclicDependencyError: If builders depend on each other in a cycle
            InstanceTypeMismatchError: If a builder returns the wrong type
        """
        self._log(
            f"Get object of type {describe_type(type_id)}",
            "get",
            type_id,
            params=params,
            include_params=True
        )

        registrant = self._store.get(type_id)
        if registrant is None:
            raise NotFoundError(type_id)

        return self._lifetime_manager.get_instance(type_id, registrant, self._resolver, params)

    def is_registered(self, type_id: Any) -> bool:
        """Check whether a type is registered."""
        self._log(f"Check if object of type {describe_type(type_id)} is registered", "is_registered", type_id)
        return type_id in self._store

    def refresh_instance(self, type_id: Any) -> None:
        """
        Rebuild the cached instance of a type and dispose the old one.

        The builder receives the params of the previous build. Nothing
        happens if the type is unregistered or has no cached instance,
        which is always the case for lazy factories.

        Args:
            type_id: Type identity
        """
        self._log(f"Refresh instance of type {describe_type(type_id)}", "refresh_instance", type_id)

        registrant = self._store.get(type_id)
        if registrant is None:
            return
        self._lifetime_manager.refresh(type_id, registrant, self._resolver)

    def remove(self, type_id: Any) -> None:
        """
        Remove a type from the registry, disposing its instance.

        Args:
            type_id: Type identity

        Raises:
            NotFoundError: If the type is not registered
        """
        self._log(f"Remove instance of type {describe_type(type_id)}", "remove", type_id)

        registrant = self._store.get(type_id)
        if registrant is None:
            raise NotFoundError(type_id)

        self._lifetime_manager.dispose(registrant)
        self._store.discard(type_id)

    def clear(self) -> None:
        """
        Remove every type from the registry, disposing their instances.

        All dispose callbacks run even if some fail, and the registry is
        always left empty. A single failure is re-raised as is; several
        are raised together as a DisposalError.

        Raises:
            DisposalError: If more than one dispose callback failed
        """
        self._log("Clear the Registry", "clear")

        registrants = self._store.items()
        self._store.clear()
        failures = self._lifetime_manager.dispose_all(registrants)

        for type_id, error in failures:
            self._safe_logger_call(
                "error",
                "Dispose callback failed during clear",
                type=describe_type(type_id),
                error=LogFormatter.format_error(error)
            )

        if len(failures) == 1:
            raise failures[0][1]
        if failures:
            raise DisposalError(failures)

    def registered_types(self) -> Tuple[Any, ...]:
        """Snapshot of the registered type identities."""
        return self._store.keys()

    def __contains__(self, type_id: Any) -> bool:
        return type_id in self._store

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"Registry(registered={len(self._store)})"

    def _log(
        self,
        message: str,
        operation: str,
        type_id: Any = None,
        params: Optional[RegistrationParams] = None,
        include_params: bool = False
    ) -> None:
        context = {"operation": operation}
        if type_id is not None:
            context["type"] = describe_type(type_id)
        if params is not None:
            context["params"] = params.to_dict()
        self._safe_logger_call("debug", message, **context)

        if self.debug_log is None:
            return
        try:
            self.debug_log(LogFormatter.format_operation(message, params, include_params))
        except Exception:
            fallback_logger.warning("Registry debug_log sink failed", exc_info=True)

    def _safe_logger_call(self, level: str, message: str, **context: Any) -> None:
        try:
            getattr(self._logger, level)(message, **context)
        except Exception:
            fallback_logger.warning("Registry logger failed", exc_info=True)
