"""
Registration entities for the service locator.

This module provides the value types shared by the registry engine:
registration modes, runtime parameters, explicit type keys and the
per-type registrant record.
"""

from enum import Enum
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Sequence


class RegistrationMode(Enum):
    """Available registration modes."""

    LAZY_SINGLETON = "lazySingleton"    # Created on first get(), cached
    EAGER_SINGLETON = "eagerSingleton"  # Created by put(), cached
    LAZY_FACTORY = "lazyFactory"        # New instance on every get()


class RegistrationParams:
    """
    Immutable, ordered bag of runtime parameters.

    Params are handed to builders at resolution time. Values are opaque
    until the consuming builder reads them; looking up a missing name or
    index returns the supplied default instead of raising.
    """

    __slots__ = ("_params",)

    def __init__(self, params: Optional[Mapping[str, Any]] = None):
        """
        Initialize the params.

        Args:
            params: Name to value mapping, copied on construction
        """
        self._params: Dict[str, Any] = dict(params or {})

    @classmethod
    def named(cls, params: Mapping[str, Any]) -> "RegistrationParams":
        """
        Build params from a name to value mapping.

        Args:
            params: Name to value mapping

        Returns:
            RegistrationParams: New params bag
        """
        return cls(params)

    @classmethod
    def list(cls, params: Sequence[Any]) -> "RegistrationParams":
        """
        Build params from a positional sequence.

        Position ``i`` is stored under the name ``str(i)``, so the values
        stay reachable through both ``by_index`` and ``by_name``.

        Args:
            params: Positional values

        Returns:
            RegistrationParams: New params bag
        """
        return cls({str(index): value for index, value in enumerate(params)})

    def by_index(self, index: int, default: Any = None) -> Any:
        """
        Get a param by its position in insertion order.

        Args:
            index: Zero-based position
            default: Value returned when the position does not exist

        Returns:
            Any: The param value or ``default``
        """
        if index < 0 or index >= len(self._params):
            return default
        for position, value in enumerate(self._params.values()):
            if position == index:
                return value
        return default

    def by_name(self, name: str, default: Any = None) -> Any:
        """
        Get a param by its name.

        Args:
            name: Param name
            default: Value returned when the name does not exist

        Returns:
            Any: The param value or ``default``
        """
        return self._params.get(name, default)

    def copy_with(self, params: Optional[Mapping[str, Any]] = None) -> "RegistrationParams":
        """
        Derive a new params bag.

        Args:
            params: Replacement mapping; the current entries are kept when omitted

        Returns:
            RegistrationParams: New params bag
        """
        return RegistrationParams(self._params if params is None else params)

    def to_dict(self) -> Dict[str, Any]:
        """Return a shallow copy of the params as a dictionary."""
        return dict(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __contains__(self, name: object) -> bool:
        return name in self._params

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RegistrationParams):
            return NotImplemented
        return list(self._params.items()) == list(other._params.items())

    def __hash__(self) -> int:
        # Raises TypeError when a value is unhashable, as a tuple would
        return hash(tuple(self._params.items()))

    def __repr__(self) -> str:
        return f"[RegistrationParams] {self._params}"


class TypeKey:
    """
    Explicit type identity for contracts without a runtime class.

    Classes are the usual registry keys. A ``TypeKey`` covers the rest
    (protocol names, string contracts) and may carry the class that
    resolved instances are expected to be.
    """

    __slots__ = ("name", "expected_type")

    def __init__(self, name: str, expected_type: Optional[type] = None):
        """
        Initialize the key.

        Args:
            name: Contract name
            expected_type: Optional class resolved instances must belong to
        """
        self.name = name
        self.expected_type = expected_type

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeKey):
            return NotImplemented
        return (self.name, self.expected_type) == (other.name, other.expected_type)

    def __hash__(self) -> int:
        return hash((TypeKey, self.name, self.expected_type))

    def __repr__(self) -> str:
        if self.expected_type is None:
            return f"TypeKey({self.name!r})"
        return f"TypeKey({self.name!r}, {self.expected_type.__name__})"


def describe_type(type_id: Any) -> str:
    """
    Human readable name for a type identity.

    Args:
        type_id: Class, TypeKey or any other hashable key

    Returns:
        str: Display name
    """
    if isinstance(type_id, type):
        return type_id.__name__
    if isinstance(type_id, TypeKey):
        return type_id.name
    return repr(type_id)


class Registrant:
    """
    Registration record for a single type.

    Holds the builder, the registration mode and the lifecycle state of
    the cached instance. Only the registry mutates it.
    """

    def __init__(
        self,
        builder: Callable[..., Any],
        register_mode: RegistrationMode,
        allow_one_reregistration: bool = False,
        on_dispose: Optional[Callable[[Any], None]] = None,
        instance: Any = None,
        last_params: Optional[RegistrationParams] = None
    ):
        """
        Initialize the registrant.

        Args:
            builder: Factory called as ``builder(resolver, params)``
            register_mode: Registration mode
            allow_one_reregistration: Whether the next put() may replace this record
            on_dispose: Optional callback receiving a discarded instance
            instance: Already built instance, if any
            last_params: Params used for the most recent build
        """
        self.builder = builder
        self.register_mode = register_mode
        self.allow_one_reregistration = allow_one_reregistration
        self.on_dispose = on_dispose
        self.instance = instance
        self.last_params = last_params

    @property
    def has_instance(self) -> bool:
        return self.instance is not None

    def maybe_dispose(self) -> None:
        """
        Hand the current instance to ``on_dispose`` and forget it.

        The instance is dropped before the callback runs, so a failing
        callback never leads to a second dispose of the same instance.
        """
        instance = self.instance
        self.instance = None
        if instance is not None and self.on_dispose is not None:
            self.on_dispose(instance)
