"""
Factory registry for construct-style conversion.

Target types participate by registering factories together with the
exact parameter types they accept. Lookup is an exact match on both
the target type and every parameter type; there is no widening to
supertypes and no walk up the target's class hierarchy.

Example::

    builder = FactoryRegistryBuilder()
    builder.constructor(Price, str, str)
    builder.factory(Link, (Tag, ScraperContext), Link.from_anchor)
    registry = builder.build()

    registry.lookup(Price, (str, str))  # -> Price
"""

import datetime
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Callable, Optional

import structlog

from webscraper.core.errors import signature_names, type_name

logger = structlog.get_logger(__name__)

Factory = Callable[..., Any]
Signature = tuple[type, ...]


class FactoryRegistryBuilder:
    """
    Builder for constructing a FactoryRegistry.

    Register factories per (target type, signature), then call build()
    to produce an immutable registry. Registering the same pair twice
    keeps the last factory.
    """

    def __init__(self):
        self._factories: dict[type, dict[Signature, Factory]] = {}

    def factory(
        self,
        target_type: type,
        signature: tuple,
        func: Factory,
    ) -> "FactoryRegistryBuilder":
        """
        Register a factory building target_type from arguments of the given types.

        Args:
            target_type: Type the factory produces
            signature: Parameter types, in order
            func: Callable taking len(signature) positional arguments

        Returns:
            The builder, for chaining
        """
        if not isinstance(target_type, type):
            raise TypeError(f"target_type must be a type, got {target_type!r}")
        signature = tuple(signature)
        for param_type in signature:
            if not isinstance(param_type, type):
                raise TypeError(f"Signature entries must be types, got {param_type!r}")
        if not callable(func):
            raise TypeError(f"Factory for {type_name(target_type)} is not callable: {func!r}")

        by_signature = self._factories.setdefault(target_type, {})
        if signature in by_signature:
            logger.debug(
                "factory_replaced",
                target=type_name(target_type),
                signature=signature_names(signature),
            )
        by_signature[signature] = func
        logger.debug(
            "factory_registered",
            target=type_name(target_type),
            signature=signature_names(signature),
        )
        return self

    def constructor(self, target_type: type, *param_types: type) -> "FactoryRegistryBuilder":
        """Register the class itself as its factory for the given parameter types."""
        return self.factory(target_type, param_types, target_type)

    def register(self, *param_types: type) -> Callable[[type], type]:
        """
        Class decorator registering the decorated class as its own factory.

        Stackable to declare several signatures::

            @builder.register(str)
            @builder.register(str, str)
            class Price: ...
        """
        def decorator(cls: type) -> type:
            self.constructor(cls, *param_types)
            return cls
        return decorator

    def build(self) -> "FactoryRegistry":
        """Freeze the registry. No further registration is possible."""
        frozen = {
            target: MappingProxyType(dict(by_signature))
            for target, by_signature in self._factories.items()
        }
        return FactoryRegistry(_factories=MappingProxyType(frozen))


@dataclass(frozen=True)
class FactoryRegistry:
    """
    Immutable table of factories keyed by target type and signature.

    Constructed via FactoryRegistryBuilder. Read-only after build, so a
    single registry can serve concurrent conversions.
    """

    _factories: MappingProxyType = field(default_factory=lambda: MappingProxyType({}))

    def lookup(self, target_type: type, signature: tuple) -> Optional[Factory]:
        """
        Find the factory whose parameter types equal signature exactly.

        Args:
            target_type: Type to construct
            signature: Argument types, in order

        Returns:
            The factory or None if no registered signature matches
        """
        by_signature = self._factories.get(target_type)
        if by_signature is None:
            return None
        signature = tuple(signature)
        for registered, func in by_signature.items():
            if len(registered) == len(signature) and all(
                r is s for r, s in zip(registered, signature)
            ):
                return func
        return None

    def contains(self, target_type: type, signature: tuple) -> bool:
        """Check if an exact (target_type, signature) factory is registered."""
        return self.lookup(target_type, signature) is not None

    def signatures(self, target_type: type) -> list[Signature]:
        """Return all signatures registered for target_type (registration order)."""
        return list(self._factories.get(target_type, {}).keys())

    def target_types(self) -> list[type]:
        """Return all target types with at least one factory, sorted by name."""
        return sorted(self._factories.keys(), key=type_name)

    @property
    def factory_count(self) -> int:
        """Number of registered (target type, signature) pairs."""
        return sum(len(by_signature) for by_signature in self._factories.values())


# Truth values accepted by the bool factory
BOOL_VALUES = {"true": True, "false": False}


def parse_bool(text: str) -> bool:
    """
    Parse "true" or "false" (case-insensitive) into a bool.

    Raises:
        ValueError: If text is neither "true" nor "false"
    """
    key = text.strip().lower()
    if key not in BOOL_VALUES:
        raise ValueError(f"Not a boolean value: {text!r}")
    return BOOL_VALUES[key]


def parse_int(text: str) -> int:
    """Parse an integer, tolerating surrounding and grouping whitespace."""
    return int(text.replace("\u00a0", "").replace(" ", ""))


def register_builtins(builder: FactoryRegistryBuilder) -> FactoryRegistryBuilder:
    """
    Register text factories for primitive target types.

    Each built-in type gets a (str,) factory, so fields of these types
    convert from the extracted text without any declared option.
    """
    return (
        builder.factory(str, (str,), str)
        .factory(int, (str,), parse_int)
        .factory(float, (str,), lambda text: float(text.strip()))
        .factory(Decimal, (str,), lambda text: Decimal(text.strip()))
        .factory(bool, (str,), parse_bool)
        .factory(datetime.date, (str,), lambda text: datetime.date.fromisoformat(text.strip()))
    )
