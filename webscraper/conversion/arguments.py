"""
Argument resolution for construct-style conversion.

A ConstructOption declares which values of the scraper context feed a
factory, followed by literal string arguments. Resolution turns that
declaration into the concrete argument values plus the exact parameter
types used for factory lookup.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Union

from bs4 import Tag

from webscraper.core.context import ScraperContext
from webscraper.core.errors import signature_names


class ArgumentType(Enum):
    """Source of a context-derived constructor argument."""
    TEXT = "text"  # The extracted source text
    ELEMENT = "element"  # The current DOM element
    CONTEXT = "context"  # The scraper context itself

    @property
    def bound_type(self) -> type:
        """Static parameter type a factory must declare for this argument."""
        return _BOUND_TYPES[self]

    def resolve(self, context: ScraperContext) -> Any:
        """Pull this argument's value out of the context."""
        return _RESOLVERS[self](context)

    @classmethod
    def parse(cls, name: Union[str, "ArgumentType"]) -> "ArgumentType":
        """
        Look up an argument type by name (case-insensitive).

        "node" is accepted as an alias of ELEMENT.

        Raises:
            ValueError: If the name is unknown
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown argument type {name!r} (expected one of: {valid})") from None


_BOUND_TYPES: dict[ArgumentType, type] = {
    ArgumentType.TEXT: str,
    ArgumentType.ELEMENT: Tag,
    ArgumentType.CONTEXT: ScraperContext,
}

_RESOLVERS: dict[ArgumentType, Callable[[ScraperContext], Any]] = {
    ArgumentType.TEXT: lambda context: context.source_text,
    ArgumentType.ELEMENT: lambda context: context.source_element,
    ArgumentType.CONTEXT: lambda context: context,
}

_ALIASES = {"node": "element"}


@dataclass(frozen=True)
class ConstructOption:
    """
    Declared configuration for one construction.

    Context-derived arguments always precede the literal strings in the
    final parameter list.
    """
    arguments: tuple[ArgumentType, ...] = (ArgumentType.TEXT,)
    strings: tuple[str, ...] = ()

    def __post_init__(self):
        arguments = tuple(ArgumentType.parse(a) for a in self.arguments)
        if not arguments:
            raise ValueError("ConstructOption needs at least one argument type")
        if isinstance(self.strings, str):
            raise TypeError("strings must be a sequence of strings, not a single string")
        for literal in self.strings:
            if not isinstance(literal, str):
                raise TypeError(
                    f"Literal arguments must be strings, got {type(literal).__name__}: {literal!r}"
                )
        object.__setattr__(self, "arguments", arguments)
        object.__setattr__(self, "strings", tuple(self.strings))

    @classmethod
    def from_dict(cls, data: dict) -> "ConstructOption":
        """Create from dictionary (e.g., from YAML)."""
        arguments = data.get("arguments", [ArgumentType.TEXT.value])
        if isinstance(arguments, str):
            arguments = [arguments]
        strings = data.get("strings", ())
        if isinstance(strings, str):
            strings = [strings]
        return cls(
            arguments=tuple(arguments),
            strings=tuple(strings),
        )


DEFAULT_OPTION = ConstructOption()


@dataclass(frozen=True)
class ResolvedArguments:
    """Argument values with their parallel parameter types."""
    values: tuple
    types: tuple[type, ...]

    def signature_names(self) -> str:
        return signature_names(self.types)


def resolve_arguments(
    option: Optional[ConstructOption],
    context: ScraperContext,
) -> ResolvedArguments:
    """
    Resolve declared arguments against a scraper context.

    Args:
        option: Declared construct option (None selects the default,
                a single TEXT argument)
        context: Current scraper context

    Returns:
        ResolvedArguments with values and types in declaration order
    """
    if option is None:
        option = DEFAULT_OPTION

    values = []
    types = []
    for argument in option.arguments:
        values.append(argument.resolve(context))
        types.append(argument.bound_type)
    for literal in option.strings:
        values.append(literal)
        types.append(str)

    return ResolvedArguments(values=tuple(values), types=tuple(types))
