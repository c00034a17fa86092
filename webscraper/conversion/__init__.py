"""
Conversion layer - turns extracted data into typed field values.

Components:
- base: Converter interface
- arguments: ArgumentType, ConstructOption and argument resolution
- registry: Exact-signature factory registry
- construct: ConstructConverter and construct()
"""

from .arguments import (
    DEFAULT_OPTION,
    ArgumentType,
    ConstructOption,
    ResolvedArguments,
    resolve_arguments,
)
from .base import Converter
from .construct import ConstructConverter, construct, convert_field
from .registry import FactoryRegistry, FactoryRegistryBuilder, register_builtins

__all__ = [
    "ArgumentType",
    "ConstructOption",
    "DEFAULT_OPTION",
    "ResolvedArguments",
    "resolve_arguments",
    "Converter",
    "ConstructConverter",
    "construct",
    "convert_field",
    "FactoryRegistry",
    "FactoryRegistryBuilder",
    "register_builtins",
]
