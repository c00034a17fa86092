"""
Error types for the scraping framework.

All conversion failures surface as ScraperError subclasses so the
surrounding pipeline can report them through a single channel.
"""

from enum import Enum
from typing import Optional


class ScraperError(Exception):
    """Base error for scraping and conversion failures."""


class ConstructionFailure(str, Enum):
    """Why a construction attempt failed."""
    NO_MATCHING_FACTORY = "no_matching_factory"  # Lookup found nothing
    INVOCATION_FAILED = "invocation_failed"  # Factory raised


def type_name(tp: type) -> str:
    """Return the qualified name used in diagnostics."""
    module = getattr(tp, "__module__", None)
    qualname = getattr(tp, "__qualname__", repr(tp))
    if module in (None, "builtins"):
        return qualname
    return f"{module}.{qualname}"


def signature_names(signature: tuple) -> str:
    """Render a parameter signature as '(str, bs4.element.Tag)'."""
    return "(" + ", ".join(type_name(tp) for tp in signature) + ")"


class ConstructionError(ScraperError):
    """
    Creating an instance of a target type failed.

    Attributes:
        reason: ConstructionFailure kind
        target_type: Type that was being constructed
        signature: Requested parameter types, in order
        cause: Original exception for INVOCATION_FAILED, else None
    """

    def __init__(
        self,
        reason: ConstructionFailure,
        target_type: type,
        signature: tuple,
        cause: Optional[BaseException] = None,
    ):
        self.reason = reason
        self.target_type = target_type
        self.signature = tuple(signature)
        self.cause = cause

        prefix = f"Failed creating instance of {type_name(target_type)}"
        if reason is ConstructionFailure.NO_MATCHING_FACTORY:
            msg = f"{prefix}: no factory matching {signature_names(self.signature)}"
        else:
            msg = f"{prefix}: {type(cause).__name__}: {cause}"
        super().__init__(msg)

    @classmethod
    def no_matching_factory(cls, target_type: type, signature: tuple) -> "ConstructionError":
        return cls(ConstructionFailure.NO_MATCHING_FACTORY, target_type, signature)

    @classmethod
    def invocation_failed(
        cls,
        target_type: type,
        signature: tuple,
        cause: BaseException,
    ) -> "ConstructionError":
        return cls(ConstructionFailure.INVOCATION_FAILED, target_type, signature, cause)
