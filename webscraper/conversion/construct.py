"""
Construct converter.

Builds the target value by calling a registered factory with the
source text (default), the source element or the scraper context,
followed by any literal string arguments declared for the field.
"""

from typing import Any, Optional, Sequence

import structlog

from webscraper.core.context import ScraperContext
from webscraper.core.errors import ConstructionError, signature_names, type_name

from .arguments import ConstructOption, resolve_arguments
from .base import Converter
from .registry import FactoryRegistry

logger = structlog.get_logger(__name__)


def construct(
    registry: FactoryRegistry,
    target_type: type,
    arg_types: Sequence[type],
    arg_values: Sequence[Any],
) -> Any:
    """
    Create an instance of target_type from typed arguments.

    Args:
        registry: Factories to search
        target_type: Type to construct
        arg_types: Exact parameter types to look up, in order
        arg_values: Argument values, parallel to arg_types

    Returns:
        The constructed instance

    Raises:
        ConstructionError: NO_MATCHING_FACTORY if no signature matches,
            INVOCATION_FAILED if the factory raised
        ValueError: If arg_types and arg_values differ in length
    """
    signature = tuple(arg_types)
    if len(signature) != len(arg_values):
        raise ValueError(
            f"Got {len(arg_values)} argument values for signature {signature_names(signature)}"
        )

    factory = registry.lookup(target_type, signature)
    if factory is None:
        error = ConstructionError.no_matching_factory(target_type, signature)
        logger.warning(
            "construct_failed",
            target=type_name(target_type),
            reason=error.reason.value,
            signature=signature_names(signature),
            registered=[signature_names(s) for s in registry.signatures(target_type)],
        )
        raise error

    try:
        instance = factory(*arg_values)
    except Exception as e:
        error = ConstructionError.invocation_failed(target_type, signature, e)
        logger.warning(
            "construct_failed",
            target=type_name(target_type),
            reason=error.reason.value,
            signature=signature_names(signature),
            error=str(e),
        )
        raise error from e

    logger.debug("constructed", target=type_name(target_type), signature=signature_names(signature))
    return instance


class ConstructConverter(Converter):
    """
    Converter calling a factory of the target type.

    Which arguments are passed is declared by the field's
    ConstructOption; without one, the extracted text is the single
    argument.
    """

    def __init__(self, registry: FactoryRegistry):
        """
        Initialize converter.

        Args:
            registry: Frozen factory registry shared by all conversions
        """
        super().__init__()
        self.registry = registry

    def convert(self, context: ScraperContext) -> Any:
        """
        Construct the target field's value.

        Args:
            context: Scraper context for the target field

        Returns:
            Instance of context.target_type

        Raises:
            ConstructionError: If no factory matches or it fails
        """
        arguments = resolve_arguments(context.option, context)
        self.logger.debug(
            "converting",
            field=context.target.field_name,
            target=type_name(context.target_type),
            signature=arguments.signature_names(),
        )
        return construct(self.registry, context.target_type, arguments.types, arguments.values)


def convert_field(
    registry: FactoryRegistry,
    context: ScraperContext,
    option: Optional[ConstructOption] = None,
) -> Any:
    """
    One-shot conversion with an explicit option overriding the binding's.

    Args:
        registry: Factory registry
        context: Scraper context
        option: ConstructOption to use instead of context.option

    Returns:
        Constructed value
    """
    arguments = resolve_arguments(option if option is not None else context.option, context)
    return construct(registry, context.target_type, arguments.types, arguments.values)
