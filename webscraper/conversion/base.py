"""
Base class for converters.

Converters implement the last step of field population - turning the
extracted element and text of a scraper context into the value that is
assigned to the target field.
"""

from abc import ABC, abstractmethod
from typing import Any

import structlog

from webscraper.core.context import ScraperContext

logger = structlog.get_logger(__name__)


class Converter(ABC):
    """
    Abstract base class for conversion strategies.

    Implementations must not keep per-call state: one converter
    instance serves every field it is configured for.
    """

    def __init__(self):
        self.logger = logger.bind(converter=self.__class__.__name__)

    @abstractmethod
    def convert(self, context: ScraperContext) -> Any:
        """
        Convert the context's extracted data into a target value.

        Args:
            context: Scraper context positioned at the source element

        Returns:
            Value for the target field

        Raises:
            ScraperError: If conversion fails
        """
        pass

    def get_converter_name(self) -> str:
        """Return human-readable converter name."""
        return self.__class__.__name__
