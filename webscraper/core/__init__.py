"""
Core layer - stable foundation for conversion.

Components:
- context: ScraperContext and TargetBinding
- errors: ScraperError and ConstructionError
"""

from .context import ScraperContext, TargetBinding, element_text
from .errors import (
    ConstructionError,
    ConstructionFailure,
    ScraperError,
    signature_names,
    type_name,
)

__all__ = [
    "ScraperContext",
    "TargetBinding",
    "element_text",
    "ScraperError",
    "ConstructionError",
    "ConstructionFailure",
    "signature_names",
    "type_name",
]
