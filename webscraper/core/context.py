"""
Scraper context handed to converters.

A context bundles what the pipeline extracted for one field: the
current DOM element, its text, and the binding that says which type
to build and how.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping, Optional

from bs4 import Tag

if TYPE_CHECKING:
    from webscraper.conversion.arguments import ConstructOption


def element_text(element: Tag) -> str:
    """Collapsed text content of an element."""
    return element.get_text(" ", strip=True)


@dataclass(frozen=True)
class TargetBinding:
    """
    A target field together with its declared construct option.

    The option is plain configuration attached by whoever binds fields
    (decorators, YAML, hand-written tables); None selects the default.
    """
    field_name: str
    target_type: type
    option: Optional["ConstructOption"] = None


@dataclass(frozen=True, eq=False)
class ScraperContext:
    """
    Per-step extraction context.

    Read-only from the converter's point of view. Created by the
    pipeline for each field it populates and never retained. Compares
    and hashes by identity, so factories may key caches on it.
    """

    source_element: Tag
    target: TargetBinding
    source_text: Optional[str] = None
    base_url: str = ""

    # Free-form state of the enclosing scrape (page metadata etc.)
    metadata: Mapping = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        if self.source_text is None:
            object.__setattr__(self, "source_text", element_text(self.source_element))

    @property
    def target_type(self) -> type:
        return self.target.target_type

    @property
    def option(self) -> Optional["ConstructOption"]:
        return self.target.option
