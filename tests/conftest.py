"""Shared fixtures for conversion tests."""

from typing import Optional

import pytest
from bs4 import BeautifulSoup, Tag

from webscraper.core.context import ScraperContext, TargetBinding
from webscraper.conversion.arguments import ConstructOption
from webscraper.conversion.registry import FactoryRegistryBuilder

from tests.samples import Labelled, Link, Price


@pytest.fixture
def sample_html():
    """Sample listing HTML for testing."""
    return """
    <html>
    <body>
        <main>
            <h1>Grant listing</h1>
            <ul class="grants">
                <li class="grant">
                    <a href="/grants/1">Program A</a>
                    <span class="amount">1 500 000 Kč</span>
                    <span class="published">2024-03-01</span>
                </li>
                <li class="grant">
                    <a href="/grants/2">Program B</a>
                    <span class="amount">250 000 Kč</span>
                    <span class="published">2024-05-15</span>
                </li>
            </ul>
        </main>
    </body>
    </html>
    """


@pytest.fixture
def soup(sample_html):
    """Parsed BeautifulSoup fixture."""
    return BeautifulSoup(sample_html, "lxml")


@pytest.fixture
def builder():
    """Builder with the sample target types registered."""
    builder = FactoryRegistryBuilder()
    builder.factory(Price, (str,), Price.from_text)
    builder.factory(Price, (str, str), Price.from_text_currency)
    builder.factory(Link, (Tag, ScraperContext), Link.from_anchor)
    builder.factory(
        Labelled,
        (Tag, str, str),
        lambda element, text, suffix: Labelled(element.name, text, suffix),
    )
    return builder


@pytest.fixture
def registry(builder):
    """Frozen registry of the sample target types."""
    return builder.build()


@pytest.fixture
def make_context(soup):
    """Build a context for the first element matching a CSS selector."""
    def _make(
        selector: str,
        target_type: type,
        option: Optional[ConstructOption] = None,
        field_name: str = "value",
        **kwargs,
    ) -> ScraperContext:
        element = soup.select_one(selector)
        assert element is not None, f"fixture has no {selector!r}"
        return ScraperContext(
            source_element=element,
            target=TargetBinding(field_name, target_type, option),
            **kwargs,
        )
    return _make
