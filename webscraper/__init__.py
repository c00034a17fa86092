"""
Webscraper - declarative object construction for scraped data.

Architecture:
- core/: Stable foundation (scraper context, errors)
- conversion/: Converters turning extracted values into typed objects
- config/: YAML-driven construct options per target field
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
