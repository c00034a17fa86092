"""
Configuration module for field bindings.

Provides:
- YAML construct-option loading with validation
- Environment variable substitution
"""

from .loader import ConfigLoader, load_options

__all__ = ["ConfigLoader", "load_options"]
