"""
YAML configuration loader for construct options.

Loads per-field construct options from YAML files with:
- Environment variable substitution
- Validation of argument types and literals
- Default option for fields declared without settings
"""

import os
import re
from pathlib import Path
from typing import Optional

import yaml
import structlog

from webscraper.conversion.arguments import DEFAULT_OPTION, ConstructOption

logger = structlog.get_logger(__name__)


def substitute_env_vars(text: str) -> str:
    """
    Substitute environment variables in text.

    Supports formats:
    - ${VAR_NAME} - required, warns and substitutes "" if missing
    - ${VAR_NAME:-default} - optional with default

    Args:
        text: Text with env var placeholders

    Returns:
        Text with substituted values
    """
    def replace(match):
        var_expr = match.group(1)
        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return os.getenv(var_name, default)
        value = os.getenv(var_expr)
        if value is None:
            logger.warning("env_var_not_set", var=var_expr)
            return ""
        return value

    return re.sub(r"\$\{([^}]+)\}", replace, text)


class ConfigLoader:
    """
    Configuration loader for field bindings.

    Reads a `bindings:` mapping of field name to construct option.
    """

    def __init__(self, config_dir: Optional[str] = None):
        """
        Initialize config loader.

        Args:
            config_dir: Directory containing config files
                       (defaults to current working directory)
        """
        self.config_dir = Path(config_dir) if config_dir else Path.cwd()

    def load_file(self, filename: str) -> dict:
        """
        Load YAML config file.

        Args:
            filename: Config file name (relative to config_dir)

        Returns:
            Parsed config dict
        """
        filepath = self.config_dir / filename

        if not filepath.exists():
            raise FileNotFoundError(f"Config file not found: {filepath}")

        logger.info("loading_config", file=str(filepath))

        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read()

        content = substitute_env_vars(content)
        config = yaml.safe_load(content)

        return config or {}

    def load_options(self, filename: str = "bindings.yml") -> dict[str, ConstructOption]:
        """
        Load construct options from YAML.

        Invalid entries are logged and skipped.

        Args:
            filename: Bindings config file name

        Returns:
            Mapping of field name to ConstructOption
        """
        config = self.load_file(filename)

        options = {}
        for field_name, data in (config.get("bindings") or {}).items():
            try:
                options[field_name] = self._parse_option(data)
                logger.info("option_loaded", field=field_name)
            except (ValueError, TypeError) as e:
                logger.error("option_load_failed", field=field_name, error=str(e))

        return options

    def _parse_option(self, data: Optional[dict]) -> ConstructOption:
        """
        Parse one binding entry into a ConstructOption.

        Args:
            data: Binding dict, or None for the default option

        Returns:
            ConstructOption

        Raises:
            ValueError: If an argument type is unknown or none is given
            TypeError: If the entry or a literal has the wrong type
        """
        if data is None:
            return DEFAULT_OPTION
        if not isinstance(data, dict):
            raise TypeError(f"Binding must be a mapping, got {type(data).__name__}")
        return ConstructOption.from_dict(data)


def load_options(config_path: str) -> dict[str, ConstructOption]:
    """
    Convenience function to load construct options.

    Args:
        config_path: Path to bindings YAML file

    Returns:
        Mapping of field name to ConstructOption
    """
    path = Path(config_path)
    loader = ConfigLoader(str(path.parent))
    return loader.load_options(path.name)
