"""Environment variable expansion for configuration values.

Supports ``$VAR``, ``${VAR}`` and ``${VAR:default}``. Variables that are not
set and carry no default are left exactly as written.
"""

import os
import re
from typing import Any, Dict

_ENV_PATTERN = re.compile(
    r"\$\{(?P<braced>[A-Za-z_][A-Za-z0-9_]*)(?::(?P<default>[^}]*))?\}"
    r"|\$(?P<bare>[A-Za-z_][A-Za-z0-9_]*)"
)


def _replace(match: "re.Match[str]") -> str:
    name = match.group("braced") or match.group("bare")
    value = os.environ.get(name)
    if value is not None:
        return value
    default = match.group("default")
    if default is not None:
        return default
    return match.group(0)


def expand_env_vars(value: Any) -> Any:
    """
    Expand environment variables in a configuration value.

    Strings are expanded in place; dictionaries and lists are walked
    recursively. Any other value is returned unchanged.

    Args:
        value: Configuration value to expand

    Returns:
        Value with environment variables substituted
    """
    if isinstance(value, str):
        return _ENV_PATTERN.sub(_replace, value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variables throughout a configuration dictionary."""
    return expand_env_vars(config)
