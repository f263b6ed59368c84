"""
String utilities for converting between internal and external naming.
"""

from typing import Any


def snake_to_camel(snake_str: str) -> str:
    """
    Convert snake_case to camelCase.

    Args:
        snake_str: The snake_case string

    Returns:
        str: camelCase string
    """
    components = snake_str.split("_")
    # We capitalize the first letter of each component except the first one
    return components[0] + "".join(x.title() for x in components[1:])


def camelize_keys(value: Any) -> Any:
    """Recursively convert the string keys of nested dicts to camelCase."""
    if isinstance(value, dict):
        return {
            (snake_to_camel(k) if isinstance(k, str) else k): camelize_keys(v) for k, v in value.items()
        }
    if isinstance(value, list):
        return [camelize_keys(item) for item in value]
    return value
