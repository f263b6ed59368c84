"""
Serialization of domain results into JSON-ready camelCase dicts.
"""

from typing import Any

from pydantic_core import to_jsonable_python

from cognitrack.core.utils.string_utils import camelize_keys


def serialize(result: Any) -> Any:
    """
    Convert a result (dataclasses, enums, datetimes, nested containers) into
    plain JSON types with camelCase keys.

    Enums become their values, datetimes ISO 8601 strings and tuples lists.
    """
    return camelize_keys(to_jsonable_python(result))
