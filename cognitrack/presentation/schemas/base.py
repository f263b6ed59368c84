"""
Base Pydantic model configuration for boundary schemas.
"""

from pydantic import BaseModel, ConfigDict

from cognitrack.core.utils.string_utils import snake_to_camel


class BaseModelConfig(BaseModel):
    """External payloads use camelCase keys; unknown keys are rejected."""

    model_config = ConfigDict(
        alias_generator=snake_to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )
