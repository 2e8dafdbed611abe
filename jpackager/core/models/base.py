"""
Base Pydantic models for jpackager.

Provides common configuration and base classes for all jpackager models.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class JPackagerBaseModel(BaseModel):
    """Base model for all jpackager Pydantic models.

    Configuration:
        - strict: Strict type coercion (no implicit conversions)
        - validate_assignment: Validate on attribute assignment
        - extra: Reject unknown fields
        - populate_by_name: Allow field aliases
        - use_enum_values: Serialize enums as values
    """

    model_config = ConfigDict(
        strict=True,
        validate_assignment=True,
        extra="forbid",
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class ImmutableModel(JPackagerBaseModel):
    """Immutable base model for results that should not change after creation."""

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )
