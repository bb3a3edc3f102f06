"""Base class for fieldwire value objects.

Values, fields and fixed-point numbers are immutable once built; this module
provides the shared Pydantic configuration that makes them so.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ValueModel(BaseModel):
    """Base class for all immutable fieldwire models.

    Instances are frozen and hashable, reject unknown attributes and validate
    their constraints on construction.

    Example:
        >>> from pydantic import Field
        >>> class Point(ValueModel):
        ...     x: int = Field(ge=0)
        >>> Point(x=1).x
        1
    """

    model_config = ConfigDict(
        # Values never change after parsing
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )
