"""Comparison options."""

from typing import Any, ClassVar

from pydantic import BaseModel, Field


class CompareOptions(BaseModel):
    """
    Options that tune how values are compared.

    Unknown options are rejected so a misspelled flag fails loudly instead of being ignored.
    """

    model_config: ClassVar[dict[str, Any]] = {'extra': 'forbid', 'frozen': True}

    nan_equals_nan: bool = Field(
        True, description="If true, a NaN expected value matches a NaN actual value",
    )


DEFAULT_OPTIONS = CompareOptions()
