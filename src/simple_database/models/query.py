"""Statement and parameter models."""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field

from simple_database.exceptions import ValidationError

# Closed set of values that may be bound to a statement parameter
Scalar = Union[str, int, float, bool, None]
Params = dict[str, Scalar]
Row = dict[str, Any]

SCALAR_TYPES = (str, int, float, bool, type(None))


def validate_params(params: Optional[Mapping[str, Any]]) -> Params:
    """
    Check that every parameter value is a permitted scalar.

    Args:
        params: Mapping of parameter name to value

    Returns:
        A plain dict copy of the parameters

    Raises:
        ValidationError: If a name is not a string or a value has an
            unsupported type
    """
    if not params:
        return {}

    checked: Params = {}
    for name, value in params.items():
        if not isinstance(name, str) or not name:
            raise ValidationError(
                f"Parameter names must be non-empty strings, got {name!r}"
            )
        if not isinstance(value, SCALAR_TYPES):
            raise ValidationError(
                f"Unsupported value type for parameter '{name}': "
                f"{type(value).__name__}. "
                "Allowed types: str, int, float, bool, None"
            )
        checked[name] = value
    return checked


class Statement(BaseModel):
    """A SQL string together with its named bind parameters."""

    sql: str = Field(..., description="SQL text with :name placeholders")
    params: Params = Field(
        default_factory=dict, description="Bind parameter values by name"
    )

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return self.sql
