"""
Validation boundary for directory inputs.

Raw mappings (or already-built schema instances) are turned into typed
schema values here, before any storage access. Pydantic failures are
re-raised as the directory's own ValidationError, one entry per offending
field.
"""

from typing import Any, Dict, List, Mapping, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from creator_site.exceptions import ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _field_path(loc) -> str:
    return ".".join(str(part) for part in loc) or "__root__"


def flatten_errors(exc: PydanticValidationError) -> List[Dict[str, str]]:
    """Convert pydantic error entries into {field, message} pairs."""
    return [
        {"field": _field_path(error["loc"]), "message": error["msg"]}
        for error in exc.errors()
    ]


def validate(
    schema: Type[SchemaT],
    data: Union[Mapping[str, Any], BaseModel, None],
    kind: str = None,
) -> SchemaT:
    """
    Validate and normalize an input payload.

    Key presence is preserved: a field missing from ``data`` stays out of the
    result's ``model_fields_set``.

    Args:
        schema: Target schema class
        data: Raw mapping, schema instance or None (treated as empty)
        kind: Entity kind used in error messages

    Returns:
        Validated schema instance

    Raises:
        ValidationError: if any constraint fails
    """
    if isinstance(data, schema):
        return data

    if isinstance(data, BaseModel):
        data = data.model_dump(exclude_unset=True)

    if data is None:
        data = {}

    if not isinstance(data, Mapping):
        raise ValidationError(
            [{"field": "__root__", "message": "Input should be an object"}],
            kind
        )

    try:
        return schema.model_validate(dict(data))
    except PydanticValidationError as exc:
        raise ValidationError(flatten_errors(exc), kind) from exc
