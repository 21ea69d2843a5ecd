"""Schema Base - shared config, lenient field types, and partial update models.

Invariants:
    - Request bodies accept camelCase and snake_case keys; unknown keys are ignored
    - Empty strings become None for optional dates and numbers, 0 for amounts
      that default to zero
    - Parsed datetimes are timezone-aware (naive input is taken as UTC)
    - to_record() returns only the fields the client sent, snake_case
    - Update schemas are derived from create schemas: same types, every field
      omittable, explicit null only where the create schema allows it

Design Decisions:
    - Constraints live inside Annotated types (not Field defaults) so that
      partial_model() carries them over from FieldInfo.metadata
"""

from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Annotated

from pydantic import (
    AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field,
    StringConstraints, create_model,
)
from pydantic.alias_generators import to_camel


def _blank_to_none(value):
    return None if value == "" else value


def _blank_to_zero(value):
    return 0 if value == "" else value


def _ensure_utc(value: datetime | None) -> datetime | None:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


Timestamp = Annotated[datetime, AfterValidator(_ensure_utc)]
OptionalDate = Annotated[
    datetime | None, BeforeValidator(_blank_to_none), AfterValidator(_ensure_utc),
]
OptionalFloat = Annotated[float | None, BeforeValidator(_blank_to_none)]
OptionalInt = Annotated[int | None, BeforeValidator(_blank_to_none)]
ZeroDefaultFloat = Annotated[float | None, BeforeValidator(_blank_to_zero)]
NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Score = Annotated[int, Field(ge=1, le=5)]


class BaseSchema(BaseModel):
    """Request body base: camelCase aliases, names also accepted."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_record(self) -> dict:
        return self.model_dump(exclude_unset=True)


def partial_model(model: type[BaseSchema], name: str) -> type[BaseSchema]:
    """Copy of model with every field omittable.

    Annotations are kept as declared, so a field the create schema does not
    let be null still rejects an explicit null. The None default is never
    validated and an omitted field stays out of to_record().
    """
    fields = {}
    for key, info in model.model_fields.items():
        annotation = info.annotation
        if info.metadata:
            annotation = Annotated[(annotation, *info.metadata)]
        fields[key] = (annotation, None)
    return create_model(name, __base__=BaseSchema, **fields)


def to_response(record: dict, exclude: Iterable[str] = ()) -> dict:
    """snake_case record -> camelCase JSON body."""
    skip = set(exclude)
    return {to_camel(key): value for key, value in record.items() if key not in skip}


def to_response_list(records: Iterable[dict], exclude: Iterable[str] = ()) -> list[dict]:
    skip = set(exclude)
    return [to_response(record, skip) for record in records]
