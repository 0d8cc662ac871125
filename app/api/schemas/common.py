from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic.networks import validate_email


def _check_email(value: str) -> str:
    # Reject malformed addresses but keep the caller's spelling; emails are matched exactly
    validate_email(value)
    return value


Email = Annotated[str, AfterValidator(_check_email)]


class CamelModel(BaseModel):
    """Request/response bodies use camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class InsertResult(CamelModel):
    acknowledged: bool = True
    inserted_id: int


class UpdateResult(CamelModel):
    acknowledged: bool = True
    matched_count: int
    modified_count: int
    upserted_id: int | None = None


class DeleteResult(CamelModel):
    acknowledged: bool = True
    deleted_count: int
