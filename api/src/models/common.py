"""
Shared Pydantic building blocks for request, document and response schemas.

Field names are snake_case in Python and camelCase on the wire and in the
document store, matching the documents the service has always written.
"""

from typing import Annotated, Any, List, TypeVar

from bson import ObjectId
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel


def _stringify_object_id(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    return value


def _null_to_empty_list(value: Any) -> Any:
    if value is None:
        return []
    return value


# A required string: the store has always rejected empty values for these
RequiredStr = Annotated[str, StringConstraints(min_length=1)]

ObjectIdStr = Annotated[str, BeforeValidator(_stringify_object_id)]

T = TypeVar("T")

# An embedded sequence that older documents may hold as null
StoredList = Annotated[List[T], BeforeValidator(_null_to_empty_list)]


class CamelModel(BaseModel):
    """Base schema that reads and writes camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_document(self) -> dict:
        """Dump to the camelCase dict stored in MongoDB."""
        return self.model_dump(by_alias=True, exclude={"id"})


class DocumentModel(CamelModel):
    """A stored top-level document with its assigned identifier."""

    id: ObjectIdStr = Field(..., alias="_id", description="Document identifier")


class MessageResponse(BaseModel):
    """Acknowledgment or error body."""

    message: str = Field(..., description="Human readable result")

    model_config = {
        "json_schema_extra": {
            "example": {"message": "Customer added to MongoDB."}
        }
    }
