"""Composer schemas."""

from api.src.models.common import CamelModel, DocumentModel, RequiredStr


class ComposerRequest(CamelModel):
    """Body for creating or replacing a composer."""

    first_name: RequiredStr
    last_name: RequiredStr

    model_config = {
        "json_schema_extra": {
            "example": {"firstName": "Johann", "lastName": "Bach"}
        }
    }


class Composer(DocumentModel):
    """Stored composer."""

    first_name: str
    last_name: str
