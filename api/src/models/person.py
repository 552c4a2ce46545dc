"""Person schemas with embedded roles and dependents."""

from typing import List

from api.src.models.common import CamelModel, DocumentModel, RequiredStr, StoredList


class Role(CamelModel):
    text: RequiredStr


class Dependent(CamelModel):
    first_name: RequiredStr
    last_name: RequiredStr


class PersonRequest(CamelModel):
    """
    Body for creating a person.

    ``roles`` and ``dependents`` must be present but may be empty.
    """

    first_name: RequiredStr
    last_name: RequiredStr
    roles: List[Role]
    dependents: List[Dependent]
    birth_date: RequiredStr

    model_config = {
        "json_schema_extra": {
            "example": {
                "firstName": "Clara",
                "lastName": "Schumann",
                "roles": [{"text": "pianist"}],
                "dependents": [{"firstName": "Marie", "lastName": "Schumann"}],
                "birthDate": "1819-09-13",
            }
        }
    }


class Person(DocumentModel):
    """Stored person."""

    first_name: str
    last_name: str
    roles: StoredList[Role] = []
    dependents: StoredList[Dependent] = []
    birth_date: str
