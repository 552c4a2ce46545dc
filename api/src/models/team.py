"""Team schemas with embedded players."""

from typing import List

from pydantic import Field

from api.src.models.common import CamelModel, DocumentModel, RequiredStr, StoredList


class Player(CamelModel):
    """Player embedded in a team document, also the assign-player body."""

    first_name: RequiredStr
    last_name: RequiredStr
    salary: float

    model_config = {
        "json_schema_extra": {
            "example": {"firstName": "Roberto", "lastName": "Clemente", "salary": 100000}
        }
    }


class TeamRequest(CamelModel):
    """Body for creating a team."""

    name: RequiredStr
    mascot: RequiredStr
    players: List[Player] = Field(default_factory=list)


class Team(DocumentModel):
    """Stored team."""

    name: str
    mascot: str
    players: StoredList[Player] = []
