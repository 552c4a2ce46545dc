"""
Team repository for the ``teams`` collection.

Players are embedded in their team and can only be appended.
"""

import structlog
from typing import List, Optional

from pymongo import ReturnDocument

from api.src.models.team import Player, Team, TeamRequest
from api.src.repositories.document_store import MongoRepository, parse_object_id

logger = structlog.get_logger(__name__)


class TeamRepository(MongoRepository):
    """Repository for team documents."""

    collection_name = "teams"

    async def list_teams(self) -> List[Team]:
        async with self.operation("find"):
            documents = await self.collection.find({}).to_list(None)

        logger.debug("teams_listed", count=len(documents))
        return [Team.model_validate(doc) for doc in documents]

    async def create_team(self, request: TeamRequest) -> Team:
        document = request.to_document()

        async with self.operation("insert_one"):
            result = await self.collection.insert_one(document)

        document["_id"] = result.inserted_id
        logger.info("team_created", team_id=str(result.inserted_id), name=request.name)
        return Team.model_validate(document)

    async def get_team(self, team_id: str) -> Optional[Team]:
        """
        Get team by id.

        Returns:
            Team or None if not found
        """
        oid = parse_object_id(team_id)
        if oid is None:
            return None

        async with self.operation("find_one"):
            document = await self.collection.find_one({"_id": oid})

        if document is None:
            logger.debug("team_not_found", team_id=team_id)
            return None
        return Team.model_validate(document)

    async def add_player(self, team_id: str, player: Player) -> Optional[Team]:
        """
        Append a player to a team with a single ``$push``.

        A null player list is reset to an empty list first.

        Args:
            team_id: Team id
            player: Validated player

        Returns:
            Updated team or None if not found
        """
        oid = parse_object_id(team_id)
        if oid is None:
            return None

        async with self.operation("update_one"):
            await self.collection.update_one(
                {"_id": oid, "players": None},
                {"$set": {"players": []}}
            )

        async with self.operation("find_one_and_update"):
            document = await self.collection.find_one_and_update(
                {"_id": oid},
                {"$push": {"players": player.to_document()}},
                return_document=ReturnDocument.AFTER
            )

        if document is None:
            logger.debug("team_not_found", team_id=team_id)
            return None

        logger.info(
            "player_assigned",
            team_id=team_id,
            players=len(document.get("players") or [])
        )
        return Team.model_validate(document)

    async def delete_team(self, team_id: str) -> Optional[Team]:
        """
        Delete a team.

        Returns:
            The team as it was before deletion, or None if not found
        """
        oid = parse_object_id(team_id)
        if oid is None:
            return None

        async with self.operation("find_one_and_delete"):
            document = await self.collection.find_one_and_delete({"_id": oid})

        if document is None:
            logger.debug("team_not_found", team_id=team_id)
            return None

        logger.info("team_deleted", team_id=team_id)
        return Team.model_validate(document)
