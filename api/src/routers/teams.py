"""
Team router.

Provides REST API endpoints for:
- Listing and creating teams
- Assigning players to a team and listing them
- Deleting teams
"""

import structlog
from typing import List
from fastapi import APIRouter, Depends, status

from api.src.dependencies import get_team_repository
from api.src.errors import NotFoundError
from api.src.models.common import MessageResponse
from api.src.models.team import Player, Team, TeamRequest
from api.src.repositories.team_repo import TeamRepository

logger = structlog.get_logger(__name__)

INVALID_TEAM_ID = "Invalid teamId."

router = APIRouter(
    prefix="/teams",
    tags=["Teams"],
    responses={
        500: {"model": MessageResponse, "description": "Server Exception"},
        501: {"model": MessageResponse, "description": "MongoDB Exception"}
    }
)


@router.get(
    "",
    response_model=List[Team],
    status_code=status.HTTP_200_OK,
    summary="findAllTeams",
    description="Returns an array of team documents."
)
async def find_all_teams(
    team_repo: TeamRepository = Depends(get_team_repository)
) -> List[Team]:
    return await team_repo.list_teams()


@router.post(
    "",
    response_model=Team,
    status_code=status.HTTP_200_OK,
    summary="createTeam",
    description="Creates a team, optionally with an initial roster."
)
async def create_team(
    team_request: TeamRequest,
    team_repo: TeamRepository = Depends(get_team_repository)
) -> Team:
    return await team_repo.create_team(team_request)


@router.post(
    "/{team_id}/players",
    response_model=Team,
    status_code=status.HTTP_200_OK,
    summary="assignPlayerToTeam",
    description="Appends a player to the team and returns the updated team.",
    responses={401: {"model": MessageResponse, "description": "Invalid teamId"}}
)
async def assign_player_to_team(
    team_id: str,
    player: Player,
    team_repo: TeamRepository = Depends(get_team_repository)
) -> Team:
    team = await team_repo.add_player(team_id, player)
    if team is None:
        logger.warning("player_assign_invalid_team_id", team_id=team_id)
        raise NotFoundError(INVALID_TEAM_ID)
    return team


@router.get(
    "/{team_id}/players",
    response_model=List[Player],
    status_code=status.HTTP_200_OK,
    summary="findAllPlayersByTeamId",
    description="Returns the team's players.",
    responses={401: {"model": MessageResponse, "description": "Invalid teamId"}}
)
async def find_all_players_by_team_id(
    team_id: str,
    team_repo: TeamRepository = Depends(get_team_repository)
) -> List[Player]:
    team = await team_repo.get_team(team_id)
    if team is None:
        logger.warning("player_list_invalid_team_id", team_id=team_id)
        raise NotFoundError(INVALID_TEAM_ID)
    return team.players


@router.delete(
    "/{team_id}",
    response_model=Team,
    status_code=status.HTTP_200_OK,
    summary="deleteTeamById",
    description="Deletes the team and returns the deleted document.",
    responses={401: {"model": MessageResponse, "description": "Invalid teamId"}}
)
async def delete_team_by_id(
    team_id: str,
    team_repo: TeamRepository = Depends(get_team_repository)
) -> Team:
    team = await team_repo.delete_team(team_id)
    if team is None:
        logger.warning("team_delete_invalid_team_id", team_id=team_id)
        raise NotFoundError(INVALID_TEAM_ID)
    return team
