"""Person router: list and create."""

from typing import List
from fastapi import APIRouter, Depends, status

from api.src.dependencies import get_person_repository
from api.src.models.common import MessageResponse
from api.src.models.person import Person, PersonRequest
from api.src.repositories.person_repo import PersonRepository

router = APIRouter(
    prefix="/persons",
    tags=["Persons"],
    responses={
        500: {"model": MessageResponse, "description": "Server Exception"},
        501: {"model": MessageResponse, "description": "MongoDB Exception"}
    }
)


@router.get(
    "",
    response_model=List[Person],
    status_code=status.HTTP_200_OK,
    summary="findAllPersons",
    description="Returns an array of person documents."
)
async def find_all_persons(
    person_repo: PersonRepository = Depends(get_person_repository)
) -> List[Person]:
    return await person_repo.list_persons()


@router.post(
    "",
    response_model=Person,
    status_code=status.HTTP_200_OK,
    summary="createPerson",
    description=(
        "Creates a person. roles and dependents are required and may be empty arrays."
    )
)
async def create_person(
    person_request: PersonRequest,
    person_repo: PersonRepository = Depends(get_person_repository)
) -> Person:
    return await person_repo.create_person(person_request)
