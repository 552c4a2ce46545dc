"""Person repository for the ``people`` collection."""

import structlog
from typing import List

from api.src.models.person import Person, PersonRequest
from api.src.repositories.document_store import MongoRepository

logger = structlog.get_logger(__name__)


class PersonRepository(MongoRepository):
    """Repository for person documents. Create and list only."""

    collection_name = "people"

    async def list_persons(self) -> List[Person]:
        async with self.operation("find"):
            documents = await self.collection.find({}).to_list(None)

        logger.debug("persons_listed", count=len(documents))
        return [Person.model_validate(doc) for doc in documents]

    async def create_person(self, request: PersonRequest) -> Person:
        """
        Insert a new person with its roles and dependents.

        Args:
            request: Validated person fields

        Returns:
            Created person with its assigned id
        """
        document = request.to_document()

        async with self.operation("insert_one"):
            result = await self.collection.insert_one(document)

        document["_id"] = result.inserted_id
        logger.info(
            "person_created",
            person_id=str(result.inserted_id),
            roles=len(request.roles),
            dependents=len(request.dependents)
        )
        return Person.model_validate(document)
