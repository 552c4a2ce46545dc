"""
Composer repository for the ``composers`` collection.

Provides async CRUD operations keyed by document id.
"""

import structlog
from typing import List, Optional

from pymongo import ReturnDocument

from api.src.models.composer import Composer, ComposerRequest
from api.src.repositories.document_store import MongoRepository, parse_object_id

logger = structlog.get_logger(__name__)


class ComposerRepository(MongoRepository):
    """Repository for composer documents."""

    collection_name = "composers"

    async def list_composers(self) -> List[Composer]:
        """
        Get every composer.

        Returns:
            List of composers, possibly empty
        """
        async with self.operation("find"):
            documents = await self.collection.find({}).to_list(None)

        logger.debug("composers_listed", count=len(documents))
        return [Composer.model_validate(doc) for doc in documents]

    async def get_composer(self, composer_id: str) -> Optional[Composer]:
        """
        Get composer by id.

        Args:
            composer_id: Composer id

        Returns:
            Composer or None if not found
        """
        oid = parse_object_id(composer_id)
        if oid is None:
            logger.debug("composer_id_malformed", composer_id=composer_id)
            return None

        async with self.operation("find_one"):
            document = await self.collection.find_one({"_id": oid})

        if document is None:
            logger.debug("composer_not_found", composer_id=composer_id)
            return None
        return Composer.model_validate(document)

    async def create_composer(self, request: ComposerRequest) -> Composer:
        """
        Insert a new composer.

        Args:
            request: Validated composer fields

        Returns:
            Created composer with its assigned id
        """
        document = request.to_document()

        async with self.operation("insert_one"):
            result = await self.collection.insert_one(document)

        document["_id"] = result.inserted_id
        logger.info("composer_created", composer_id=str(result.inserted_id))
        return Composer.model_validate(document)

    async def update_composer(
        self,
        composer_id: str,
        request: ComposerRequest
    ) -> Optional[Composer]:
        """
        Replace a composer's names in place.

        Args:
            composer_id: Composer id
            request: New field values

        Returns:
            Updated composer or None if not found
        """
        oid = parse_object_id(composer_id)
        if oid is None:
            return None

        async with self.operation("find_one_and_update"):
            document = await self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": request.to_document()},
                return_document=ReturnDocument.AFTER
            )

        if document is None:
            logger.debug("composer_not_found", composer_id=composer_id)
            return None

        logger.info("composer_updated", composer_id=composer_id)
        return Composer.model_validate(document)

    async def delete_composer(self, composer_id: str) -> Optional[Composer]:
        """
        Delete a composer.

        Args:
            composer_id: Composer id

        Returns:
            The composer as it was before deletion, or None if not found
        """
        oid = parse_object_id(composer_id)
        if oid is None:
            return None

        async with self.operation("find_one_and_delete"):
            document = await self.collection.find_one_and_delete({"_id": oid})

        if document is None:
            logger.debug("composer_not_found", composer_id=composer_id)
            return None

        logger.info("composer_deleted", composer_id=composer_id)
        return Composer.model_validate(document)
