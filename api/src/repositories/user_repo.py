"""
User repository for the ``users`` collection.

Provides async lookups and inserts for user accounts. Documents hold the
bcrypt hash in the ``password`` field; hashing happens in AuthService.
"""

import structlog
from typing import Optional

from api.src.models.user import UserDB
from api.src.repositories.document_store import MongoRepository

logger = structlog.get_logger(__name__)


class UserRepository(MongoRepository):
    """Repository for user database operations."""

    collection_name = "users"

    async def create_user(
        self,
        user_name: str,
        password_hash: str,
        email_address: str
    ) -> UserDB:
        """
        Create a new user.

        Args:
            user_name: Username
            password_hash: Hashed password
            email_address: Email address

        Returns:
            Created user

        Raises:
            StoreError: On database error
        """
        document = {
            "userName": user_name,
            "password": password_hash,
            "emailAddress": email_address,
        }

        async with self.operation("insert_one"):
            result = await self.collection.insert_one(document)

        document["_id"] = result.inserted_id
        logger.info("user_created", user_id=str(result.inserted_id), user_name=user_name)
        return UserDB.model_validate(document)

    async def get_user_by_user_name(self, user_name: str) -> Optional[UserDB]:
        """
        Get user by username.

        Args:
            user_name: Username

        Returns:
            User or None if not found
        """
        async with self.operation("find_one"):
            document = await self.collection.find_one({"userName": user_name})

        if document is None:
            logger.debug("user_not_found", user_name=user_name)
            return None
        return UserDB.model_validate(document)

    async def user_name_exists(self, user_name: str) -> bool:
        """
        Check if a username is already taken.

        Args:
            user_name: Username

        Returns:
            True if a user with this name exists
        """
        async with self.operation("count_documents"):
            count = await self.collection.count_documents({"userName": user_name}, limit=1)
        return count > 0
