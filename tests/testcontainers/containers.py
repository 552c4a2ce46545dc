"""Reusable Testcontainers configuration for end-to-end tests.

Provides a standalone MongoDB container for exercising the repositories
against a real server.
"""

from testcontainers.mongodb import MongoDbContainer as BaseMongoDbContainer


class MongoDBContainer(BaseMongoDbContainer):
    """Standalone MongoDB container; no replica set is needed for CRUD."""

    def __init__(
        self,
        image: str = "mongo:7.0",
        **kwargs: object,
    ) -> None:
        """Initialize MongoDB container.

        Args:
            image: MongoDB image tag
            **kwargs: Additional container arguments
        """
        super().__init__(image=image, **kwargs)


def get_mongodb_container() -> MongoDBContainer:
    """Get a configured MongoDB container.

    Returns:
        MongoDB container instance (not yet started)
    """
    return MongoDBContainer()
