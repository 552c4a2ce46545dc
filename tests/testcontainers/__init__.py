"""Testcontainers for end-to-end testing."""

from .containers import MongoDBContainer, get_mongodb_container

__all__ = ["MongoDBContainer", "get_mongodb_container"]
