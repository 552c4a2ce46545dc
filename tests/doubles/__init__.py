"""In-memory test doubles for external services."""

from .mongo import InMemoryCollection, InMemoryDatabase, InMemoryMongoClient

__all__ = ["InMemoryCollection", "InMemoryDatabase", "InMemoryMongoClient"]
