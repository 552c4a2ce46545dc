"""
FastAPI dependency injection for the document store, repositories and
services.

The DocumentStore is created by the application factory and kept on
``app.state``; every repository is built per request from its database
handle, so handlers share no mutable in-process state.
"""

import structlog
from fastapi import Depends, Request

from api.src.config import Settings
from api.src.repositories.composer_repo import ComposerRepository
from api.src.repositories.customer_repo import CustomerRepository
from api.src.repositories.document_store import DocumentStore
from api.src.repositories.person_repo import PersonRepository
from api.src.repositories.team_repo import TeamRepository
from api.src.repositories.user_repo import UserRepository
from api.src.services.auth_service import AuthService

logger = structlog.get_logger(__name__)


# ============================================================================
# APPLICATION STATE
# ============================================================================


def get_app_settings(request: Request) -> Settings:
    """Get the settings the running application was built with."""
    return request.app.state.settings


def get_document_store(request: Request) -> DocumentStore:
    """
    Get the application's document store.

    Returns:
        Connected DocumentStore
    """
    return request.app.state.document_store


def get_database(store: DocumentStore = Depends(get_document_store)):
    """Get the application database handle."""
    return store.database


# ============================================================================
# REPOSITORY DEPENDENCIES
# ============================================================================


def get_composer_repository(database=Depends(get_database)) -> ComposerRepository:
    return ComposerRepository(database)


def get_person_repository(database=Depends(get_database)) -> PersonRepository:
    return PersonRepository(database)


def get_customer_repository(database=Depends(get_database)) -> CustomerRepository:
    return CustomerRepository(database)


def get_team_repository(database=Depends(get_database)) -> TeamRepository:
    return TeamRepository(database)


def get_user_repository(database=Depends(get_database)) -> UserRepository:
    return UserRepository(database)


# ============================================================================
# SERVICE DEPENDENCIES
# ============================================================================


def get_auth_service(
    user_repo: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_app_settings)
) -> AuthService:
    """
    Get authentication service bound to the request's user repository.

    Args:
        user_repo: User repository
        settings: Application settings

    Returns:
        AuthService instance
    """
    return AuthService(user_repo, settings=settings)
