"""
Session router for signup and login.

Login only acknowledges valid credentials; it does not create a session,
cookie or token.
"""

import structlog
from fastapi import APIRouter, Depends, status

from api.src.dependencies import get_auth_service
from api.src.models.common import MessageResponse
from api.src.models.user import LoginRequest, SignupRequest, UserResponse
from api.src.services.auth_service import AuthService

logger = structlog.get_logger(__name__)

router = APIRouter(
    tags=["Session"],
    responses={
        500: {"model": MessageResponse, "description": "Server Exception"},
        501: {"model": MessageResponse, "description": "MongoDB Exception"}
    }
)


@router.post(
    "/signup",
    response_model=UserResponse,
    status_code=status.HTTP_200_OK,
    summary="signup",
    description="""
    Register a new user.

    The password is stored as a bcrypt hash and is never returned.

    **Error Responses:**
    - 401: Username is already in use
    """,
    responses={
        401: {
            "description": "Username is already in use",
            "model": MessageResponse,
            "content": {
                "application/json": {
                    "example": {"message": "Username is already in use."}
                }
            }
        }
    }
)
async def signup(
    signup_request: SignupRequest,
    auth_service: AuthService = Depends(get_auth_service)
) -> UserResponse:
    logger.info("signup_attempt", user_name=signup_request.user_name)
    user = await auth_service.signup(signup_request)
    return UserResponse.model_validate(user.model_dump())


@router.post(
    "/login",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="login",
    description="""
    Verify a username and password.

    Unknown usernames and wrong passwords get the same response.

    **Error Responses:**
    - 401: Invalid username and/or password
    """,
    responses={
        401: {
            "description": "Invalid credentials",
            "model": MessageResponse,
            "content": {
                "application/json": {
                    "example": {"message": "Invalid username and/or password."}
                }
            }
        }
    }
)
async def login(
    login_request: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service)
) -> MessageResponse:
    logger.info("login_attempt", user_name=login_request.user_name)
    await auth_service.login(login_request)
    return MessageResponse(message="User logged in.")
