"""
Authentication service for user signup and login.

Provides:
- Password hashing and verification (passlib + bcrypt)
- Signup with username uniqueness check
- Login that does not reveal whether the username exists

Login is a stateless acknowledgment; no session or token is issued.
"""

import structlog
from typing import Optional

from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

from api.src.config import Settings, get_settings
from api.src.errors import ConflictError, InvalidCredentialsError
from api.src.models.user import LoginRequest, SignupRequest, UserDB
from api.src.repositories.user_repo import UserRepository

logger = structlog.get_logger(__name__)


class AuthService:
    """Service for credential hashing and the signup/login flows."""

    def __init__(self, user_repo: UserRepository, settings: Optional[Settings] = None):
        """
        Initialize auth service.

        Args:
            user_repo: User repository
            settings: Application settings (defaults to the cached settings)
        """
        self.user_repo = user_repo
        self.settings = settings or get_settings()

        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=self.settings.password_bcrypt_rounds
        )

    def hash_password(self, password: str) -> str:
        """
        Hash a password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            Hashed password
        """
        try:
            hashed = self.pwd_context.hash(password)
            logger.debug("password_hashed")
            return hashed
        except Exception as e:
            logger.error("password_hash_failed", error=str(e))
            raise

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a password against its hash.

        Args:
            plain_password: Plain text password
            hashed_password: Hashed password

        Returns:
            True if password matches, False otherwise (including when the
            stored value is not a recognizable hash)
        """
        try:
            verified = self.pwd_context.verify(plain_password, hashed_password)
            logger.debug("password_verified", verified=verified)
            return verified
        except (ValueError, TypeError) as e:
            logger.error("password_verify_failed", error=str(e))
            return False

    async def signup(self, signup_request: SignupRequest) -> UserDB:
        """
        Register a new user.

        Args:
            signup_request: Signup fields

        Returns:
            Created user

        Raises:
            ConflictError: If the username is already in use
            StoreError: On database error
        """
        if await self.user_repo.user_name_exists(signup_request.user_name):
            logger.warning("signup_username_in_use", user_name=signup_request.user_name)
            raise ConflictError("Username is already in use.")

        password_hash = await run_in_threadpool(self.hash_password, signup_request.password)

        user = await self.user_repo.create_user(
            user_name=signup_request.user_name,
            password_hash=password_hash,
            email_address=signup_request.email_address
        )

        logger.info("signup_success", user_id=user.id, user_name=user.user_name)
        return user

    async def authenticate_user(self, login_request: LoginRequest) -> Optional[UserDB]:
        """
        Authenticate user with username and password.

        Args:
            login_request: Login credentials

        Returns:
            User if authenticated, None otherwise
        """
        user = await self.user_repo.get_user_by_user_name(login_request.user_name)

        if not user:
            logger.warning("authentication_failed_user_not_found", user_name=login_request.user_name)
            return None

        verified = await run_in_threadpool(
            self.verify_password, login_request.password, user.password
        )
        if not verified:
            logger.warning("authentication_failed_invalid_password", user_name=login_request.user_name)
            return None

        logger.info("user_authenticated", user_id=user.id, user_name=user.user_name)
        return user

    async def login(self, login_request: LoginRequest) -> UserDB:
        """
        Log a user in.

        Args:
            login_request: Login credentials

        Returns:
            The authenticated user

        Raises:
            InvalidCredentialsError: For an unknown user or a wrong password
            StoreError: On database error
        """
        user = await self.authenticate_user(login_request)
        if user is None:
            raise InvalidCredentialsError()

        logger.info("login_success", user_id=user.id, user_name=user.user_name)
        return user
