"""
User account schemas.

The stored document keeps the bcrypt hash in ``password``; the public
response shape never includes it.
"""

from pydantic import Field

from api.src.models.common import CamelModel, DocumentModel, RequiredStr


class SignupRequest(CamelModel):
    """Signup request schema."""

    user_name: RequiredStr
    password: str = Field(
        ...,
        min_length=1,
        max_length=72,  # bcrypt only reads the first 72 bytes
        description="Plain text password, hashed before storage"
    )
    email_address: RequiredStr

    model_config = {
        "json_schema_extra": {
            "example": {
                "userName": "treyes",
                "password": "s3cret!",
                "emailAddress": "treyes@example.com"
            }
        }
    }


class LoginRequest(CamelModel):
    """Login request schema."""

    user_name: RequiredStr
    password: RequiredStr

    model_config = {
        "json_schema_extra": {
            "example": {"userName": "treyes", "password": "s3cret!"}
        }
    }


class UserDB(DocumentModel):
    """User as stored, including the password hash."""

    user_name: str
    password: str
    email_address: str


class UserResponse(DocumentModel):
    """User as returned to clients."""

    user_name: str
    email_address: str
