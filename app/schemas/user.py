"""
User Pydantic Schemas

These schemas define the shape of data for authentication operations.

Schemas:
- UserCreate: Registration data (email, password)
- UserResponse: Public user data (never exposes password)
- LoginRequest: Credentials posted to /user/login
- TokenResponse: Bearer token returned on successful login
"""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    """Schema for user registration."""

    email: EmailStr = Field(
        ...,
        description="User's email address",
        examples=["john.doe@example.com"],
    )

    password: str = Field(
        ...,
        min_length=6,
        max_length=72,  # bcrypt only uses the first 72 bytes
        description="Password (min 6 characters)",
        examples=["password123"],
    )

    full_name: str | None = Field(
        default=None,
        max_length=255,
        description="User's full display name",
        examples=["John Doe"],
    )


class UserResponse(BaseModel):
    """
    Schema for user profile responses.

    SECURITY: hashed_password is never part of this schema.
    """

    id: str = Field(
        ...,
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
        description="Unique user identifier",
    )
    email: str = Field(..., description="User's email address")
    full_name: str | None = Field(default=None, description="User's display name")
    is_active: bool = Field(..., description="Whether the account is active")
    created_at: datetime = Field(
        ...,
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
        description="When the user registered",
    )

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class LoginRequest(BaseModel):
    """
    Credentials for POST /user/login.

    email is a plain string here: a malformed address is just a wrong
    credential and gets the same 401 as any other.
    """

    email: str = Field(
        ...,
        min_length=1,
        max_length=255,
        examples=["john.doe@example.com"],
    )
    password: str = Field(
        ...,
        min_length=1,
        max_length=128,
        examples=["password123"],
    )


class TokenResponse(BaseModel):
    """Bearer token issued on successful login."""

    token: str = Field(..., description="JWT access token for the Authorization header")
    token_type: str = Field(default="bearer", description="Always 'bearer'")
    expires_in: int = Field(..., description="Token lifetime in seconds")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 3600,
            }
        },
    )
