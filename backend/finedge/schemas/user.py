"""
FinEdge - Pydantic Schemas
User and Authentication Schemas
"""
from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, ConfigDict

from finedge.db.models.user import UserRole
from finedge.schemas.base import CamelModel


class UserCreate(CamelModel):
    """Schema for registering a new user."""
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1, max_length=100)
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    email: Optional[EmailStr] = None
    role: Optional[UserRole] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "johndoe",
                "password": "strongpassword123",
                "firstName": "John",
                "lastName": "Doe",
                "email": "john@example.com",
            }
        }
    )


class UserLogin(CamelModel):
    """Schema for user login."""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserResponse(CamelModel):
    """Public user data."""
    id: int
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    role: UserRole
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserWithToken(UserResponse):
    """User data returned by register/login."""
    access_token: str
    token_type: str = "bearer"


class ForgotPasswordRequest(CamelModel):
    """Password reset request."""
    email: EmailStr
