"""
FinEdge - User Repository
CRUD operations for User model
"""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from finedge.db.models.user import User, UserRole
from finedge.schemas.user import UserCreate
from finedge.core.security import get_password_hash, verify_password


class UserRepository:
    """Repository for User CRUD operations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: The user's ID

        Returns:
            User object if found, None otherwise
        """
        result = await self.session.execute(
            select(User).where(User.id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        result = await self.session.execute(
            select(User).where(User.username == username)
        )
        return result.scalar_one_or_none()

    async def create(self, user_data: UserCreate) -> User:
        """
        Create a new user. The caller commits.

        Args:
            user_data: User creation data

        Returns:
            Created User object
        """
        user = User(
            username=user_data.username,
            hashed_password=get_password_hash(user_data.password),
            first_name=user_data.first_name,
            last_name=user_data.last_name,
            email=user_data.email,
            role=user_data.role or UserRole.USER,
        )
        self.session.add(user)
        await self.session.flush()
        return user

    async def authenticate(self, username: str, password: str) -> Optional[User]:
        """
        Authenticate a user by username and password.

        Returns:
            User object if authentication successful, None otherwise
        """
        user = await self.get_by_username(username)
        if not user:
            return None
        if not verify_password(password, user.hashed_password):
            return None
        return user
