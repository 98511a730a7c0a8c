"""
FinEdge - Authentication Endpoints
Registration, login and the current user
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from finedge.config import settings
from finedge.core.security import create_access_token
from finedge.db.database import get_db
from finedge.db.models.user import User, UserRole
from finedge.db.repositories.portfolio import PortfolioRepository
from finedge.db.repositories.user import UserRepository
from finedge.dependencies import get_current_user, has_role
from finedge.schemas.base import Message
from finedge.schemas.user import (
    ForgotPasswordRequest,
    UserCreate,
    UserLogin,
    UserResponse,
    UserWithToken,
)
from finedge.utils.exceptions import (
    InvalidCredentialsError,
    PermissionDeniedError,
    UsernameTakenError,
)

router = APIRouter()


def _with_token(user: User) -> UserWithToken:
    user_data = UserResponse.model_validate(user)
    return UserWithToken(
        **user_data.model_dump(),
        access_token=create_access_token(subject=user.id, additional_claims={"role": user.role.value}),
    )


@router.post(
    "/register",
    response_model=UserWithToken,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register(
    user_data: UserCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserWithToken:
    """
    Register a new user.

    Regular users get a portfolio seeded with the initial deposit in the
    same transaction as the account.
    """
    if user_data.role == UserRole.ADMIN and not settings.ALLOW_ADMIN_SIGNUP:
        raise PermissionDeniedError("Admin signup is disabled")

    user_repo = UserRepository(db)
    if await user_repo.get_by_username(user_data.username):
        raise UsernameTakenError()

    try:
        user = await user_repo.create(user_data)
        if user.role == UserRole.USER:
            await PortfolioRepository(db).create(user.id, settings.INITIAL_DEPOSIT)
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise UsernameTakenError()

    logger.info(f"Registered user {user.id} ({user.username}, role={user.role.value})")
    return _with_token(user)


@router.post("/login", response_model=UserWithToken)
async def login(
    credentials: UserLogin,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserWithToken:
    """Login for regular users. Admin accounts must use the admin login."""
    user = await UserRepository(db).authenticate(credentials.username, credentials.password)
    if user is None:
        raise InvalidCredentialsError()

    if user.is_admin:
        raise PermissionDeniedError("Please use admin login")

    return _with_token(user)


@router.post("/admin/login", response_model=UserWithToken)
async def admin_login(
    credentials: UserLogin,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserWithToken:
    """Login for admin accounts."""
    user = await UserRepository(db).authenticate(credentials.username, credentials.password)
    if user is None:
        raise InvalidCredentialsError()

    if not has_role(user, UserRole.ADMIN):
        raise PermissionDeniedError("Unauthorized. Admin access required.")

    return _with_token(user)


@router.post("/logout")
async def logout() -> Response:
    """Tokens are stateless; the client discards its token."""
    return Response(status_code=status.HTTP_200_OK)


@router.get("/user", response_model=UserResponse)
async def get_user(
    current_user: Annotated[User, Depends(get_current_user)],
) -> UserResponse:
    return UserResponse.model_validate(current_user)


@router.post("/forgot-password", response_model=Message)
async def forgot_password(request: ForgotPasswordRequest) -> Message:
    """Acknowledge a reset request without revealing whether the email exists."""
    logger.info("Password reset requested")
    return Message(message="If an account with that email exists, a password reset link has been sent.")
