"""User and authentication API endpoints."""

import logging

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from journal_api.config import get_settings
from journal_api.database import get_db
from journal_api.models.user import User
from journal_api.schemas.user import (
    LoginFailure,
    LoginResponse,
    SimpleUser,
    UserCreate,
    UserDetails,
    UserLogin,
    UserResponse,
    UserUpdate,
)
from journal_api.services.base import (
    InvalidCredentialsError,
    NotFoundError,
    UserNotFoundError,
    ValidationError,
)
from journal_api.services.users import USERNAME_PREFIX, UserService, get_user_service
from journal_api.utils.dates import days_since
from journal_api.utils.security import CurrentSession, start_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user", tags=["user"])


def to_simple_user(user: User) -> SimpleUser:
    """Project a user onto its public display fields."""
    return SimpleUser(username=user.username, display_name=user.display_name, avatar=user.avatar)


@router.post("/register", response_model=UserResponse, status_code=201)
async def register(
    user_data: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Register a new user.

    The username is stored lowercased and the password hashed. An empty
    relationship record is created alongside the user.

    Raises:
        HTTPException 409: If the username already exists
    """
    user = await service.register(user_data)
    return UserResponse.model_validate(user)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": LoginFailure}},
)
async def login(
    credentials: UserLogin,
    response: Response,
    service: UserService = Depends(get_user_service),
    db: AsyncSession = Depends(get_db),
) -> LoginResponse | JSONResponse:
    """Authenticate a user and start a session.

    The session is carried in an HTTP-only cookie. A rejected login answers
    401 with a ``{status, message}`` body instead of the usual ``detail``.
    """
    settings = get_settings()
    try:
        user = await service.authenticate(credentials.username, credentials.password)
    except InvalidCredentialsError as e:
        return JSONResponse(
            status_code=e.status_code,
            content=LoginFailure(message=str(e)).model_dump(),
        )

    cookie = await start_session(db, user.username)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=cookie,
        max_age=settings.session_expire_minutes * 60,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )
    logger.info("User %s logged in", user.username)

    return LoginResponse(user=to_simple_user(user))


@router.post("/logout", status_code=204)
async def logout(
    session: CurrentSession,
    response: Response,
    db: AsyncSession = Depends(get_db),
) -> None:
    """End the current session and clear its cookie.

    Raises:
        HTTPException 401: If there is no valid session
    """
    settings = get_settings()
    await db.delete(session)
    response.delete_cookie(settings.session_cookie_name)
    logger.info("User %s logged out", session.username)


@router.get("/search/{name}", response_model=SimpleUser | list[SimpleUser])
async def search_users(
    name: str,
    page: int = Query(0, ge=0, description="Zero-based page number"),
    size: int = Query(10, ge=1, le=100, description="Items per page"),
    service: UserService = Depends(get_user_service),
) -> SimpleUser | list[SimpleUser]:
    """Find users by display name, or by exact username with an ``@`` prefix.

    ``@name`` returns a single user; any other query returns a list.

    Raises:
        HTTPException 400: If the query is blank
        HTTPException 404: If nothing matches
    """
    if not name.strip():
        raise ValidationError("The 'name' parameter cannot be null or empty.")

    users = await service.search_by_display_name(name, page, size)

    if name.startswith(USERNAME_PREFIX):
        if not users:
            raise NotFoundError(f"User with username '{name}' not found.")
        return to_simple_user(users[0])

    if not users:
        raise NotFoundError(f"No users found with display name '{name}'.")
    return [to_simple_user(user) for user in users]


@router.get("/{username}", response_model=SimpleUser | UserDetails)
async def get_user(
    username: str,
    details: bool = Query(False, description="Include email, gender and account age"),
    service: UserService = Depends(get_user_service),
) -> SimpleUser | UserDetails:
    """Get a user's public profile.

    Raises:
        HTTPException 404: If the user does not exist
    """
    user = await service.find_by_username(username)
    if user is None:
        raise UserNotFoundError(username)

    if not details:
        return to_simple_user(user)

    return UserDetails(
        username=user.username,
        display_name=user.display_name,
        email=user.email,
        avatar=user.avatar,
        gender=user.gender,
        created_days=days_since(user.created_datetime),
    )


@router.put("/{username}", response_model=UserResponse)
async def update_user(
    username: str,
    user_data: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Update a user's display name, avatar and email.

    Raises:
        HTTPException 400: If the body's username differs from the path
        HTTPException 404: If the user does not exist
    """
    if user_data.username != username:
        raise ValidationError("The username in the request body does not match the path variable.")

    user = await service.update(username, user_data)
    return UserResponse.model_validate(user)


@router.delete("/{username}", status_code=204)
async def delete_user(
    username: str,
    service: UserService = Depends(get_user_service),
) -> None:
    """Delete a user record. Their journals and relationship record remain.

    Raises:
        HTTPException 404: If the user does not exist
    """
    if not await service.delete(username):
        raise UserNotFoundError(username)
