"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, status

from app.application.dtos.auth_dto import LoginDTO, RegisterDTO, TokenDTO
from app.application.dtos.user_dto import UserDTO
from app.application.services.auth_service import AuthService
from app.presentation.dependencies import get_auth_service, get_bearer_token
from app.presentation.error_schemas import error_responses


router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post(
    "/register",
    response_model=UserDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="Create a user with a unique username and a password.",
    responses=error_responses(status.HTTP_409_CONFLICT),
)
async def register(
    dto: RegisterDTO,
    auth_service: AuthService = Depends(get_auth_service),
) -> UserDTO:
    """
    Register a new user.

    Raises:
        400 Bad Request: If username is empty or password is too short
        409 Conflict: If the username is already registered
    """
    return await auth_service.register(dto)


@router.post(
    "/login",
    response_model=TokenDTO,
    status_code=status.HTTP_200_OK,
    summary="User login",
    description="Authenticate with username and password, returns an access token.",
    responses=error_responses(status.HTTP_401_UNAUTHORIZED),
)
async def login(
    dto: LoginDTO,
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenDTO:
    """
    Authenticate user and receive a JWT access token.

    Use the token in the Authorization header for protected requests:
    Authorization: Bearer <access_token>

    Raises:
        401 Unauthorized: If username or password is incorrect
    """
    return await auth_service.login(dto)


@router.get(
    "/me",
    response_model=UserDTO,
    status_code=status.HTTP_200_OK,
    summary="Get current user",
    description="Get the currently authenticated user's information.",
    responses=error_responses(status.HTTP_401_UNAUTHORIZED, status.HTTP_404_NOT_FOUND),
)
async def get_me(
    access_token: str | None = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserDTO:
    """
    Get current authenticated user.

    Raises:
        401 Unauthorized: If token is missing, invalid, or expired
    """
    return await auth_service.get_current_user(access_token)
