# File: app/api/routes_auth.py

"""
Auth API routes: login, register and the current user.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.api.deps import get_current_user, get_user_store
from app.core.security import JwtService, get_jwt_service
from app.models.user import User
from app.schemas.user import ErrorResponse, UserLogin, UserRead, UserRegister, UserToken
from app.services import auth_service
from app.services.auth_service import (
    EmailConflict,
    InvalidCredentials,
    LoginSucceeded,
    Registered,
)
from app.services.user_store import UserStore

router = APIRouter()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
    )


@router.post(
    "/login",
    response_model=UserToken,
    summary="Login a user",
    responses={
        status.HTTP_400_BAD_REQUEST: {
            "model": ErrorResponse,
            "description": "Invalid user credentials.",
        },
    },
)
def login(
    payload: UserLogin,
    store: UserStore = Depends(get_user_store),
    jwt_service: JwtService = Depends(get_jwt_service),
):
    """
    Exchange email + password for an access token.
    """
    result = auth_service.login(
        store,
        jwt_service,
        email=payload.email,
        password=payload.password,
    )

    if isinstance(result, InvalidCredentials):
        return _error(status.HTTP_400_BAD_REQUEST, result.message)
    if isinstance(result, LoginSucceeded):
        return UserToken(token=result.token)
    raise TypeError(f"Unexpected login result: {result!r}")


@router.post(
    "/register",
    response_model=UserRead,
    summary="Register a user",
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "The data passed was invalid."},
        status.HTTP_409_CONFLICT: {
            "model": ErrorResponse,
            "description": "The data passed has conflicting values.",
        },
    },
)
def register(
    payload: UserRegister,
    store: UserStore = Depends(get_user_store),
):
    """
    Create a user account. The password is stored hashed and never returned.
    """
    result = auth_service.register(
        store,
        name=payload.name,
        email=payload.email,
        password=payload.password,
    )

    if isinstance(result, EmailConflict):
        return _error(status.HTTP_409_CONFLICT, result.message)
    if isinstance(result, Registered):
        return UserRead.model_validate(result.user)
    raise TypeError(f"Unexpected register result: {result!r}")


@router.get("/me", response_model=UserRead, summary="Current user")
def read_current_user(current_user: User = Depends(get_current_user)):
    return UserRead.model_validate(current_user)
