# File: app/api/deps.py

from collections.abc import Generator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.security import InvalidTokenError, JwtService, get_jwt_service
from app.db.session import SessionLocal
from app.models.user import User
from app.services.user_store import UserStore

bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_user_store(db: Session = Depends(get_db)) -> UserStore:
    return UserStore(db)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    store: UserStore = Depends(get_user_store),
    jwt_service: JwtService = Depends(get_jwt_service),
) -> User:
    """
    Resolve the bearer token to a stored user, or fail with 401.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials.",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise credentials_exception

    try:
        subject = jwt_service.decode_token(credentials.credentials)
        user_id = int(subject)
    except (InvalidTokenError, ValueError):
        raise credentials_exception

    user = store.get(user_id)
    if user is None:
        raise credentials_exception
    return user
