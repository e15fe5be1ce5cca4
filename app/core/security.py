# File: app/core/security.py

"""
Security helpers for the Expense Tracker API.

  - Password hashing / verification (passlib, bcrypt_sha256 scheme)
  - JWT access tokens (python-jose)

bcrypt alone only reads the first 72 bytes of a secret. bcrypt_sha256
digests the password with SHA-256 first, so every byte counts. passlib
compares digests in constant time.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import get_settings


pwd_context = CryptContext(schemes=["bcrypt_sha256"], deprecated="auto")


class InvalidTokenError(Exception):
    """Raised when a token is malformed, badly signed, expired or has no subject."""


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


class JwtService:
    """
    Mints and validates signed access tokens.

    The token subject ("sub") is the user identifier as a string.
    """

    def __init__(
        self,
        secret_key: str,
        *,
        algorithm: str = "HS256",
        expire_minutes: int = 60 * 24,
    ) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def generate_token(self, user_id: str, expires_delta: Optional[timedelta] = None) -> str:
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=self.expire_minutes))
        to_encode: dict[str, Any] = {
            "sub": user_id,
            "iat": now,
            "exp": expire,
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> str:
        """
        Validate signature and expiry, and return the token subject.

        Raises:
            InvalidTokenError: for any token that cannot be trusted.
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as exc:
            raise InvalidTokenError(str(exc)) from exc

        subject = payload.get("sub")
        if not subject:
            raise InvalidTokenError("Token has no subject.")
        return subject


def get_jwt_service() -> JwtService:
    """FastAPI dependency building the token issuer from settings."""
    settings = get_settings()
    return JwtService(
        settings.secret_key,
        algorithm=settings.algorithm,
        expire_minutes=settings.access_token_expire_minutes,
    )
