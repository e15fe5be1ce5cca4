# File: app/services/auth_service.py

"""
Authentication service.

  - Login: look up a user by email, verify the password, mint a token
  - Register: reject duplicate emails, persist a new user

Both functions return a tagged result instead of raising, and the
route layer maps each variant to an HTTP status. Unknown email and
wrong password produce the same InvalidCredentials result so callers
cannot tell which accounts exist.
"""

import logging
from dataclasses import dataclass
from typing import Union

from app.core.security import JwtService
from app.models.user import User
from app.services.user_store import UserStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginSucceeded:
    token: str


@dataclass(frozen=True)
class Registered:
    user: User


@dataclass(frozen=True)
class InvalidCredentials:
    message: str = "Invalid user credentials."


@dataclass(frozen=True)
class EmailConflict:
    message: str = "Email is already in-use."


LoginResult = Union[LoginSucceeded, InvalidCredentials]
RegisterResult = Union[Registered, EmailConflict]
AuthResult = Union[LoginSucceeded, Registered, InvalidCredentials, EmailConflict]


def login(
    store: UserStore,
    jwt_service: JwtService,
    *,
    email: str,
    password: str,
) -> LoginResult:
    logger.info("Logging in user %s.", email)

    user = store.find_by_email(email)
    if user is None:
        logger.info("User %s not found.", email)
        return InvalidCredentials()

    if not user.verify_password(password):
        logger.info("User %s provided an incorrect password.", email)
        return InvalidCredentials()

    logger.info("Generating access token of user %s...", user.id)
    token = jwt_service.generate_token(str(user.id))

    logger.info("User %s logged in.", user.id)
    return LoginSucceeded(token=token)


def register(
    store: UserStore,
    *,
    name: str,
    email: str,
    password: str,
) -> RegisterResult:
    logger.info("Registering user %s.", email)

    if store.find_by_email(email) is not None:
        logger.info("User with the same email %s already exists.", email)
        return EmailConflict()

    user = User(name=name, email=email, password=password)
    store.insert(user)
    store.commit()

    logger.info("User %s registered.", user.id)
    return Registered(user=user)
