# File: tests/test_auth_service.py

from app.core.security import JwtService
from app.services import auth_service
from app.services.auth_service import (
    EmailConflict,
    InvalidCredentials,
    LoginSucceeded,
    Registered,
)
from app.services.user_store import UserStore

jwt_service = JwtService("test-secret", expire_minutes=5)


def test_register_persists_hashed_user(db):
    store = UserStore(db)

    result = auth_service.register(store, name="A", email="a@x.com", password="p1")

    assert isinstance(result, Registered)
    assert result.user.id is not None
    assert result.user.password_hash != "p1"
    assert store.find_by_email("a@x.com").id == result.user.id


def test_register_duplicate_email_is_conflict(db):
    store = UserStore(db)
    auth_service.register(store, name="A", email="a@x.com", password="p1")

    result = auth_service.register(store, name="B", email="a@x.com", password="p2")

    assert isinstance(result, EmailConflict)
    assert result.message == "Email is already in-use."


def test_login_token_subject_is_user_id(db):
    store = UserStore(db)
    user = auth_service.register(store, name="A", email="a@x.com", password="p1").user

    result = auth_service.login(store, jwt_service, email="a@x.com", password="p1")

    assert isinstance(result, LoginSucceeded)
    assert jwt_service.decode_token(result.token) == str(user.id)


def test_login_failures_are_identical(db):
    store = UserStore(db)
    auth_service.register(store, name="A", email="a@x.com", password="p1")

    unknown = auth_service.login(store, jwt_service, email="b@x.com", password="p1")
    wrong = auth_service.login(store, jwt_service, email="a@x.com", password="p2")

    assert isinstance(unknown, InvalidCredentials)
    assert unknown == wrong
