# File: app/services/user_store.py

"""
User store.

Thin lookup / insert layer over the ``users`` table. The session is
handed in per request; the store never opens connections itself.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.user import User


class UserStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == email).limit(1)
        return self.db.scalars(stmt).first()

    def get(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def insert(self, user: User) -> User:
        self.db.add(user)
        return user

    def commit(self) -> None:
        self.db.commit()
