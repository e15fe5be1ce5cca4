# File: app/models/user.py

"""
User model.

Passwords are never stored in plaintext: assigning ``user.password``
stores a bcrypt_sha256 hash in ``password_hash``.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.security import hash_password, verify_password
from app.models.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Uniqueness is checked by the register flow before insert
    email: Mapped[str] = mapped_column(String(320), nullable=False, index=True)

    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    @property
    def password(self) -> str:
        raise AttributeError("password is write-only; use verify_password()")

    @password.setter
    def password(self, plain_password: str) -> None:
        self.password_hash = hash_password(plain_password)

    def verify_password(self, plain_password: str) -> bool:
        return verify_password(plain_password, self.password_hash)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
