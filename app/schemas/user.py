# File: app/schemas/user.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class UserBase(BaseModel):
    # Stored and compared exactly as received
    email: str


class UserLogin(UserBase):
    password: str


class UserRegister(UserBase):
    name: str
    password: str


class UserRead(UserBase):
    # No password field: the hash never leaves the model layer
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    created_at: Optional[datetime] = None


class UserToken(BaseModel):
    token: str


class ErrorResponse(BaseModel):
    message: str
