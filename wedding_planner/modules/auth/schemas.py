from pydantic import BaseModel, EmailStr, Field
from typing import Optional

from wedding_planner.modules.users.schemas import UserRole


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: str
    email: str


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)
    name: Optional[str] = None
    role: UserRole = "general"


class RegisterResponse(BaseModel):
    user_id: str
    email: str
    message: str
