from typing import Optional
from pydantic import AliasChoices, BaseModel, EmailStr, Field, model_validator

from models.base import RequiredStr


class RegisterRequest(BaseModel):
    username: RequiredStr = Field(validation_alias=AliasChoices("username", "name"))
    email: EmailStr
    password: RequiredStr
    address: Optional[str] = None
    state: Optional[str] = None


class LoginRequest(BaseModel):
    """Either the username or the email identifies the account."""
    username: Optional[str] = None
    email: Optional[str] = None
    password: RequiredStr

    @model_validator(mode="after")
    def require_identity(self):
        if not (self.username or self.email):
            raise ValueError("Username or email is required")
        return self


class UserOut(BaseModel):
    id: str
    username: str
    email: EmailStr
    address: Optional[str] = None
    state: Optional[str] = None
    role: str = "user"


class LoginResponse(BaseModel):
    message: str
    user: UserOut
    access_token: str
    token_type: str = "bearer"


class RegisterResponse(BaseModel):
    message: str
    user: UserOut
