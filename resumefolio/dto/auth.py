from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from ..auth.validators import validate_name, validate_password


class CreateUserRequest(BaseModel):
    name: str
    email: EmailStr
    password: str
    
    @field_validator('name')
    def check_name(cls, v):
        is_valid, error = validate_name(v)
        if not is_valid:
            raise ValueError(error)
        return v.strip()
    
    @field_validator('password')
    def check_password(cls, v):
        is_valid, error = validate_password(v)
        if not is_valid:
            raise ValueError(error)
        return v


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class AuthTokenResponse(BaseModel):
    authtoken: str


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
    
    id: str
    name: str
    email: str
    created_at: Optional[datetime] = None
