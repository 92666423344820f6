"""Pydantic schemas for Users."""
from __future__ import annotations
from pydantic import BaseModel, EmailStr, Field, field_validator

from request_manager.models.user import UserRole
from request_manager.schemas.common import CAMEL_CASE_CONFIG


class UserCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    role: str  # Employee, Support, Manager

    @field_validator("role")
    @classmethod
    def role_must_be_known(cls, value: str) -> str:
        if value not in {role.value for role in UserRole}:
            raise ValueError("Role must be 'Employee', 'Support', or 'Manager'")
        return value


class UserOut(BaseModel):
    id: int
    name: str
    email: str
    role: UserRole

    model_config = CAMEL_CASE_CONFIG
