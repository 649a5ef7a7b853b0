"""Auth Schemas — registration and login payloads.

Invariants:
    - email syntactically valid (EmailStr), normalized the same way on register and login
    - role limited to Role values; omitted role defaults to "user" downstream
"""

from pydantic import BaseModel, EmailStr, Field, field_validator

from crowdfund.core.domain_types import Role


class UserRegister(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(min_length=1, max_length=1024)
    role: Role | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(max_length=1024)
