"""Pydantic request/response schemas for the Accounts API.

Response shapes match the JSON the admin UI consumes
(``roles[].permissions[]``).
"""

from datetime import datetime

from pydantic import BaseModel, Field

from accounts.user.user import DEFAULT_GUARD, ROLE_IDS, User


# --- Request Schemas ---


class RegisterUserRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Ada Lovelace",
                    "email": "ada@example.com",
                    "roles": ["admin"],
                }
            ]
        }
    }

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., max_length=254)
    roles: list[str] = Field(default_factory=list)


# --- Response Schemas ---


class UserIdResponse(BaseModel):
    user_id: int


class PermissionResponse(BaseModel):
    id: int
    name: str
    guard_name: str = DEFAULT_GUARD
    created_at: datetime | None = None
    updated_at: datetime | None = None


class RoleResponse(BaseModel):
    id: int
    name: str
    guard_name: str = DEFAULT_GUARD
    created_at: datetime | None = None
    updated_at: datetime | None = None
    permissions: list[PermissionResponse] = Field(default_factory=list)

    @classmethod
    def named(cls, name: str) -> "RoleResponse":
        return cls(id=ROLE_IDS[name], name=name)


class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    avatar: str | None = None
    email_verified_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    roles: list[RoleResponse] = Field(default_factory=list)

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            avatar=user.avatar,
            email_verified_at=user.email_verified_at,
            created_at=user.created_at,
            updated_at=user.updated_at,
            roles=[RoleResponse.named(name) for name in user.role_names()],
        )
