"""FastAPI endpoints for the Accounts context."""

import json

from fastapi import APIRouter
from protean.utils.globals import current_domain

from accounts.api.schemas import RegisterUserRequest, UserIdResponse, UserResponse
from accounts.user.directory import get_user
from accounts.user.registration import RegisterUser

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=201, response_model=UserIdResponse)
async def create_user(body: RegisterUserRequest) -> UserIdResponse:
    command = RegisterUser(
        name=body.name,
        email=body.email,
        roles=json.dumps(body.roles),
    )
    result = current_domain.process(command, asynchronous=False)
    return UserIdResponse(user_id=result)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user_by_id(user_id: int) -> UserResponse:
    return UserResponse.from_user(get_user(user_id))
