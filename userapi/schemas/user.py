"""User API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from userapi.application.dtos.user import CreateUserRequest, UpdateUserRequest


class UserCreateBody(BaseModel):
    """Request body for POST /api/users.

    Only shape is enforced here; format rules live in
    userapi.shared.utils.validation and run in the endpoint after sanitizing.
    """

    name: str
    email: str

    def to_request(self) -> CreateUserRequest:
        return CreateUserRequest(name=self.name, email=self.email)


class UserUpdateBody(BaseModel):
    """Request body for PUT /api/users/{id} (full replace of name and email)."""

    name: str
    email: str

    def to_request(self) -> UpdateUserRequest:
        return UpdateUserRequest(name=self.name, email=self.email)


class UserData(BaseModel):
    """User payload inside the success envelope."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime
