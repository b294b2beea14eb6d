"""User API: thin routes delegating to UserService.

Decode and validate here, call the service, wrap the result in the success
envelope. Domain exceptions (not found, duplicate email, store failure)
propagate to the handlers in userapi.core.exception_handlers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from userapi.api.dependencies import get_user_service, get_user_service_for_write
from userapi.application.services.user_service import UserService
from userapi.domain.exceptions import ValidationException
from userapi.schemas.envelope import ErrorEnvelope, SuccessEnvelope
from userapi.schemas.user import UserCreateBody, UserData, UserUpdateBody
from userapi.shared.utils.sanitization import sanitize_string
from userapi.shared.utils.validation import validate_user_input

router = APIRouter()

_ERRORS = {
    400: {"model": ErrorEnvelope, "description": "Invalid id or payload"},
    404: {"model": ErrorEnvelope, "description": "User not found"},
    409: {"model": ErrorEnvelope, "description": "Email already exists"},
    500: {"model": ErrorEnvelope, "description": "Internal error"},
}


def _clean(body: UserCreateBody | UserUpdateBody) -> None:
    """Sanitize name/email in place and raise ValidationException on bad format."""
    body.name = sanitize_string(body.name)
    body.email = sanitize_string(body.email)
    errors = validate_user_input(body.name, body.email)
    if errors:
        raise ValidationException("; ".join(errors), errors=errors)


@router.get(
    "",
    response_model=SuccessEnvelope[list[UserData]],
    responses={500: _ERRORS[500]},
)
async def list_users(
    service: Annotated[UserService, Depends(get_user_service)],
):
    """List all users, newest first."""
    users = await service.get_all_users()
    return SuccessEnvelope[list[UserData]](
        data=[UserData.model_validate(u) for u in users]
    )


@router.get(
    "/{user_id}",
    response_model=SuccessEnvelope[UserData],
    responses={k: _ERRORS[k] for k in (400, 404, 500)},
)
async def get_user(
    user_id: int,
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Get user by id."""
    user = await service.get_user_by_id(user_id)
    return SuccessEnvelope[UserData](data=UserData.model_validate(user))


@router.post(
    "",
    response_model=SuccessEnvelope[UserData],
    status_code=201,
    responses={k: _ERRORS[k] for k in (400, 409, 500)},
)
async def create_user(
    body: UserCreateBody,
    service: Annotated[UserService, Depends(get_user_service_for_write)],
):
    """Create a user. Email must be unused."""
    _clean(body)
    user = await service.create_user(body.to_request())
    return SuccessEnvelope[UserData](data=UserData.model_validate(user))


@router.put(
    "/{user_id}",
    response_model=SuccessEnvelope[UserData],
    responses=_ERRORS,
)
async def update_user(
    user_id: int,
    body: UserUpdateBody,
    service: Annotated[UserService, Depends(get_user_service_for_write)],
):
    """Replace a user's name and email."""
    _clean(body)
    user = await service.update_user(user_id, body.to_request())
    return SuccessEnvelope[UserData](data=UserData.model_validate(user))


@router.delete(
    "/{user_id}",
    status_code=204,
    response_class=Response,
    responses={k: _ERRORS[k] for k in (400, 404, 500)},
)
async def delete_user(
    user_id: int,
    service: Annotated[UserService, Depends(get_user_service_for_write)],
) -> Response:
    """Delete a user. 204 with an empty body."""
    await service.delete_user(user_id)
    return Response(status_code=204)
