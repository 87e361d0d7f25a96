import json
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Path, Request
from fastapi.exceptions import RequestValidationError

from app.config.dependencies import get_user_service
from app.users.models import Message, User
from app.users.services import UserService

router = APIRouter(prefix="/users", tags=["Users"])

NOT_FOUND = {404: {"model": Message, "description": "User not found"}}

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Body is read by read_user_payload, so the request schema is declared here
USER_BODY_DOC = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {"schema": {"$ref": "#/components/schemas/User"}},
            FORM_CONTENT_TYPE: {"schema": {"$ref": "#/components/schemas/User"}},
        },
    }
}


async def read_user_payload(request: Request) -> Dict[str, Any]:
    """
    Read a JSON object or urlencoded form body.

    Form values stay strings; a repeated key becomes a list. An empty
    body, or one of any other content type, reads as {}.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if content_type == FORM_CONTENT_TYPE:
        form = await request.form()
        payload: Dict[str, Any] = {}
        for key in form.keys():
            values = form.getlist(key)
            payload[key] = values[0] if len(values) == 1 else values
        return payload

    if content_type.startswith("application/") and content_type.endswith("json"):
        body = await request.body()
        if not body:
            return {}
        try:
            payload = json.loads(body)
        except json.JSONDecodeError as e:
            raise RequestValidationError(
                [{"type": "json_invalid", "loc": ("body", e.pos), "msg": "JSON decode error", "input": {}, "ctx": {"error": e.msg}}],
                body=e.doc,
            ) from e
        if not isinstance(payload, dict):
            raise RequestValidationError(
                [{"type": "dict_type", "loc": ("body",), "msg": "Input should be a valid dictionary", "input": payload}],
                body=payload,
            )
        return payload

    return {}


def _user_id_path():
    # Kept as a string so a non-numeric id is a 404, not a validation error
    return Path(..., description="The user id", json_schema_extra={"type": "integer"})


@router.get(
    "",
    summary="Get all users",
    responses={200: {"model": List[User], "description": "The list of all users"}},
)
async def list_users_endpoint(service: UserService = Depends(get_user_service)):
    return await service.list_users()


@router.get(
    "/{id}",
    summary="Get user by id",
    responses={200: {"model": User, "description": "The user description by id"}, **NOT_FOUND},
)
async def get_user_endpoint(id: str = _user_id_path(), service: UserService = Depends(get_user_service)):
    return await service.retrieve_user(id)


@router.post(
    "",
    summary="Create a new user",
    responses={
        200: {"model": User, "description": "The user was successfully created"},
        400: {"description": "Invalid user data"},
    },
    openapi_extra=USER_BODY_DOC,
)
async def create_user_endpoint(
    payload: Dict[str, Any] = Depends(read_user_payload),
    service: UserService = Depends(get_user_service),
):
    # Stored verbatim; the User schema is documentation only
    return await service.register_user(payload)


@router.put(
    "/{id}",
    summary="Update the user by the id",
    responses={200: {"model": User, "description": "The user was updated"}, **NOT_FOUND},
    openapi_extra=USER_BODY_DOC,
)
async def update_user_endpoint(
    id: str = _user_id_path(),
    changes: Dict[str, Any] = Depends(read_user_payload),
    service: UserService = Depends(get_user_service),
):
    return await service.modify_user(id, changes)


@router.delete(
    "/{id}",
    summary="Remove the user by id",
    responses={200: {"model": List[User], "description": "The user was deleted"}, **NOT_FOUND},
)
async def delete_user_endpoint(id: str = _user_id_path(), service: UserService = Depends(get_user_service)):
    return await service.remove_user(id)
