from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """Documentation schema for a user record. Handlers do not validate against it."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"id": 3, "name": "user3", "email": "user@gmail.com"}
        }
    )

    id: Optional[int] = Field(None, description="The auto-generated id of the user")
    name: str = Field(..., description="The name of the user")
    email: str = Field(..., description="The email of the user", json_schema_extra={"format": "email"})


class Message(BaseModel):
    message: str
