"""User and session documents."""
from pydantic import BaseModel, ConfigDict, Field

from mflix.models.common import ObjectIdStr


class User(BaseModel):
    """Account record, unique by email. Holds only the password hash."""

    id: ObjectIdStr | None = Field(None, alias="_id")
    name: str
    email: str
    hashed_password: str = Field(alias="password")
    is_admin: bool = Field(False, alias="isAdmin")
    preferences: dict[str, str] | None = None
    # attached by login, never stored
    auth_token: str | None = None

    model_config = ConfigDict(populate_by_name=True)

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, exclude={"id", "auth_token"})


class Session(BaseModel):
    """The single live session of a user."""

    id: ObjectIdStr | None = Field(None, alias="_id")
    user_id: str
    token: str = Field(alias="jwt")

    model_config = ConfigDict(populate_by_name=True)
