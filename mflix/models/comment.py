"""Comment and movie documents."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from mflix.models.common import ObjectIdStr, to_object_id


class Comment(BaseModel):
    id: ObjectIdStr | None = Field(None, alias="_id")
    name: str  # owner's display name when the comment was posted
    email: str  # owner's email; mutations match on it
    movie_id: ObjectIdStr
    text: str
    date: datetime

    model_config = ConfigDict(populate_by_name=True)

    def to_document(self) -> dict:
        doc = self.model_dump(by_alias=True, exclude_none=True, exclude={"id"})
        doc["movie_id"] = to_object_id(self.movie_id)
        return doc


class Movie(BaseModel):
    """Read-only movie view; unknown catalog fields are kept as-is."""

    id: ObjectIdStr = Field(alias="_id")
    title: str | None = None
    comments: list[Comment] = []

    model_config = ConfigDict(populate_by_name=True, extra="allow")
