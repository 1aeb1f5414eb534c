"""Pydantic schemas for write outcomes and reports."""
from pydantic import BaseModel, ConfigDict, Field

from mflix.models.comment import Comment, Movie


class UpdateOutcome(BaseModel):
    matched_count: int
    modified_count: int
    acknowledged: bool = True

    @property
    def matched(self) -> bool:
        return self.matched_count > 0


class CommenterCount(BaseModel):
    email: str = Field(alias="_id")
    count: int

    model_config = ConfigDict(populate_by_name=True)


class PostedComment(BaseModel):
    """A freshly stored comment and the refreshed movie it belongs to."""

    comment: Comment
    movie: Movie | None = None
