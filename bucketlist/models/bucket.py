"""Bucket models: the authoritative record and the context shared by a board."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field, field_validator

BucketId = int | str


class BucketRecord(BaseModel):
    """One bucket as the remote store returns it. Wire names are camelCase."""

    model_config = {"populate_by_name": True, "frozen": True}

    id: BucketId
    title: str = ""
    image_url: str | None = Field(default=None, alias="imageUrl")
    fixed_todo_id: BucketId | None = Field(default=None, alias="fixedTodoId")
    todo_all: int = Field(default=0, ge=0, alias="todoAll")
    todo_completed: int = Field(default=0, ge=0, alias="todoCompleted")

    @field_validator("title", mode="before")
    @classmethod
    def _null_title(cls, value: object) -> object:
        return "" if value is None else value


@dataclass(frozen=True)
class BoardContext:
    """
    Read-only context handed to every bucket controller on a board.

    just_created_id is the id of the bucket the user created most recently;
    that bucket starts expanded.
    """

    just_created_id: BucketId | None = None
