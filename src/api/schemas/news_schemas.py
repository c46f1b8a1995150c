# This file defines request and response models for the news resource.
# Wire names are camelCase (`authorId`); Python attributes stay snake_case.

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.api.schemas.author_schemas import AuthorResponse
from src.api.schemas.common import PagingMetadata


class NewsCreateInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    title: str = Field(min_length=1, max_length=200)
    excerpt: str = Field(min_length=1, max_length=500)
    content: str = Field(min_length=1)
    author_id: int = Field(gt=0, alias="authorId")
    published: bool = False
    slug: str | None = Field(default=None, min_length=1, max_length=200)


class NewsUpdateInput(BaseModel):
    """Partial update; only fields present in the body are applied."""

    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    title: str | None = Field(default=None, min_length=1, max_length=200)
    excerpt: str | None = Field(default=None, min_length=1, max_length=500)
    content: str | None = Field(default=None, min_length=1)
    author_id: int | None = Field(default=None, gt=0, alias="authorId")
    published: bool | None = None
    slug: str | None = Field(default=None, min_length=1, max_length=200)

    @model_validator(mode="after")
    def reject_explicit_nulls(self) -> NewsUpdateInput:
        null_fields = sorted(name for name in self.model_fields_set if getattr(self, name) is None)
        if null_fields:
            raise ValueError(f"fields cannot be null: {', '.join(null_fields)}")
        return self

    def supplied_fields(self) -> dict[str, object]:
        return {name: getattr(self, name) for name in self.model_fields_set}


class NewsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    slug: str
    title: str
    excerpt: str
    content: str
    published: bool
    author_id: int = Field(alias="authorId")
    author: AuthorResponse


class NewsListResponse(BaseModel):
    data: list[NewsResponse]
    paging: PagingMetadata
