# This file defines request and response models for the authors resource.

from __future__ import annotations

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator

from src.api.schemas.common import PagingMetadata


class AuthorInput(BaseModel):
    """Body for both create and full-replace update."""

    name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=1, max_length=200)

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, value: str) -> str:
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as exc:
            raise ValueError(f"invalid email: {exc}") from exc
        return value


class AuthorResponse(BaseModel):
    id: int
    name: str
    email: str


class AuthorListResponse(BaseModel):
    data: list[AuthorResponse]
    paging: PagingMetadata
