# This file defines schema pieces shared by both resources.

from __future__ import annotations

from pydantic import BaseModel, Field


class PagingMetadata(BaseModel):
    limit: int = Field(ge=1)
    offset: int = Field(ge=0)
    total: int = Field(ge=0)
