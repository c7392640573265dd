"""Request bodies for categories and tags."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CreateCategoryRequest(BaseModel):
    """Body for creating a category."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    name: str = Field(..., description="Category name.", min_length=1, max_length=200)
    description: str | None = None
    slug: str | None = Field(default=None, max_length=200)
    parent: int | None = Field(default=None, description="Parent category ID.", ge=0)


class UpdateCategoryRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    id: int = Field(..., description="Category ID.", ge=1)
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    slug: str | None = Field(default=None, max_length=200)
    parent: int | None = Field(default=None, ge=0)


class CreateTagRequest(BaseModel):
    """Body for creating a tag."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    name: str = Field(..., description="Tag name.", min_length=1, max_length=200)
    description: str | None = None
    slug: str | None = Field(default=None, max_length=200)


class UpdateTagRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    id: int = Field(..., description="Tag ID.", ge=1)
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    slug: str | None = Field(default=None, max_length=200)
