"""Pydantic models (response schemas) for the API."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class CreateResponse(BaseModel):
    """Returned after storing active games."""

    inserted_count: int = Field(..., description="Number of records stored")
    inserted_ids: List[str] = Field(default_factory=list)


class UpdateResponse(BaseModel):
    """Returned after an update; zero matches is still a success."""

    matched_count: int
    modified_count: int


class DeleteResponse(BaseModel):
    """Returned after a delete; zero matches is still a success."""

    deleted_count: int


class ErrorResponse(BaseModel):
    """Body of any handled error."""

    error: str = Field(..., description="Error code, e.g. PROFILE_NOT_FOUND")
    detail: str = ""
