"""
Travel Diary Backend — Diary Entry Request/Response Schemas
============================================================

What:  Pydantic models for GET /entries and POST /diaryentries.
Who:   EntryService builds `EntryResponse` objects; routes use them as
       `response_model`.

The create payload mirrors the other create schemas: every field accepts
any JSON value and the storage layer decides what is acceptable. An
author_id or location_id that is missing, or that matches no row (1.5,
"abc"), surfaces as the 404 "Author or location not found" rather than a
validation error.
"""

from typing import Any

from pydantic import BaseModel, Field


class EntryCreate(BaseModel):
    """Body of POST /diaryentries."""
    title: Any = Field(default=None, description="Entry headline")
    content: Any = Field(default=None, description="Free-form diary text")
    author_id: Any = Field(default=None, description="users.id of the author")
    location_id: Any = Field(default=None, description="locations.id of the place")


class EntryResponse(BaseModel):
    """
    What:  An `entries` row. POST /diaryentries returns the full row
           including the storage-assigned id.
    """
    id: int = Field(description="Storage-assigned identifier")
    title: Any = Field(description="Entry headline")
    content: Any = Field(description="Free-form diary text")
    author_id: Any = Field(description="users.id of the author")
    location_id: Any = Field(description="locations.id of the place")

    model_config = {"from_attributes": True}
