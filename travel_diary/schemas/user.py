"""
Travel Diary Backend — User Request/Response Schemas
=====================================================

What:  Pydantic models for the /users endpoints.

Request fields accept any JSON value: the API checks neither presence nor
type. An omitted field reaches the database as NULL and the NOT NULL
constraint rejects it (400 with the storage message); any other scalar is
stored with SQLite's column affinity (TEXT turns 123 into '123').

Response fields other than `id` are untyped for the same reason: POST echoes
the values it was given, and GET returns whatever the row holds.
"""

from typing import Any

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Body of POST /users."""
    username: Any = Field(default=None, description="Display name of the author")
    email: Any = Field(default=None, description="Contact e-mail of the author")


class UserResponse(BaseModel):
    """
    What:  A `users` row as returned by GET /users, GET /users/{id} and
           POST /users (201).
    """
    id: int = Field(description="Storage-assigned identifier")
    username: Any = Field(description="Display name of the author")
    email: Any = Field(description="Contact e-mail of the author")

    model_config = {"from_attributes": True}
