"""
Travel Diary Backend — Location Request/Response Schemas
=========================================================

Same rule as the user schemas: values are not type-checked here. SQLite's
REAL affinity stores numeric input (including numeric strings) as a float
and keeps anything else as given.
"""

from typing import Any

from pydantic import BaseModel, Field


class LocationCreate(BaseModel):
    """Body of POST /locations. Missing fields are left to the NOT NULL constraints."""
    name: Any = Field(default=None, description="Place name, e.g. 'Paris'")
    latitude: Any = Field(default=None, description="Decimal degrees")
    longitude: Any = Field(default=None, description="Decimal degrees")


class LocationResponse(BaseModel):
    id: int = Field(description="Storage-assigned identifier")
    name: Any = Field(description="Place name")
    latitude: Any = Field(description="Decimal degrees")
    longitude: Any = Field(description="Decimal degrees")

    model_config = {"from_attributes": True}
