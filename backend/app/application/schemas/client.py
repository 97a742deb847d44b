"""Pydantic DTOs for the Client feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class ClientCreate(BaseModel):
    """Schema for creating a new client."""

    name: str = Field(..., examples=["Ravi Kumar"])
    age: int | None = None
    gender: str | None = Field(None, examples=["Male"])
    phone: str | None = None
    address: str
    city: str
    state: str
    zip: str
    aadhaar: str = Field(..., examples=["123456789012"])
    status: str | None = None
    notes: str | None = None


class ClientUpdate(BaseModel):
    """Schema for updating a client. All fields are optional. ``aadhaar`` is rejected."""

    name: str | None = None
    age: int | None = None
    gender: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    aadhaar: str | None = None
    status: str | None = None
    notes: str | None = None


class ClientResponse(BaseModel):
    id: int
    name: str
    age: int | None
    gender: str | None
    phone: str | None
    address: str
    city: str
    state: str
    zip: str
    aadhaar: str
    status: str
    notes: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
