"""Pydantic DTOs for the life member (Donor + LifeMember) feature."""

from datetime import date, datetime, time

from pydantic import BaseModel, Field


class LifeMemberCreate(BaseModel):
    """Schema for registering a new life member."""

    name: str = Field(..., examples=["Asha Menon"])
    email: str = Field(..., examples=["asha@example.org"])
    phone: str | None = Field(None, examples=["9876543210"])
    address: str | None = None
    aadhar_number: str | None = Field(None, examples=["123456789012"])
    join_date: date
    join_time: time | None = None


class LifeMemberUpdate(BaseModel):
    """Schema for updating a life member. All fields are optional.

    ``aadhar_number``, ``join_date`` and ``join_time`` are accepted only so
    that an attempt to change them can be rejected explicitly.
    """

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    membership_status: str | None = None
    aadhar_number: str | None = None
    join_date: date | None = None
    join_time: time | None = None


class LifeMemberResponse(BaseModel):
    id: int
    donor_id: int
    name: str
    email: str | None
    phone: str | None
    address: str | None
    donor_status: str
    aadhar_number: str | None
    join_date: date
    join_time: time | None
    membership_status: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class MemberCreatedResponse(BaseModel):
    member_id: int
    donor_id: int

    model_config = {"from_attributes": True}
