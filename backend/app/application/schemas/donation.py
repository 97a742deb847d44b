"""Pydantic DTOs for monetary donations."""

import datetime as dt

from pydantic import BaseModel, Field


class DonationCreate(BaseModel):
    """Schema for recording a donation. Either ``donor_id`` or ``donor_name`` is required."""

    donor_id: int | None = None
    donor_name: str | None = Field(None, examples=["Anonymous Well-wisher"])
    amount: float = Field(..., examples=[5000])
    date: dt.date
    payment_mode: str = Field(..., examples=["UPI"])
    purpose: str = Field(..., examples=["General Fund"])
    status: str | None = None
    notes: str | None = None


class DonationUpdate(BaseModel):
    donor_id: int | None = None
    donor_name: str | None = None
    amount: float | None = None
    date: dt.date | None = None
    payment_mode: str | None = None
    purpose: str | None = None
    status: str | None = None
    notes: str | None = None


class DonationResponse(BaseModel):
    id: int
    donor_id: int
    donor_name: str | None
    donor_type: str | None
    donor_email: str | None
    donor_phone: str | None
    amount: float
    date: dt.date
    payment_mode: str
    purpose: str
    status: str
    notes: str | None
    created_at: dt.datetime
    updated_at: dt.datetime

    model_config = {"from_attributes": True}


class DonationStatsResponse(BaseModel):
    total_amount: float
    total_count: int
    completed_count: int
    pending_count: int
    monthly_amount: float

    model_config = {"from_attributes": True}
