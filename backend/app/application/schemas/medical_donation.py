"""Pydantic DTOs for medical donations."""

from datetime import date, datetime

from pydantic import BaseModel, Field


class MedicalDonationCreate(BaseModel):
    donor_id: int | None = None
    donor_name: str | None = None
    item_name: str = Field(..., examples=["Paracetamol"])
    category: str = Field(..., examples=["Medicine"])
    strength: str | None = Field(None, examples=["500mg"])
    quantity: int
    expiry_date: date | None = None
    status: str | None = None


class MedicalDonationUpdate(BaseModel):
    donor_id: int | None = None
    donor_name: str | None = None
    item_name: str | None = None
    category: str | None = None
    strength: str | None = None
    quantity: int | None = None
    expiry_date: date | None = None
    status: str | None = None


class StatusUpdate(BaseModel):
    status: str


class MedicalDonationResponse(BaseModel):
    id: int
    donor_id: int
    donor_name: str | None
    donor_email: str | None
    donor_phone: str | None
    item_name: str
    category: str
    strength: str | None
    quantity: int
    expiry_date: date | None
    status: str
    donation_date: date
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class MedicalDonationStatsResponse(BaseModel):
    total_donations: int
    total_quantity: int
    unique_donors: int
    pending_count: int
    approved_count: int
    collected_count: int
    rejected_count: int
    expired_count: int
    expiring_soon_count: int

    model_config = {"from_attributes": True}
