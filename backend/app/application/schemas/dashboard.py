"""Pydantic DTOs for the dashboard summary."""

from pydantic import BaseModel

from app.application.schemas.donation import DonationResponse
from app.application.schemas.medical_donation import MedicalDonationResponse


class DonationTotals(BaseModel):
    amount: float
    percentage_change: int


class MemberTotals(BaseModel):
    total: int
    new_this_month: int


class ClientTotals(BaseModel):
    total: int
    new_this_week: int


class DashboardResponse(BaseModel):
    total_donations: DonationTotals
    medical_donation_count: int
    life_members: MemberTotals
    active_clients: ClientTotals
    recent_donations: list[DonationResponse]
    recent_medical_donations: list[MedicalDonationResponse]
