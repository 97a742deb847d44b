"""Pydantic DTOs for aid distributions."""

from datetime import date, datetime

from pydantic import BaseModel, Field


class DistributionCreate(BaseModel):
    client_id: int
    assistance_type: str = Field(..., examples=["money"])
    amount: float | None = None
    quantity: int | None = None
    unit: str | None = None
    description: str | None = None
    assistance_date: date
    status: str | None = None


class DistributionUpdate(BaseModel):
    client_id: int | None = None
    assistance_type: str | None = None
    amount: float | None = None
    quantity: int | None = None
    unit: str | None = None
    description: str | None = None
    assistance_date: date | None = None
    status: str | None = None


class DistributionResponse(BaseModel):
    id: int
    client_id: int
    client_name: str | None
    client_phone: str | None
    client_city: str | None
    client_state: str | None
    assistance_type: str
    amount: float | None
    quantity: int | None
    unit: str | None
    description: str | None
    assistance_date: date
    status: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class DistributionStatsResponse(BaseModel):
    total_distributions: int
    provided_count: int
    pending_count: int
    cancelled_count: int
    total_money_distributed: float
    total_medicine_distributed: int
    total_equipment_distributed: int

    model_config = {"from_attributes": True}
