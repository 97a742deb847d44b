"""Monetary donation endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Query, status

from app.application.schemas import (
    ApiResponse,
    DonationCreate,
    DonationResponse,
    DonationStatsResponse,
    DonationUpdate,
)
from app.application.services import DonationService, MemberService
from app.infrastructure.dependencies import get_donation_service, get_member_service

router = APIRouter(prefix="/donations", tags=["Donations"])


def _to_response(donations) -> list[DonationResponse]:
    return [DonationResponse.model_validate(d, from_attributes=True) for d in donations]


@router.get("/stats", response_model=ApiResponse[DonationStatsResponse])
async def donation_stats(
    month: int | None = Query(None, ge=1, le=12),
    year: int | None = Query(None, ge=1900),
    service: DonationService = Depends(get_donation_service),
) -> ApiResponse[DonationStatsResponse]:
    stats = await service.get_stats(month, year)
    return ApiResponse(data=DonationStatsResponse.model_validate(stats, from_attributes=True))


@router.get("", response_model=ApiResponse[list[DonationResponse]])
async def list_donations(
    status_filter: str | None = Query(None, alias="status"),
    search: str | None = Query(None, description="Match on donor name or purpose"),
    start_date: date | None = Query(None),
    end_date: date | None = Query(None),
    donor_type: str | None = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=500),
    service: DonationService = Depends(get_donation_service),
) -> ApiResponse[list[DonationResponse]]:
    donations = await service.list_donations(
        status=status_filter,
        search=search,
        start_date=start_date,
        end_date=end_date,
        donor_type=donor_type,
        skip=skip,
        limit=limit,
    )
    data = _to_response(donations)
    return ApiResponse(count=len(data), data=data)


@router.get("/donor/{donor_id}", response_model=ApiResponse[list[DonationResponse]])
async def donations_by_donor(
    donor_id: int,
    service: DonationService = Depends(get_donation_service),
) -> ApiResponse[list[DonationResponse]]:
    data = _to_response(await service.list_by_donor(donor_id))
    return ApiResponse(count=len(data), data=data)


@router.get("/life-member/{member_id}", response_model=ApiResponse[list[DonationResponse]])
async def donations_by_life_member(
    member_id: int,
    service: MemberService = Depends(get_member_service),
) -> ApiResponse[list[DonationResponse]]:
    _, donations = await service.list_member_donations(member_id)
    data = _to_response(donations)
    return ApiResponse(count=len(data), data=data)


@router.get("/{donation_id}", response_model=ApiResponse[DonationResponse])
async def get_donation(
    donation_id: int,
    service: DonationService = Depends(get_donation_service),
) -> ApiResponse[DonationResponse]:
    donation = await service.get_donation(donation_id)
    return ApiResponse(data=DonationResponse.model_validate(donation, from_attributes=True))


@router.post("", response_model=ApiResponse[DonationResponse], status_code=status.HTTP_201_CREATED)
async def create_donation(
    data: DonationCreate,
    service: DonationService = Depends(get_donation_service),
) -> ApiResponse[DonationResponse]:
    """Record a donation; an unknown ``donor_name`` creates a new Individual donor."""
    donation = await service.create_donation(data)
    return ApiResponse(
        message="Donation created successfully",
        data=DonationResponse.model_validate(donation, from_attributes=True),
    )


@router.put("/{donation_id}", response_model=ApiResponse[DonationResponse])
async def update_donation(
    donation_id: int,
    data: DonationUpdate,
    service: DonationService = Depends(get_donation_service),
) -> ApiResponse[DonationResponse]:
    donation = await service.update_donation(donation_id, data)
    return ApiResponse(
        message="Donation updated successfully",
        data=DonationResponse.model_validate(donation, from_attributes=True),
    )


@router.delete("/{donation_id}", response_model=ApiResponse[None])
async def delete_donation(
    donation_id: int,
    service: DonationService = Depends(get_donation_service),
) -> ApiResponse[None]:
    await service.delete_donation(donation_id)
    return ApiResponse(message="Donation deleted successfully")
