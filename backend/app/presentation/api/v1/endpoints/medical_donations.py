"""Medical donation endpoints."""

from fastapi import APIRouter, Depends, Query, status

from app.application.schemas import (
    ApiResponse,
    MedicalDonationCreate,
    MedicalDonationResponse,
    MedicalDonationStatsResponse,
    MedicalDonationUpdate,
    StatusUpdate,
)
from app.application.services import MedicalDonationService
from app.application.services.medical_donation_service import MAX_LOOKAHEAD_DAYS
from app.infrastructure.dependencies import get_medical_donation_service

router = APIRouter(prefix="/medical-donations", tags=["Medical Donations"])


def _listing(donations) -> ApiResponse[list[MedicalDonationResponse]]:
    data = [MedicalDonationResponse.model_validate(d, from_attributes=True) for d in donations]
    return ApiResponse(count=len(data), data=data)


def _single(donation, message: str | None = None) -> ApiResponse[MedicalDonationResponse]:
    return ApiResponse(
        message=message,
        data=MedicalDonationResponse.model_validate(donation, from_attributes=True),
    )


@router.get("", response_model=ApiResponse[list[MedicalDonationResponse]])
async def list_medical_donations(
    service: MedicalDonationService = Depends(get_medical_donation_service),
) -> ApiResponse[list[MedicalDonationResponse]]:
    return _listing(await service.list_donations())


@router.get("/stats", response_model=ApiResponse[MedicalDonationStatsResponse])
async def medical_donation_stats(
    service: MedicalDonationService = Depends(get_medical_donation_service),
) -> ApiResponse[MedicalDonationStatsResponse]:
    stats = await service.get_stats()
    return ApiResponse(
        data=MedicalDonationStatsResponse.model_validate(stats, from_attributes=True)
    )


@router.get("/expiring", response_model=ApiResponse[list[MedicalDonationResponse]])
async def expiring_donations(
    days: int = Query(30, ge=0, le=MAX_LOOKAHEAD_DAYS, description="Look-ahead window in days"),
    service: MedicalDonationService = Depends(get_medical_donation_service),
) -> ApiResponse[list[MedicalDonationResponse]]:
    return _listing(await service.list_expiring(days))


@router.get("/expired", response_model=ApiResponse[list[MedicalDonationResponse]])
async def expired_donations(
    service: MedicalDonationService = Depends(get_medical_donation_service),
) -> ApiResponse[list[MedicalDonationResponse]]:
    return _listing(await service.list_expired())


@router.get("/status/{donation_status}", response_model=ApiResponse[list[MedicalDonationResponse]])
async def donations_by_status(
    donation_status: str,
    service: MedicalDonationService = Depends(get_medical_donation_service),
) -> ApiResponse[list[MedicalDonationResponse]]:
    return _listing(await service.list_by_status(donation_status))


@router.get("/donor/{donor_id}", response_model=ApiResponse[list[MedicalDonationResponse]])
async def donations_by_donor(
    donor_id: int,
    service: MedicalDonationService = Depends(get_medical_donation_service),
) -> ApiResponse[list[MedicalDonationResponse]]:
    return _listing(await service.list_by_donor(donor_id))


@router.get("/{donation_id}", response_model=ApiResponse[MedicalDonationResponse])
async def get_medical_donation(
    donation_id: int,
    service: MedicalDonationService = Depends(get_medical_donation_service),
) -> ApiResponse[MedicalDonationResponse]:
    return _single(await service.get_donation(donation_id))


@router.post(
    "",
    response_model=ApiResponse[MedicalDonationResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_medical_donation(
    data: MedicalDonationCreate,
    service: MedicalDonationService = Depends(get_medical_donation_service),
) -> ApiResponse[MedicalDonationResponse]:
    donation = await service.create_donation(data)
    return _single(donation, "Medical donation created successfully")


@router.put("/{donation_id}", response_model=ApiResponse[MedicalDonationResponse])
async def update_medical_donation(
    donation_id: int,
    data: MedicalDonationUpdate,
    service: MedicalDonationService = Depends(get_medical_donation_service),
) -> ApiResponse[MedicalDonationResponse]:
    donation = await service.update_donation(donation_id, data)
    return _single(donation, "Medical donation updated successfully")


@router.patch("/{donation_id}/status", response_model=ApiResponse[MedicalDonationResponse])
async def update_medical_donation_status(
    donation_id: int,
    data: StatusUpdate,
    service: MedicalDonationService = Depends(get_medical_donation_service),
) -> ApiResponse[MedicalDonationResponse]:
    donation = await service.update_status(donation_id, data.status)
    return _single(donation, "Status updated successfully")


@router.delete("/{donation_id}", response_model=ApiResponse[None])
async def delete_medical_donation(
    donation_id: int,
    service: MedicalDonationService = Depends(get_medical_donation_service),
) -> ApiResponse[None]:
    await service.delete_donation(donation_id)
    return ApiResponse(message="Medical donation deleted successfully")
