"""Aid distribution endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Query, status

from app.application.schemas import (
    ApiResponse,
    DistributionCreate,
    DistributionResponse,
    DistributionStatsResponse,
    DistributionUpdate,
    StatusUpdate,
)
from app.application.services import DistributionService
from app.infrastructure.dependencies import get_distribution_service

router = APIRouter(prefix="/distributions", tags=["Distributions"])


def _single(distribution, message: str | None = None) -> ApiResponse[DistributionResponse]:
    return ApiResponse(
        message=message,
        data=DistributionResponse.model_validate(distribution, from_attributes=True),
    )


@router.get("", response_model=ApiResponse[list[DistributionResponse]])
async def list_distributions(
    client_id: int | None = Query(None),
    assistance_type: str | None = Query(None),
    status_filter: str | None = Query(None, alias="status"),
    start_date: date | None = Query(None),
    end_date: date | None = Query(None),
    search: str | None = Query(None, description="Match on client name, phone or description"),
    service: DistributionService = Depends(get_distribution_service),
) -> ApiResponse[list[DistributionResponse]]:
    distributions = await service.list_distributions(
        client_id=client_id,
        assistance_type=assistance_type,
        status=status_filter,
        start_date=start_date,
        end_date=end_date,
        search=search,
    )
    data = [DistributionResponse.model_validate(d, from_attributes=True) for d in distributions]
    return ApiResponse(count=len(data), data=data)


@router.get("/stats", response_model=ApiResponse[DistributionStatsResponse])
async def distribution_stats(
    service: DistributionService = Depends(get_distribution_service),
) -> ApiResponse[DistributionStatsResponse]:
    stats = await service.get_stats()
    return ApiResponse(data=DistributionStatsResponse.model_validate(stats, from_attributes=True))


@router.get("/client/{client_id}", response_model=ApiResponse[list[DistributionResponse]])
async def distributions_by_client(
    client_id: int,
    service: DistributionService = Depends(get_distribution_service),
) -> ApiResponse[list[DistributionResponse]]:
    distributions = await service.list_by_client(client_id)
    data = [DistributionResponse.model_validate(d, from_attributes=True) for d in distributions]
    return ApiResponse(count=len(data), data=data)


@router.get("/{distribution_id}", response_model=ApiResponse[DistributionResponse])
async def get_distribution(
    distribution_id: int,
    service: DistributionService = Depends(get_distribution_service),
) -> ApiResponse[DistributionResponse]:
    return _single(await service.get_distribution(distribution_id))


@router.post(
    "",
    response_model=ApiResponse[DistributionResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_distribution(
    data: DistributionCreate,
    service: DistributionService = Depends(get_distribution_service),
) -> ApiResponse[DistributionResponse]:
    distribution = await service.create_distribution(data)
    return _single(distribution, "Distribution created successfully")


@router.put("/{distribution_id}", response_model=ApiResponse[DistributionResponse])
async def update_distribution(
    distribution_id: int,
    data: DistributionUpdate,
    service: DistributionService = Depends(get_distribution_service),
) -> ApiResponse[DistributionResponse]:
    distribution = await service.update_distribution(distribution_id, data)
    return _single(distribution, "Distribution updated successfully")


@router.patch("/{distribution_id}/status", response_model=ApiResponse[DistributionResponse])
async def update_distribution_status(
    distribution_id: int,
    data: StatusUpdate,
    service: DistributionService = Depends(get_distribution_service),
) -> ApiResponse[DistributionResponse]:
    distribution = await service.update_status(distribution_id, data.status)
    return _single(distribution, "Status updated successfully")


@router.delete("/{distribution_id}", response_model=ApiResponse[None])
async def delete_distribution(
    distribution_id: int,
    service: DistributionService = Depends(get_distribution_service),
) -> ApiResponse[None]:
    await service.delete_distribution(distribution_id)
    return ApiResponse(message="Distribution deleted successfully")
