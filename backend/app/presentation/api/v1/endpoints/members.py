"""Life member endpoints. Every write spans the donors and life_members tables."""

from datetime import date

from fastapi import APIRouter, Depends, Query, status

from app.application.schemas import (
    ApiResponse,
    LifeMemberCreate,
    LifeMemberResponse,
    LifeMemberUpdate,
    MemberCreatedResponse,
)
from app.application.services import MemberService
from app.infrastructure.dependencies import get_member_service

router = APIRouter(prefix="/members", tags=["Life Members"])


@router.get("", response_model=ApiResponse[list[LifeMemberResponse]])
async def list_members(
    search: str | None = Query(None, description="Match on name or email"),
    status_filter: str | None = Query(None, alias="status", description="Active, Inactive or All"),
    start_date: date | None = Query(None),
    end_date: date | None = Query(None),
    service: MemberService = Depends(get_member_service),
) -> ApiResponse[list[LifeMemberResponse]]:
    members = await service.list_members(
        search=search,
        status=status_filter,
        start_date=start_date,
        end_date=end_date,
    )
    data = [LifeMemberResponse.model_validate(m, from_attributes=True) for m in members]
    return ApiResponse(count=len(data), data=data)


@router.get("/{member_id}", response_model=ApiResponse[LifeMemberResponse])
async def get_member(
    member_id: int,
    service: MemberService = Depends(get_member_service),
) -> ApiResponse[LifeMemberResponse]:
    member = await service.get_member(member_id)
    return ApiResponse(data=LifeMemberResponse.model_validate(member, from_attributes=True))


@router.post(
    "",
    response_model=ApiResponse[MemberCreatedResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_member(
    data: LifeMemberCreate,
    service: MemberService = Depends(get_member_service),
) -> ApiResponse[MemberCreatedResponse]:
    """Create the donor row and the membership row together."""
    created = await service.create_member(data)
    return ApiResponse(
        message="Life member created successfully",
        data=MemberCreatedResponse.model_validate(created, from_attributes=True),
    )


@router.put("/{member_id}", response_model=ApiResponse[LifeMemberResponse])
async def update_member(
    member_id: int,
    data: LifeMemberUpdate,
    service: MemberService = Depends(get_member_service),
) -> ApiResponse[LifeMemberResponse]:
    member = await service.update_member(member_id, data)
    return ApiResponse(
        message="Life member updated successfully",
        data=LifeMemberResponse.model_validate(member, from_attributes=True),
    )


@router.patch("/{member_id}/deactivate", response_model=ApiResponse[LifeMemberResponse])
async def deactivate_member(
    member_id: int,
    service: MemberService = Depends(get_member_service),
) -> ApiResponse[LifeMemberResponse]:
    member = await service.deactivate_member(member_id)
    return ApiResponse(
        message="Life member deactivated successfully",
        data=LifeMemberResponse.model_validate(member, from_attributes=True),
    )


@router.delete("/{member_id}", response_model=ApiResponse[None])
async def delete_member(
    member_id: int,
    service: MemberService = Depends(get_member_service),
) -> ApiResponse[None]:
    await service.delete_member(member_id)
    return ApiResponse(message="Life member deleted successfully")
