"""Client (beneficiary) endpoints."""

from fastapi import APIRouter, Depends, Query, status

from app.application.schemas import ApiResponse, ClientCreate, ClientResponse, ClientUpdate
from app.application.services import ClientService
from app.infrastructure.dependencies import get_client_service

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.get("", response_model=ApiResponse[list[ClientResponse]])
async def list_clients(
    search: str | None = Query(None, description="Match on name, city or address"),
    status_filter: str | None = Query(None, alias="status"),
    service: ClientService = Depends(get_client_service),
) -> ApiResponse[list[ClientResponse]]:
    clients = await service.list_clients(search=search, status=status_filter)
    data = [ClientResponse.model_validate(c, from_attributes=True) for c in clients]
    return ApiResponse(count=len(data), data=data)


@router.get("/{client_id}", response_model=ApiResponse[ClientResponse])
async def get_client(
    client_id: int,
    service: ClientService = Depends(get_client_service),
) -> ApiResponse[ClientResponse]:
    client = await service.get_client(client_id)
    return ApiResponse(data=ClientResponse.model_validate(client, from_attributes=True))


@router.post("", response_model=ApiResponse[ClientResponse], status_code=status.HTTP_201_CREATED)
async def create_client(
    data: ClientCreate,
    service: ClientService = Depends(get_client_service),
) -> ApiResponse[ClientResponse]:
    client = await service.create_client(data)
    return ApiResponse(
        message="Client created successfully",
        data=ClientResponse.model_validate(client, from_attributes=True),
    )


@router.put("/{client_id}", response_model=ApiResponse[ClientResponse])
async def update_client(
    client_id: int,
    data: ClientUpdate,
    service: ClientService = Depends(get_client_service),
) -> ApiResponse[ClientResponse]:
    """Partial update; only the fields present in the body are written."""
    client = await service.update_client(client_id, data)
    return ApiResponse(
        message="Client updated successfully",
        data=ClientResponse.model_validate(client, from_attributes=True),
    )


@router.patch("/{client_id}/deactivate", response_model=ApiResponse[ClientResponse])
async def deactivate_client(
    client_id: int,
    service: ClientService = Depends(get_client_service),
) -> ApiResponse[ClientResponse]:
    client = await service.deactivate_client(client_id)
    return ApiResponse(
        message="Client deactivated successfully",
        data=ClientResponse.model_validate(client, from_attributes=True),
    )


@router.delete("/{client_id}", response_model=ApiResponse[None])
async def delete_client(
    client_id: int,
    service: ClientService = Depends(get_client_service),
) -> ApiResponse[None]:
    await service.delete_client(client_id)
    return ApiResponse(message="Client deleted successfully")
