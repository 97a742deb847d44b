"""Application service (use case) for Client operations."""

import logging

from app.application.interfaces import ClientRepository
from app.application.partial_update import FieldSpec, PartialUpdateBuilder
from app.application.schemas.client import ClientCreate, ClientUpdate
from app.domain.entities import Client, ClientStatus, Gender
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from app.domain.status_rules import ensure_not_frozen
from app.domain.validators import (
    aadhaar_number,
    non_empty_text,
    non_negative_int,
    one_of,
    optional_text,
    phone_number,
)

logger = logging.getLogger(__name__)

CLIENT_FIELDS = PartialUpdateBuilder(
    "Client",
    FieldSpec("name", non_empty_text),
    FieldSpec("age", non_negative_int, nullable=True),
    FieldSpec("gender", one_of(Gender), nullable=True),
    FieldSpec("phone", phone_number, nullable=True),
    FieldSpec("address", non_empty_text),
    FieldSpec("city", non_empty_text),
    FieldSpec("state", non_empty_text),
    FieldSpec("zip", non_empty_text),
    FieldSpec("status", one_of(ClientStatus)),
    FieldSpec("notes", optional_text, nullable=True),
    immutable=("aadhaar",),
)


class ClientService:
    """Orchestrates client CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ClientRepository):
        self._repository = repository

    async def get_client(self, client_id: int) -> Client:
        client = await self._repository.get_by_id(client_id)
        if client is None:
            raise EntityNotFoundError("Client", client_id)
        return client

    async def list_clients(
        self, *, search: str | None = None, status: str | None = None
    ) -> list[Client]:
        if status == "All":
            status = None
        return await self._repository.get_all(search=search, status=status)

    async def create_client(self, data: ClientCreate) -> Client:
        client = Client(
            name=non_empty_text("name", data.name),
            address=non_empty_text("address", data.address),
            city=non_empty_text("city", data.city),
            state=non_empty_text("state", data.state),
            zip=non_empty_text("zip", data.zip),
            aadhaar=aadhaar_number("aadhaar", data.aadhaar),
            age=non_negative_int("age", data.age) if data.age is not None else None,
            gender=one_of(Gender)("gender", data.gender) if data.gender else None,
            phone=phone_number("phone", data.phone) if data.phone else None,
            status=one_of(ClientStatus)("status", data.status) if data.status else ClientStatus.ACTIVE,
            notes=optional_text("notes", data.notes),
        )
        if await self._repository.aadhaar_in_use(client.aadhaar):
            raise DuplicateEntityError("Client", "Aadhaar", client.aadhaar)

        created = await self._repository.create(client)
        logger.info("Created client %s", created.id)
        return created

    async def update_client(self, client_id: int, data: ClientUpdate) -> Client:
        """Apply only the supplied fields. A Dead client can no longer be changed."""
        current = await self.get_client(client_id)
        ensure_not_frozen("Client", current.status)

        changes = CLIENT_FIELDS.stage(data.model_dump(exclude_unset=True))
        if not await self._repository.update_fields(client_id, changes):
            raise EntityNotFoundError("Client", client_id)

        logger.info("Updated client %s fields=%s", client_id, sorted(changes))
        return await self.get_client(client_id)

    async def deactivate_client(self, client_id: int) -> Client:
        """Soft delete: status becomes Inactive."""
        current = await self.get_client(client_id)
        ensure_not_frozen("Client", current.status)

        await self._repository.update_fields(client_id, {"status": ClientStatus.INACTIVE.value})
        return await self.get_client(client_id)

    async def delete_client(self, client_id: int) -> None:
        if not await self._repository.delete(client_id):
            raise EntityNotFoundError("Client", client_id)
        logger.info("Deleted client %s", client_id)
