"""Concrete repository implementation for Client backed by SQLAlchemy."""

from typing import Any

from sqlalchemy import delete, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import ClientRepository
from app.domain.entities import Client, ClientStatus, Gender
from app.domain.exceptions import DuplicateEntityError
from app.infrastructure.database.models import ClientModel
from app.infrastructure.database.repositories._partial_update import apply_partial_update


class SQLAlchemyClientRepository(ClientRepository):
    """Implements the ClientRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ClientModel) -> Client:
        """Map ORM model → domain entity."""
        return Client(
            id=model.id,
            name=model.name,
            age=model.age,
            gender=Gender(model.gender) if model.gender else None,
            phone=model.phone,
            address=model.address,
            city=model.city,
            state=model.state,
            zip=model.zip,
            aadhaar=model.aadhaar,
            status=ClientStatus(model.status),
            notes=model.notes,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Client) -> ClientModel:
        """Map domain entity → ORM model (for creation)."""
        return ClientModel(
            name=entity.name,
            age=entity.age,
            gender=entity.gender.value if entity.gender else None,
            phone=entity.phone,
            address=entity.address,
            city=entity.city,
            state=entity.state,
            zip=entity.zip,
            aadhaar=entity.aadhaar,
            status=entity.status.value,
            notes=entity.notes,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, client_id: int) -> Client | None:
        result = await self._session.get(ClientModel, client_id)
        return self._to_entity(result) if result else None

    async def get_all(
        self,
        *,
        search: str | None = None,
        status: str | None = None,
    ) -> list[Client]:
        stmt = select(ClientModel)

        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(
                    ClientModel.name.ilike(pattern),
                    ClientModel.city.ilike(pattern),
                    ClientModel.address.ilike(pattern),
                )
            )
        if status:
            stmt = stmt.where(ClientModel.status == status)

        stmt = stmt.order_by(ClientModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def aadhaar_in_use(self, aadhaar: str) -> bool:
        stmt = select(ClientModel.id).where(ClientModel.aadhaar == aadhaar).limit(1)
        return (await self._session.execute(stmt)).first() is not None

    async def create(self, client: Client) -> Client:
        model = self._to_model(client)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            if "aadhaar" in str(exc.orig).lower():
                raise DuplicateEntityError("Client", "Aadhaar", client.aadhaar) from exc
            raise
        return self._to_entity(model)

    async def update_fields(self, client_id: int, changes: dict[str, Any]) -> bool:
        return await apply_partial_update(self._session, ClientModel, client_id, changes)

    async def delete(self, client_id: int) -> bool:
        result = await self._session.execute(delete(ClientModel).where(ClientModel.id == client_id))
        return result.rowcount > 0
