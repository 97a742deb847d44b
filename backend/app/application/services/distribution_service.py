"""Application service (use case) for aid distributions."""

import logging
from datetime import date

from app.application.interfaces import ClientRepository, DistributionRepository
from app.application.partial_update import FieldSpec, PartialUpdateBuilder
from app.application.schemas.distribution import DistributionCreate, DistributionUpdate
from app.domain.entities import (
    AssistanceType,
    Distribution,
    DistributionStats,
    DistributionStatus,
)
from app.domain.exceptions import EntityNotFoundError, FieldValidationError
from app.domain.status_rules import ensure_status_change_allowed
from app.domain.validators import (
    calendar_date,
    one_of,
    optional_text,
    positive_int,
    positive_number,
)

logger = logging.getLogger(__name__)

DISTRIBUTION_FIELDS = PartialUpdateBuilder(
    "Distribution",
    FieldSpec("client_id", positive_int),
    FieldSpec("assistance_type", one_of(AssistanceType)),
    FieldSpec("amount", positive_number, nullable=True),
    FieldSpec("quantity", positive_int, nullable=True),
    FieldSpec("unit", optional_text, nullable=True),
    FieldSpec("description", optional_text, nullable=True),
    FieldSpec("assistance_date", calendar_date),
    FieldSpec("status", one_of(DistributionStatus)),
)

_validate_type = one_of(AssistanceType)
_validate_status = one_of(DistributionStatus)


def _check_measure(assistance_type: AssistanceType, amount, quantity) -> None:
    """Money is measured by amount, goods by quantity."""
    if assistance_type is AssistanceType.MONEY and amount is None:
        raise FieldValidationError("amount", "Amount is required for money assistance")
    if assistance_type is not AssistanceType.MONEY and quantity is None:
        raise FieldValidationError(
            "quantity", f"Quantity is required for {assistance_type.value} assistance"
        )


class DistributionService:
    """Orchestrates distribution use cases. Depends on repository ports (DI)."""

    def __init__(self, repository: DistributionRepository, clients: ClientRepository):
        self._repository = repository
        self._clients = clients

    async def get_distribution(self, distribution_id: int) -> Distribution:
        distribution = await self._repository.get_by_id(distribution_id)
        if distribution is None:
            raise EntityNotFoundError("Distribution", distribution_id)
        return distribution

    async def list_distributions(
        self,
        *,
        client_id: int | None = None,
        assistance_type: str | None = None,
        status: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        search: str | None = None,
    ) -> list[Distribution]:
        if assistance_type == "all":
            assistance_type = None
        if status == "all":
            status = None
        return await self._repository.get_all(
            client_id=client_id,
            assistance_type=assistance_type,
            status=status,
            start_date=start_date,
            end_date=end_date,
            search=search,
        )

    async def list_by_client(self, client_id: int) -> list[Distribution]:
        return await self._repository.get_all(client_id=client_id)

    async def create_distribution(self, data: DistributionCreate) -> Distribution:
        assistance_type = _validate_type("assistance_type", data.assistance_type)
        amount = positive_number("amount", data.amount) if data.amount is not None else None
        quantity = positive_int("quantity", data.quantity) if data.quantity is not None else None
        _check_measure(assistance_type, amount, quantity)
        status = _validate_status("status", data.status) if data.status else DistributionStatus.PENDING

        if await self._clients.get_by_id(data.client_id) is None:
            raise EntityNotFoundError("Client", data.client_id)

        created = await self._repository.create(
            Distribution(
                client_id=data.client_id,
                assistance_type=assistance_type,
                assistance_date=data.assistance_date,
                amount=amount,
                quantity=quantity,
                unit=optional_text("unit", data.unit),
                description=optional_text("description", data.description),
                status=status,
            )
        )
        logger.info("Recorded %s distribution %s for client %s", assistance_type.value, created.id, data.client_id)
        return await self.get_distribution(created.id)

    async def update_distribution(
        self, distribution_id: int, data: DistributionUpdate
    ) -> Distribution:
        payload = data.model_dump(exclude_unset=True)
        current = await self.get_distribution(distribution_id)

        if "status" in payload:
            ensure_status_change_allowed(current.status, _validate_status("status", payload["status"]))

        changes = DISTRIBUTION_FIELDS.stage(payload)

        if "client_id" in changes and await self._clients.get_by_id(changes["client_id"]) is None:
            raise EntityNotFoundError("Client", changes["client_id"])

        _check_measure(
            AssistanceType(changes.get("assistance_type", current.assistance_type)),
            changes["amount"] if "amount" in changes else current.amount,
            changes["quantity"] if "quantity" in changes else current.quantity,
        )

        if not await self._repository.update_fields(distribution_id, changes):
            raise EntityNotFoundError("Distribution", distribution_id)

        logger.info("Updated distribution %s fields=%s", distribution_id, sorted(changes))
        return await self.get_distribution(distribution_id)

    async def update_status(self, distribution_id: int, status: str | None) -> Distribution:
        if not status:
            raise FieldValidationError("status", "Status is required")
        requested = _validate_status("status", status)
        current = await self.get_distribution(distribution_id)
        ensure_status_change_allowed(current.status, requested)

        if not await self._repository.update_fields(distribution_id, {"status": requested.value}):
            raise EntityNotFoundError("Distribution", distribution_id)
        logger.info(
            "Distribution %s status %s -> %s",
            distribution_id,
            current.status.value,
            requested.value,
        )
        return await self.get_distribution(distribution_id)

    async def delete_distribution(self, distribution_id: int) -> None:
        if not await self._repository.delete(distribution_id):
            raise EntityNotFoundError("Distribution", distribution_id)
        logger.info("Deleted distribution %s", distribution_id)

    async def get_stats(self) -> DistributionStats:
        return await self._repository.get_stats()
