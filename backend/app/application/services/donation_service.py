"""Application service (use case) for monetary donations."""

import logging
from datetime import date

from app.application.interfaces import DonationRepository, DonorRepository
from app.application.partial_update import FieldSpec, PartialUpdateBuilder
from app.application.schemas.donation import DonationCreate, DonationUpdate
from app.application.services.donor_lookup import resolve_donor_id
from app.domain.entities import Donation, DonationStats, DonationStatus
from app.domain.exceptions import EntityNotFoundError, NoFieldsToUpdateError
from app.domain.status_rules import ensure_status_change_allowed
from app.domain.validators import (
    calendar_date,
    non_empty_text,
    one_of,
    optional_text,
    positive_number,
)

logger = logging.getLogger(__name__)

DONATION_FIELDS = PartialUpdateBuilder(
    "Donation",
    FieldSpec("amount", positive_number),
    FieldSpec("date", calendar_date),
    FieldSpec("payment_mode", non_empty_text),
    FieldSpec("purpose", non_empty_text),
    FieldSpec("status", one_of(DonationStatus)),
    FieldSpec("notes", optional_text, nullable=True),
)

_validate_status = one_of(DonationStatus)


def month_bounds(month: int, year: int) -> tuple[date, date]:
    """Return ``[first day, first day of next month)`` for the given month."""
    start = date(year, month, 1)
    end = date(year + 1, 1, 1) if month == 12 else date(year, month + 1, 1)
    return start, end


class DonationService:
    """Orchestrates donation use cases.

    Donor resolution shares the request session with the donation write, so
    a donor created on the fly is rolled back together with a failed insert.
    """

    def __init__(self, repository: DonationRepository, donors: DonorRepository):
        self._repository = repository
        self._donors = donors

    async def get_donation(self, donation_id: int) -> Donation:
        donation = await self._repository.get_by_id(donation_id)
        if donation is None:
            raise EntityNotFoundError("Donation", donation_id)
        return donation

    async def list_donations(
        self,
        *,
        status: str | None = None,
        search: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        donor_type: str | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> list[Donation]:
        if status == "All":
            status = None
        if donor_type == "All":
            donor_type = None
        return await self._repository.get_all(
            status=status,
            search=search,
            start_date=start_date,
            end_date=end_date,
            donor_type=donor_type,
            skip=skip,
            limit=limit,
        )

    async def list_by_donor(self, donor_id: int) -> list[Donation]:
        return await self._repository.get_by_donor(donor_id)

    async def create_donation(self, data: DonationCreate) -> Donation:
        amount = positive_number("amount", data.amount)
        payment_mode = non_empty_text("payment_mode", data.payment_mode)
        purpose = non_empty_text("purpose", data.purpose)
        status = _validate_status("status", data.status) if data.status else DonationStatus.COMPLETED

        donor_id = await resolve_donor_id(self._donors, data.donor_id, data.donor_name)
        created = await self._repository.create(
            Donation(
                donor_id=donor_id,
                amount=amount,
                date=data.date,
                payment_mode=payment_mode,
                purpose=purpose,
                status=status,
                notes=optional_text("notes", data.notes),
            )
        )
        logger.info("Recorded donation %s for donor %s", created.id, donor_id)
        return await self.get_donation(created.id)

    async def update_donation(self, donation_id: int, data: DonationUpdate) -> Donation:
        """Apply only the supplied fields; a Completed donation cannot return to Pending."""
        payload = data.model_dump(exclude_unset=True)
        current = await self.get_donation(donation_id)

        if "status" in payload:
            ensure_status_change_allowed(current.status, _validate_status("status", payload["status"]))

        changes = DONATION_FIELDS.stage(payload, allow_empty=True)
        if payload.get("donor_id") is not None or payload.get("donor_name") is not None:
            changes["donor_id"] = await resolve_donor_id(
                self._donors, payload.get("donor_id"), payload.get("donor_name")
            )
        if not changes:
            raise NoFieldsToUpdateError()

        if not await self._repository.update_fields(donation_id, changes):
            raise EntityNotFoundError("Donation", donation_id)

        logger.info("Updated donation %s fields=%s", donation_id, sorted(changes))
        return await self.get_donation(donation_id)

    async def delete_donation(self, donation_id: int) -> None:
        if not await self._repository.delete(donation_id):
            raise EntityNotFoundError("Donation", donation_id)
        logger.info("Deleted donation %s", donation_id)

    async def get_stats(self, month: int | None = None, year: int | None = None) -> DonationStats:
        today = date.today()
        month_start, month_end = month_bounds(month or today.month, year or today.year)
        return await self._repository.get_stats(month_start, month_end)
