"""Application service (use case) for medical item donations."""

import logging
from datetime import date, timedelta

from app.application.interfaces import DonorRepository, MedicalDonationRepository
from app.application.partial_update import FieldSpec, PartialUpdateBuilder
from app.application.schemas.medical_donation import (
    MedicalDonationCreate,
    MedicalDonationUpdate,
)
from app.application.services.donor_lookup import resolve_donor_id
from app.domain.entities import (
    MedicalCategory,
    MedicalDonation,
    MedicalDonationStats,
    MedicalDonationStatus,
)
from app.domain.exceptions import EntityNotFoundError, FieldValidationError, NoFieldsToUpdateError
from app.domain.status_rules import ensure_status_change_allowed
from app.domain.validators import (
    calendar_date,
    non_empty_text,
    one_of,
    optional_text,
    positive_int,
)

logger = logging.getLogger(__name__)

EXPIRING_SOON_DAYS = 30
MAX_LOOKAHEAD_DAYS = 3650

MEDICAL_DONATION_FIELDS = PartialUpdateBuilder(
    "Medical donation",
    FieldSpec("item_name", non_empty_text),
    FieldSpec("category", one_of(MedicalCategory)),
    FieldSpec("strength", optional_text, nullable=True),
    FieldSpec("quantity", positive_int),
    FieldSpec("expiry_date", calendar_date, nullable=True),
    FieldSpec("status", one_of(MedicalDonationStatus)),
)

_validate_category = one_of(MedicalCategory)
_validate_status = one_of(MedicalDonationStatus)
_STRENGTH_REQUIRED = "Strength is required for Medicine and Supplement categories"


class MedicalDonationService:
    """Orchestrates medical donation use cases."""

    def __init__(self, repository: MedicalDonationRepository, donors: DonorRepository):
        self._repository = repository
        self._donors = donors

    async def get_donation(self, donation_id: int) -> MedicalDonation:
        donation = await self._repository.get_by_id(donation_id)
        if donation is None:
            raise EntityNotFoundError("Medical donation", donation_id)
        return donation

    async def list_donations(self) -> list[MedicalDonation]:
        return await self._repository.get_all()

    async def list_by_donor(self, donor_id: int) -> list[MedicalDonation]:
        return await self._repository.get_all(donor_id=donor_id)

    async def list_by_status(self, status: str) -> list[MedicalDonation]:
        return await self._repository.get_all(status=_validate_status("status", status).value)

    async def list_expiring(self, days: int = EXPIRING_SOON_DAYS) -> list[MedicalDonation]:
        if not 0 <= days <= MAX_LOOKAHEAD_DAYS:
            raise FieldValidationError(
                "days", f"Days must be between 0 and {MAX_LOOKAHEAD_DAYS}"
            )
        today = date.today()
        return await self._repository.get_expiring(today, today + timedelta(days=days))

    async def list_expired(self) -> list[MedicalDonation]:
        return await self._repository.get_expired(date.today())

    async def create_donation(self, data: MedicalDonationCreate) -> MedicalDonation:
        """Record a medical donation. Equipment never carries strength or expiry."""
        item_name = non_empty_text("item_name", data.item_name)
        category = _validate_category("category", data.category)
        quantity = positive_int("quantity", data.quantity)
        status = _validate_status("status", data.status) if data.status else MedicalDonationStatus.PENDING

        strength = optional_text("strength", data.strength)
        if category.requires_strength and strength is None:
            raise FieldValidationError("strength", _STRENGTH_REQUIRED)
        expiry_date = data.expiry_date
        if category is MedicalCategory.EQUIPMENT:
            strength = None
            expiry_date = None

        donor_id = await resolve_donor_id(self._donors, data.donor_id, data.donor_name)
        created = await self._repository.create(
            MedicalDonation(
                donor_id=donor_id,
                item_name=item_name,
                category=category,
                quantity=quantity,
                strength=strength,
                expiry_date=expiry_date,
                status=status,
            )
        )
        logger.info("Recorded medical donation %s for donor %s", created.id, donor_id)
        return await self.get_donation(created.id)

    async def update_donation(
        self, donation_id: int, data: MedicalDonationUpdate
    ) -> MedicalDonation:
        payload = data.model_dump(exclude_unset=True)
        current = await self.get_donation(donation_id)

        if "status" in payload:
            ensure_status_change_allowed(current.status, _validate_status("status", payload["status"]))

        changes = MEDICAL_DONATION_FIELDS.stage(payload, allow_empty=True)
        if payload.get("donor_id") is not None or payload.get("donor_name") is not None:
            changes["donor_id"] = await resolve_donor_id(
                self._donors, payload.get("donor_id"), payload.get("donor_name")
            )
        if not changes:
            raise NoFieldsToUpdateError()

        self._apply_category_rules(current, changes)

        if not await self._repository.update_fields(donation_id, changes):
            raise EntityNotFoundError("Medical donation", donation_id)

        logger.info("Updated medical donation %s fields=%s", donation_id, sorted(changes))
        return await self.get_donation(donation_id)

    async def update_status(self, donation_id: int, status: str | None) -> MedicalDonation:
        if not status:
            raise FieldValidationError("status", "Status is required")
        requested = _validate_status("status", status)
        current = await self.get_donation(donation_id)
        ensure_status_change_allowed(current.status, requested)

        if not await self._repository.update_fields(donation_id, {"status": requested.value}):
            raise EntityNotFoundError("Medical donation", donation_id)
        logger.info("Medical donation %s status %s -> %s", donation_id, current.status.value, requested.value)
        return await self.get_donation(donation_id)

    async def delete_donation(self, donation_id: int) -> None:
        if not await self._repository.delete(donation_id):
            raise EntityNotFoundError("Medical donation", donation_id)
        logger.info("Deleted medical donation %s", donation_id)

    async def get_stats(self) -> MedicalDonationStats:
        today = date.today()
        return await self._repository.get_stats(today, today + timedelta(days=EXPIRING_SOON_DAYS))

    @staticmethod
    def _apply_category_rules(current: MedicalDonation, changes: dict) -> None:
        """Keep strength/expiry consistent with the category the row will end up in."""
        category = MedicalCategory(changes.get("category", current.category))
        if category is MedicalCategory.EQUIPMENT:
            if "category" in changes or "strength" in changes:
                changes["strength"] = None
            if "category" in changes or "expiry_date" in changes:
                changes["expiry_date"] = None
            return

        if "category" not in changes and "strength" not in changes:
            return
        strength = changes["strength"] if "strength" in changes else current.strength
        if strength is None:
            raise FieldValidationError("strength", _STRENGTH_REQUIRED)
