"""Application service (use case) for the Donor + LifeMember composite.

A life member is stored as a ``donors`` row plus a ``life_members`` row.
Every write here runs inside one unit of work so both halves are created,
changed or deactivated together, or not at all.
"""

import logging
from datetime import date

from app.application.interfaces import UnitOfWorkFactory
from app.application.partial_update import FieldSpec, PartialUpdateBuilder
from app.application.schemas.member import LifeMemberCreate, LifeMemberUpdate
from app.domain.entities import (
    ActivityStatus,
    Donation,
    Donor,
    DonorType,
    LifeMember,
    LifeMemberProfile,
    MemberCreated,
)
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError, NoFieldsToUpdateError
from app.domain.validators import (
    aadhaar_number,
    email_address,
    non_empty_text,
    one_of,
    optional_text,
    phone_number,
)

logger = logging.getLogger(__name__)

_ENTITY = "Member"

DONOR_FIELDS = PartialUpdateBuilder(
    _ENTITY,
    FieldSpec("name", non_empty_text),
    FieldSpec("email", email_address),
    FieldSpec("phone", phone_number, nullable=True),
    FieldSpec("address", optional_text, nullable=True),
)

MEMBERSHIP_FIELDS = PartialUpdateBuilder(
    _ENTITY,
    FieldSpec("membership_status", one_of(ActivityStatus)),
    immutable=("aadhar_number", "join_date", "join_time"),
)


class MemberService:
    """Orchestrates life member use cases. Depends on a unit-of-work factory (DI)."""

    def __init__(self, uow_factory: UnitOfWorkFactory):
        self._uow_factory = uow_factory

    # ── Reads ────────────────────────────────────────────────────────

    async def get_member(self, member_id: int) -> LifeMemberProfile:
        async with self._uow_factory() as uow:
            profile = await uow.life_members.get_profile(member_id)
        if profile is None:
            raise EntityNotFoundError(_ENTITY, member_id)
        return profile

    async def list_members(
        self,
        *,
        search: str | None = None,
        status: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[LifeMemberProfile]:
        if status == "All":
            status = None
        async with self._uow_factory() as uow:
            return await uow.life_members.list_profiles(
                search=search,
                status=status,
                start_date=start_date,
                end_date=end_date,
            )

    async def list_member_donations(self, member_id: int) -> tuple[int, list[Donation]]:
        """Return ``(donor_id, donations)`` for the donor behind ``member_id``."""
        async with self._uow_factory() as uow:
            donor_id = await uow.life_members.resolve_donor_id(member_id)
            if donor_id is None:
                raise EntityNotFoundError("Life member", member_id)
            return donor_id, await uow.donations.get_by_donor(donor_id)

    # ── Composite writes ─────────────────────────────────────────────

    async def create_member(self, data: LifeMemberCreate) -> MemberCreated:
        """Insert the donor row and the membership row in one transaction."""
        name = non_empty_text("name", data.name)
        email = email_address("email", data.email)
        phone = phone_number("phone", data.phone) if data.phone else None
        aadhar = aadhaar_number("aadhar_number", data.aadhar_number) if data.aadhar_number else None

        async with self._uow_factory() as uow:
            if await uow.donors.email_in_use(email):
                raise DuplicateEntityError(_ENTITY, "email", email)
            if aadhar and await uow.life_members.aadhar_in_use(aadhar):
                raise DuplicateEntityError(_ENTITY, "Aadhar number", aadhar)

            donor = await uow.donors.create(
                Donor(
                    name=name,
                    email=email,
                    phone=phone,
                    address=optional_text("address", data.address),
                    donor_type=DonorType.LIFE_MEMBER,
                    status=ActivityStatus.ACTIVE,
                )
            )
            member = LifeMember(
                donor_id=donor.id,
                aadhar_number=aadhar,
                join_date=data.join_date,
                membership_status=ActivityStatus.ACTIVE,
            )
            if data.join_time is not None:
                member.join_time = data.join_time
            member = await uow.life_members.create(member)

        logger.info("Created life member %s (donor %s)", member.id, donor.id)
        return MemberCreated(member_id=member.id, donor_id=donor.id)

    async def update_member(self, member_id: int, data: LifeMemberUpdate) -> LifeMemberProfile:
        """Update whichever halves received fields; both or neither are persisted.

        The payload is validated before a connection is checked out, so an
        invalid or empty payload never reaches the database.
        """
        payload = data.model_dump(exclude_unset=True)
        membership_changes = MEMBERSHIP_FIELDS.stage(payload, allow_empty=True)
        donor_changes = DONOR_FIELDS.stage(payload, allow_empty=True)
        if not donor_changes and not membership_changes:
            raise NoFieldsToUpdateError()

        async with self._uow_factory() as uow:
            donor_id = await uow.life_members.resolve_donor_id(member_id)
            if donor_id is None:
                raise EntityNotFoundError(_ENTITY, member_id)

            if "email" in donor_changes and await uow.donors.email_in_use(
                donor_changes["email"], exclude_id=donor_id
            ):
                raise DuplicateEntityError(_ENTITY, "email", donor_changes["email"])

            if donor_changes:
                await uow.donors.update_fields(donor_id, donor_changes)
            if membership_changes:
                await uow.life_members.update_fields(member_id, membership_changes)

            profile = await uow.life_members.get_profile(member_id)

        logger.info(
            "Updated life member %s (donor fields=%s, membership fields=%s)",
            member_id,
            sorted(donor_changes),
            sorted(membership_changes),
        )
        return profile

    async def deactivate_member(self, member_id: int) -> LifeMemberProfile:
        """Flip both the donor status and the membership status to Inactive."""
        async with self._uow_factory() as uow:
            donor_id = await uow.life_members.resolve_donor_id(member_id)
            if donor_id is None:
                raise EntityNotFoundError(_ENTITY, member_id)

            await uow.donors.update_fields(donor_id, {"status": ActivityStatus.INACTIVE.value})
            await uow.life_members.update_fields(
                member_id, {"membership_status": ActivityStatus.INACTIVE.value}
            )
            profile = await uow.life_members.get_profile(member_id)

        logger.info("Deactivated life member %s (donor %s)", member_id, donor_id)
        return profile

    async def delete_member(self, member_id: int) -> None:
        """Delete the donor row; the membership row goes with it (ON DELETE CASCADE)."""
        async with self._uow_factory() as uow:
            donor_id = await uow.life_members.resolve_donor_id(member_id)
            if donor_id is None or not await uow.donors.delete(donor_id):
                raise EntityNotFoundError(_ENTITY, member_id)

        logger.info("Deleted life member %s (donor %s)", member_id, donor_id)
