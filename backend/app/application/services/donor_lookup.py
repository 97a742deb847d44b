"""Find-or-create resolution of the donor behind a donation."""

import logging

from app.application.interfaces import DonorRepository
from app.domain.entities import Donor, DonorType
from app.domain.exceptions import EntityNotFoundError, FieldValidationError
from app.domain.validators import non_empty_text

logger = logging.getLogger(__name__)


async def resolve_donor_id(
    donors: DonorRepository,
    donor_id: int | None,
    donor_name: str | None,
) -> int:
    """Return the donor ID for a donation payload.

    An explicit ``donor_id`` must exist. Otherwise ``donor_name`` is matched
    case-insensitively against existing donors and a new Individual donor is
    created when nothing matches.
    """
    if donor_id is not None:
        if await donors.get_by_id(donor_id) is None:
            raise EntityNotFoundError("Donor", donor_id)
        return donor_id

    if donor_name is None:
        raise FieldValidationError("donor", "Either donor_id or donor_name must be provided")

    name = non_empty_text("donor_name", donor_name)
    existing = await donors.find_by_name(name)
    if existing is not None:
        return existing.id

    created = await donors.create(Donor(name=name, donor_type=DonorType.INDIVIDUAL))
    logger.info("Created donor %s for new donor name", created.id)
    return created.id
