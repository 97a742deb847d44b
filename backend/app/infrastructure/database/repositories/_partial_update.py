"""Executor for changes staged by the partial-update field builder."""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession


async def apply_partial_update(
    session: AsyncSession,
    model: type,
    row_id: int,
    changes: dict[str, Any],
) -> bool:
    """Run ``UPDATE <table> SET <changes>, updated_at = now() WHERE id = row_id``.

    Exactly one statement is issued. Returns False when no row matched.
    """
    stmt = (
        update(model)
        .where(model.id == row_id)
        .values(**changes, updated_at=datetime.now(timezone.utc))
    )
    result = await session.execute(stmt)
    return result.rowcount > 0
