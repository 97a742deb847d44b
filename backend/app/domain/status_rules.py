"""Terminal-state guards applied before a status field is staged for update."""

from enum import Enum

from app.domain.exceptions import InvalidStatusTransitionError


def ensure_status_change_allowed(current: Enum, requested: Enum) -> None:
    """Reject any move out of a terminal status.

    Re-asserting the current terminal value is a no-op and allowed.
    """
    if requested == current:
        return
    if getattr(current, "is_terminal", False):
        raise InvalidStatusTransitionError(
            f"Cannot change status from {current.value} to {requested.value}",
            current=current.value,
            requested=requested.value,
        )


def ensure_not_frozen(entity_type: str, status: Enum) -> None:
    """Reject every mutation of an entity sitting in a terminal status."""
    if getattr(status, "is_terminal", False):
        raise InvalidStatusTransitionError(
            f"Cannot modify a {status.value} {entity_type.lower()}",
            current=status.value,
        )
