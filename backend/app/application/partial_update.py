"""Partial-update field builder.

Turns the sparse payload of an update request into the minimal set of column
assignments for a single ``UPDATE`` statement. The recognised fields of a
table are declared up front as an ordered tuple of :class:`FieldSpec`;
anything else in the payload is ignored and never reaches SQL.

Usage:
    CLIENT_FIELDS = PartialUpdateBuilder(
        "Client",
        FieldSpec("name", non_empty_text),
        FieldSpec("phone", phone_number, nullable=True),
        immutable=("aadhaar",),
    )
    staged = CLIENT_FIELDS.stage(data.model_dump(exclude_unset=True))
    await repository.update_fields(client_id, staged)
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from app.domain.exceptions import FieldValidationError, ImmutableFieldError, NoFieldsToUpdateError
from app.domain.validators import Validator


@dataclass(frozen=True)
class FieldSpec:
    """One updatable column.

    ``nullable`` fields treat ``None`` (and blank strings) as "clear the
    value"; on other fields ``None`` is a validation failure.
    """

    name: str
    validator: Validator
    nullable: bool = False


class PartialUpdateBuilder:
    """Validates and stages the supplied subset of a table's updatable fields."""

    def __init__(
        self,
        entity_type: str,
        *fields: FieldSpec,
        immutable: Iterable[str] = (),
    ):
        self._entity_type = entity_type
        self._fields = fields
        self._immutable = tuple(immutable)

    def stage(self, payload: Mapping[str, Any], *, allow_empty: bool = False) -> dict[str, Any]:
        """Return ``{column: value}`` for every recognised key in ``payload``.

        Raises on the first invalid field, so either every supplied field is
        staged or nothing is. An empty result raises NoFieldsToUpdateError
        unless ``allow_empty`` is set (used when one request feeds several
        builders and only the combined result must be non-empty).
        """
        for name in self._immutable:
            if name in payload:
                raise ImmutableFieldError(self._entity_type, name)

        staged: dict[str, Any] = {}
        for spec in self._fields:
            if spec.name not in payload:
                continue
            staged[spec.name] = self._stage_value(spec, payload[spec.name])

        if not staged and not allow_empty:
            raise NoFieldsToUpdateError()
        return staged

    @staticmethod
    def _stage_value(spec: FieldSpec, raw: Any) -> Any:
        if raw is None or (isinstance(raw, str) and not raw.strip() and spec.nullable):
            if not spec.nullable:
                # Let the validator phrase the message ("Name cannot be empty").
                spec.validator(spec.name, raw)
                raise FieldValidationError(spec.name, f"{spec.name} is required")
            return None

        value = spec.validator(spec.name, raw)
        if isinstance(value, Enum):
            return value.value
        return value
