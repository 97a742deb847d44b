"""Domain exceptions. No framework imports here."""


class DomainError(Exception):
    """Base class for business-rule failures surfaced to the caller."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EntityNotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} not found")


class DuplicateEntityError(DomainError):
    """Raised when attempting to create a duplicate entity.

    ``field_label`` is the human-readable name of the unique field, e.g.
    ``"email"`` or ``"Aadhaar"``.
    """

    def __init__(self, entity_type: str, field_label: str, value: str | None = None):
        self.entity_type = entity_type
        self.field_label = field_label
        self.value = value
        super().__init__(f"{entity_type} with this {field_label} already exists")


class FieldValidationError(DomainError):
    """A supplied field failed its format or range check."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class ImmutableFieldError(DomainError):
    """An update payload tried to change a field that is fixed after creation."""

    def __init__(self, entity_type: str, field: str):
        self.entity_type = entity_type
        self.field = field
        super().__init__(f"{field} cannot be changed once a {entity_type.lower()} is created")


class NoFieldsToUpdateError(DomainError):
    """An update call supplied zero recognized fields."""

    def __init__(self) -> None:
        super().__init__("No fields to update")


class InvalidStatusTransitionError(DomainError):
    """A status change would leave a terminal state, or the entity is frozen."""

    def __init__(self, message: str, current: str, requested: str | None = None):
        self.current = current
        self.requested = requested
        super().__init__(message)


class TransactionFailureError(DomainError):
    """Unexpected database failure inside a unit of work (already rolled back)."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__("Database transaction failed")
