"""Domain exceptions for the movie catalog."""


class CatalogError(Exception):
    """Base exception for all catalog errors."""
    pass


class EntityValidationError(CatalogError):
    """One or more required fields are missing or out of range.

    Attributes:
        errors: Field name to human readable message.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Invalid fields: {fields}")


class EntityNotFoundError(CatalogError):
    """Referenced movie or review does not exist."""

    def __init__(self, entity: str, entity_id: int) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} not found")


class IntegrityViolationError(CatalogError):
    """A write would leave a review pointing at a missing movie."""
    pass


class StorageError(CatalogError):
    """The store failed for a reason unrelated to the request data."""
    pass
