"""Errors raised while resolving a barcode."""


class CatalogUnavailableError(Exception):
    """The product catalog could not be reached or answered with an error."""


class InferenceError(Exception):
    """Cooking times could not be inferred for a product."""


class PersistenceError(Exception):
    """A resolved cooking profile could not be stored."""


class ResolutionNotFoundError(Exception):
    """No cooking profile exists or can be created for a barcode."""

    def __init__(self, barcode: str) -> None:
        super().__init__(f"No pasta found for barcode {barcode}")
        self.barcode = barcode
