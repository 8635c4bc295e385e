"""Domain-level exceptions.

All rule violations and back-end failures are expressed as subclasses of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ItemIndexError(DomainException, IndexError):
    """A line-item position does not exist in the draft."""


class EmptyOrderError(ValidationError):
    """No line item survived the selection filter."""

    def __init__(self) -> None:
        super().__init__("Please add at least one product to the order")


class UnknownProductError(EntityNotFoundError):
    """A line item references a product that is not in the catalog."""

    def __init__(self, product_ref: str) -> None:
        super().__init__(f"Product with ID {product_ref} not found")
        self.product_ref = product_ref


class BackendError(DomainException):
    """The back end rejected a request, or could not be reached.

    ``message`` is the server's diagnostic text when it sent one, else None.
    """

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message or "Request to the back end failed")
        self.message = message
        self.status_code = status_code


class SessionExpiredError(BackendError):
    """The back end answered 401; credentials are no longer valid."""

    def __init__(self) -> None:
        super().__init__("Session expired. Please log in again.", status_code=401)
