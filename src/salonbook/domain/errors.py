"""Shared domain error messages and error types."""

from salonbook.domain.entities import PaymentType


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


def not_found(label: str) -> str:
    """Return message for a missing entity, e.g. "Record not found"."""
    return f"{label} not found"


def duplicate_name(label: str) -> str:
    """Return message for a duplicate reference name."""
    return f"{label} with this name already exists"


def constraint_rejected(label: str, amount_field: str) -> str:
    """Return message when a record or expense fails a table check."""
    accepted = ", ".join(PaymentType.values())
    return (
        f"{label} rejected: payment_type must be one of {accepted}"
        + (f" and {amount_field} must be positive" if amount_field == "price" else "")
    )


def invalid_month(year: int, month: int) -> str:
    """Return message for a year/month pair that is not a calendar month."""
    return f"Invalid month: {year}-{month:02d}"
