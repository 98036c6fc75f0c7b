"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


def party_not_found(party_id: int) -> str:
    """Return message for missing party."""
    return f"Party {party_id} not found"


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def negative_balance(balance) -> str:
    """Return message for a balance below zero."""
    return f"Balance must not be negative (got {balance})"


def insufficient_funds(account_id: int, balance, amount) -> str:
    """Return message when a transfer would overdraw an account."""
    return (
        f"Account {account_id} has insufficient funds: "
        f"balance {balance}, transfer amount {amount}"
    )


def party_delete_blocked(
    party_id: int, account_count: int, transaction_count: int, receipt_count: int
) -> str:
    """Return message when a party is still referenced by other rows."""
    parts = []
    for count, noun in (
        (account_count, "account"),
        (transaction_count, "transaction"),
        (receipt_count, "receipt"),
    ):
        if count > 0:
            parts.append(f"{count} {noun}{'s' if count != 1 else ''}")
    return (
        f"Cannot delete party {party_id}: it is referenced by {', '.join(parts)}. "
        "Please delete them first."
    )
