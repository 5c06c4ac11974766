"""Balance lookup.

There is no ledger behind this service: the balance is a fixed value so the
lab can focus on build, sync and gateway behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AccountBalance:
    """Plain value returned by the service layer; the router converts it."""

    balance: float
    currency: str


CURRENT_BALANCE = AccountBalance(balance=123.45, currency="USD")


def get_balance() -> AccountBalance:
    """Return the current balance. Same value on every call."""
    return CURRENT_BALANCE
