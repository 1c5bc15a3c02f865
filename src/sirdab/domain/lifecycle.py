# src/sirdab/domain/lifecycle.py
from __future__ import annotations

from typing import Literal, Mapping

VisitStatus = Literal["pending", "confirmed", "completed", "cancelled"]
BookingStatus = Literal["pending", "confirmed", "active", "completed", "cancelled"]
PaymentStatus = Literal["unpaid", "paid"]

# cancelled and completed are terminal
VISIT_TRANSITIONS: dict[str, frozenset[str]] = {
    "pending": frozenset({"confirmed", "cancelled"}),
    "confirmed": frozenset({"completed", "cancelled"}),
    "completed": frozenset(),
    "cancelled": frozenset(),
}

BOOKING_TRANSITIONS: dict[str, frozenset[str]] = {
    "pending": frozenset({"confirmed", "cancelled"}),
    "confirmed": frozenset({"active", "cancelled"}),
    "active": frozenset({"completed"}),
    "completed": frozenset(),
    "cancelled": frozenset(),
}

# independent of booking status
PAYMENT_TRANSITIONS: dict[str, frozenset[str]] = {
    "unpaid": frozenset({"paid"}),
    "paid": frozenset(),
}


class InvalidTransition(ValueError):
    pass


def can_transition(machine: Mapping[str, frozenset[str]], current: str, target: str) -> bool:
    if current == target:
        return current in machine
    return target in machine.get(current, frozenset())


def ensure_transition(
    machine: Mapping[str, frozenset[str]],
    current: str,
    target: str,
    *,
    field: str = "status",
) -> str:
    """
    Return `target` if `current -> target` is legal in `machine`.
    Re-asserting the current state is accepted as a no-op.
    """
    if target not in machine:
        raise InvalidTransition(f"unknown {field}: {target!r}")
    if not can_transition(machine, current, target):
        raise InvalidTransition(f"{field} cannot change from {current!r} to {target!r}")
    return target


def is_terminal(machine: Mapping[str, frozenset[str]], state: str) -> bool:
    return not machine.get(state)
