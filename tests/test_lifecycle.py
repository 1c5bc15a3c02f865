# tests/test_lifecycle.py
import pytest

from sirdab.domain.lifecycle import (
    BOOKING_TRANSITIONS,
    PAYMENT_TRANSITIONS,
    VISIT_TRANSITIONS,
    InvalidTransition,
    can_transition,
    ensure_transition,
    is_terminal,
)


def test_visit_happy_path():
    assert can_transition(VISIT_TRANSITIONS, "pending", "confirmed")
    assert can_transition(VISIT_TRANSITIONS, "confirmed", "completed")


def test_visit_cannot_skip_confirmation():
    assert not can_transition(VISIT_TRANSITIONS, "pending", "completed")


def test_cancelled_is_absorbing():
    assert is_terminal(VISIT_TRANSITIONS, "cancelled")
    assert is_terminal(BOOKING_TRANSITIONS, "cancelled")
    for target in ("pending", "confirmed", "completed"):
        assert not can_transition(VISIT_TRANSITIONS, "cancelled", target)


def test_booking_goes_through_active():
    assert can_transition(BOOKING_TRANSITIONS, "confirmed", "active")
    assert can_transition(BOOKING_TRANSITIONS, "active", "completed")
    assert not can_transition(BOOKING_TRANSITIONS, "confirmed", "completed")
    assert not can_transition(BOOKING_TRANSITIONS, "active", "cancelled")


def test_payment_is_one_way():
    assert can_transition(PAYMENT_TRANSITIONS, "unpaid", "paid")
    assert not can_transition(PAYMENT_TRANSITIONS, "paid", "unpaid")


def test_reasserting_current_state_is_allowed():
    assert ensure_transition(VISIT_TRANSITIONS, "completed", "completed") == "completed"


def test_illegal_or_unknown_target_raises():
    with pytest.raises(InvalidTransition):
        ensure_transition(VISIT_TRANSITIONS, "completed", "pending")
    with pytest.raises(InvalidTransition, match="unknown"):
        ensure_transition(BOOKING_TRANSITIONS, "pending", "archived")
