"""Unit tests for domain value objects."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from barber.domain.exceptions import ValidationError
from barber.domain.model.value_objects import Money, TimeSlot


def _at(hour: int, minute: int = 0) -> datetime:
    return datetime(2026, 10, 20, hour, minute, tzinfo=timezone.utc)


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        m = Money.of("25.99")
        assert m.amount == Decimal("25.99")

    def test_of_factory_from_float(self):
        assert Money.of(0.1) == Money(Decimal("0.1"))

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("twenty")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Money.of("NaN")

    def test_addition_is_exact(self):
        result = Money.of("0.1") + Money.of("0.2")
        assert result.amount == Decimal("0.3")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_rounds_only_for_display(self):
        m = Money.of("10.005") + Money.of("0.001")
        assert m.amount == Decimal("10.006")
        assert str(m) == "$10.01"

    def test_zero(self):
        assert Money.zero() == Money(Decimal("0"))
        assert str(Money.zero()) == "$0.00"


# ── TimeSlot ─────────────────────────────────────────────────────────────────


class TestTimeSlot:

    def test_valid_slot(self):
        slot = TimeSlot(_at(10), _at(10, 30))
        assert slot.duration == timedelta(minutes=30)

    def test_end_equal_to_start_rejected(self):
        with pytest.raises(ValidationError, match="End time must be after start"):
            TimeSlot(_at(10), _at(10))

    def test_end_before_start_rejected(self):
        with pytest.raises(ValidationError, match="End time must be after start"):
            TimeSlot(_at(11), _at(10))

    def test_naive_datetime_rejected(self):
        with pytest.raises(ValidationError, match="timezone-aware"):
            TimeSlot(datetime(2026, 10, 20, 10), _at(11))


class TestTimeSlotOverlap:

    @pytest.mark.parametrize(
        "other",
        [
            (_at(10, 15), _at(10, 45)),  # starts inside
            (_at(9, 45), _at(10, 15)),  # ends inside
            (_at(10, 5), _at(10, 10)),  # fully inside
            (_at(9), _at(11)),  # fully covers
            (_at(10), _at(10, 30)),  # identical
        ],
    )
    def test_overlapping_slots(self, other):
        slot = TimeSlot(_at(10), _at(10, 30))
        candidate = TimeSlot(*other)
        assert slot.overlaps(candidate)
        assert candidate.overlaps(slot)

    @pytest.mark.parametrize(
        "other",
        [
            (_at(10, 30), _at(11)),  # starts when slot ends
            (_at(9, 30), _at(10)),  # ends when slot starts
            (_at(12), _at(13)),  # later
            (_at(8), _at(9)),  # earlier
        ],
    )
    def test_disjoint_slots(self, other):
        slot = TimeSlot(_at(10), _at(10, 30))
        candidate = TimeSlot(*other)
        assert not slot.overlaps(candidate)
        assert not candidate.overlaps(slot)

    def test_earlier_slot_does_not_overlap_later_one(self):
        # Comparing only early.start < late.end would flag this pair.
        early = TimeSlot(_at(8), _at(9))
        late = TimeSlot(_at(10), _at(11))
        assert not early.overlaps(late)
        assert not late.overlaps(early)

    def test_slots_in_different_zones_compare_by_instant(self):
        utc_slot = TimeSlot(_at(13), _at(14))
        sao_paulo = timezone(timedelta(hours=-3))
        local = TimeSlot(
            datetime(2026, 10, 20, 10, 30, tzinfo=sao_paulo),
            datetime(2026, 10, 20, 11, 30, tzinfo=sao_paulo),
        )
        assert utc_slot.overlaps(local)
