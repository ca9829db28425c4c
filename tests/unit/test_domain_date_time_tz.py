"""Unit tests for DateTimeTZ value object.

Tests cover:
- Offset range validation
- UTC conversion and re-expression at another offset
- Structural equality vs. instant-based ordering
- Canonical string form and parsing
"""

import pytest

from valobs.domain.errors import (
    InvalidDateError,
    InvalidOffsetError,
    InvalidTimeError,
    ParseError,
)
from valobs.domain.value_objects.date_time import DateTime
from valobs.domain.value_objects.date_time_tz import MAX_OFFSET_MINUTES, DateTimeTZ
from valobs.domain.value_objects.duration import Duration


@pytest.mark.unit
class TestDateTimeTZCreation:
    """Test construction and offset validation."""

    def test_offset_defaults_to_utc(self):
        """Test the default offset is zero."""
        assert DateTimeTZ(DateTime.of(2024, 1, 1)).offset_minutes == 0

    @pytest.mark.parametrize(
        "offset", [-MAX_OFFSET_MINUTES, 0, 330, MAX_OFFSET_MINUTES]
    )
    def test_offset_bounds_are_inclusive(self, offset):
        """Test offsets within -14:00..+14:00 are accepted."""
        assert DateTimeTZ(DateTime.of(2024, 1, 1), offset).offset_minutes == offset

    @pytest.mark.parametrize("offset", [-841, 841, 24 * 60])
    def test_offset_out_of_range(self, offset):
        """Test offsets beyond 14 hours raise InvalidOffsetError."""
        with pytest.raises(InvalidOffsetError, match="out of range"):
            DateTimeTZ(DateTime.of(2024, 1, 1), offset)

    @pytest.mark.parametrize("offset", [1.5, "60", True])
    def test_offset_must_be_int(self, offset):
        """Test non-integer offsets raise InvalidOffsetError."""
        with pytest.raises(InvalidOffsetError):
            DateTimeTZ(DateTime.of(2024, 1, 1), offset)  # type: ignore

    def test_offset_error_is_a_time_error(self):
        """Test InvalidOffsetError can be caught as InvalidTimeError."""
        with pytest.raises(InvalidTimeError):
            DateTimeTZ(DateTime.of(2024, 1, 1), 900)

    def test_date_time_type_is_checked(self):
        """Test a non-DateTime local value is rejected."""
        with pytest.raises(InvalidDateError):
            DateTimeTZ("2024-01-01T00:00:00.000", 0)  # type: ignore


@pytest.mark.unit
class TestDateTimeTZConversion:
    """Test UTC conversion."""

    def test_to_utc_subtracts_offset(self):
        """Test local minus offset gives UTC."""
        value = DateTimeTZ(DateTime.of(2024, 6, 1, 9), offset_minutes=-300)
        assert value.to_utc() == DateTime.of(2024, 6, 1, 14)

    def test_to_utc_crosses_date_line(self):
        """Test conversion rolls the date when needed."""
        value = DateTimeTZ(DateTime.of(2024, 1, 1, 2), offset_minutes=9 * 60)
        assert value.to_utc() == DateTime.of(2023, 12, 31, 17)

    def test_from_utc(self):
        """Test from_utc adds the offset to get local time."""
        value = DateTimeTZ.from_utc(DateTime.of(2024, 6, 1, 22), 330)
        assert value.date_time == DateTime.of(2024, 6, 2, 3, 30)
        assert value.offset_minutes == 330

    def test_with_offset_keeps_instant(self):
        """Test re-expressing at another offset keeps the same instant."""
        tokyo = DateTimeTZ(DateTime.of(2024, 6, 1, 9), 540)
        london = tokyo.with_offset(60)
        assert london.date_time == DateTime.of(2024, 6, 1, 1)
        assert london.same_instant(tokyo)


@pytest.mark.unit
class TestDateTimeTZComparison:
    """Test equality and ordering."""

    def test_same_instant_different_offset_is_not_equal(self):
        """Test equality is structural, not instant-based."""
        a = DateTimeTZ(DateTime.of(2024, 1, 1, 12), 120)
        b = DateTimeTZ(DateTime.of(2024, 1, 1, 10), 0)
        assert a != b
        assert a.same_instant(b)

    def test_equality_and_hash(self):
        """Test identical fields mean equal values and hashes."""
        a = DateTimeTZ(DateTime.of(2024, 1, 1, 12), 120)
        b = DateTimeTZ(DateTime.of(2024, 1, 1, 12), 120)
        assert a == b
        assert hash(a) == hash(b)

    def test_ordering_is_by_instant(self):
        """Test a later local time can be an earlier instant."""
        new_york = DateTimeTZ(DateTime.of(2024, 1, 1, 9), -300)  # 14:00Z
        berlin = DateTimeTZ(DateTime.of(2024, 1, 1, 12), 60)  # 11:00Z
        assert berlin < new_york
        assert new_york > berlin
        assert sorted([new_york, berlin]) == [berlin, new_york]

    def test_offset_breaks_ties(self):
        """Test equal instants order by offset and are not <= each other both ways."""
        a = DateTimeTZ(DateTime.of(2024, 1, 1, 10), 0)
        b = DateTimeTZ(DateTime.of(2024, 1, 1, 12), 120)
        assert a < b
        assert not b <= a

    def test_ordering_against_other_types(self):
        """Test ordering against a naive DateTime is undefined."""
        aware = DateTimeTZ(DateTime.of(2024, 1, 1))
        with pytest.raises(TypeError):
            aware < DateTime.of(2024, 1, 1)  # type: ignore


@pytest.mark.unit
class TestDateTimeTZArithmetic:
    """Test Duration arithmetic."""

    def test_add_keeps_offset(self):
        """Test add shifts local time and keeps the offset."""
        value = DateTimeTZ(DateTime.of(2024, 12, 31, 23), 60)
        result = value.add(Duration.of(hours=2))
        assert result == DateTimeTZ(DateTime.of(2025, 1, 1, 1), 60)

    def test_operators(self):
        """Test + and - with Duration on either side."""
        value = DateTimeTZ(DateTime.of(2024, 1, 1, 12), -60)
        hour = Duration.of(hours=1)
        assert value + hour == DateTimeTZ(DateTime.of(2024, 1, 1, 13), -60)
        assert hour + value == DateTimeTZ(DateTime.of(2024, 1, 1, 13), -60)
        assert value - hour == DateTimeTZ(DateTime.of(2024, 1, 1, 11), -60)

    def test_difference_is_between_instants(self):
        """Test difference ignores how the instants are written."""
        a = DateTimeTZ(DateTime.of(2024, 1, 1, 12), 120)  # 10:00Z
        b = DateTimeTZ(DateTime.of(2024, 1, 1, 9), -60)  # 10:00Z
        assert a.difference(b).is_zero()
        c = DateTimeTZ(DateTime.of(2024, 1, 1, 11), 0)
        assert c - a == Duration.of(hours=1)

    def test_difference_requires_datetimetz(self):
        """Test naive DateTime is rejected."""
        aware = DateTimeTZ(DateTime.of(2024, 1, 1))
        with pytest.raises(TypeError):
            aware.difference(DateTime.of(2024, 1, 1))  # type: ignore


@pytest.mark.unit
class TestDateTimeTZRangeEdges:
    """Test instants whose UTC wall clock lies outside years 1..9999."""

    def test_to_utc_raises_before_year_one(self):
        """Test 0001-01-01T00:00+01:00 has no UTC DateTime."""
        value = DateTimeTZ(DateTime.of(1, 1, 1, 0, 0), 60)
        with pytest.raises(InvalidDateError):
            value.to_utc()

    def test_ordering_before_year_one(self):
        """Test ordering still works when to_utc() would raise."""
        earliest = DateTimeTZ(DateTime.of(1, 1, 1, 0, 0), 60)
        later = DateTimeTZ(DateTime.of(1, 1, 1, 5), 0)
        assert earliest < later
        assert later >= earliest
        assert sorted([later, earliest]) == [earliest, later]

    def test_same_instant_and_difference_before_year_one(self):
        """Test instant queries work when to_utc() would raise."""
        a = DateTimeTZ(DateTime.of(1, 1, 1, 0, 0), 60)
        b = DateTimeTZ(DateTime.of(1, 1, 1, 2), 180)
        assert a.same_instant(b)
        assert a != b
        assert DateTimeTZ(DateTime.of(1, 1, 1, 5), 0) - a == Duration.of(hours=6)

    def test_to_utc_raises_after_year_9999(self):
        """Test 9999-12-31T23:00-02:00 has no UTC DateTime."""
        value = DateTimeTZ(DateTime.of(9999, 12, 31, 23), -120)
        with pytest.raises(InvalidDateError):
            value.to_utc()

    def test_ordering_and_difference_after_year_9999(self):
        """Test instant queries work past the last representable UTC day."""
        latest = DateTimeTZ(DateTime.of(9999, 12, 31, 23), -120)
        earlier = DateTimeTZ(DateTime.of(9999, 12, 31, 23, 30), 0)
        assert latest > earlier
        assert not latest.same_instant(earlier)
        assert latest.difference(earlier) == Duration.of(hours=1, minutes=30)

    def test_difference_across_whole_range(self):
        """Test the span between both ends is exact."""
        earliest = DateTimeTZ(DateTime.of(1, 1, 1, 0, 0), 60)
        latest = DateTimeTZ(DateTime.of(9999, 12, 31, 23), -120)
        span = latest - earliest
        assert span.total_hours() == 3_652_059 * 24 + 2


@pytest.mark.unit
class TestDateTimeTZCanonicalString:
    """Test canonical string form and parsing."""

    @pytest.mark.parametrize(
        ("offset", "suffix"),
        [
            (0, "+00:00"),
            (330, "+05:30"),
            (-300, "-05:00"),
            (-570, "-09:30"),
            (840, "+14:00"),
        ],
    )
    def test_canonical_offset_suffix(self, offset, suffix):
        """Test offsets render as +HH:MM or -HH:MM."""
        value = DateTimeTZ(DateTime.of(2024, 6, 1, 9), offset)
        assert value.to_canonical_string() == f"2024-06-01T09:00:00.000{suffix}"

    def test_parse(self):
        """Test parsing canonical text."""
        assert DateTimeTZ.parse("2024-06-01T09:00:00.000-05:00") == DateTimeTZ(
            DateTime.of(2024, 6, 1, 9), -300
        )

    @pytest.mark.parametrize(
        "text",
        [
            "2024-06-01T09:00:00.000",
            "2024-06-01T09:00:00.000Z",
            "2024-06-01T09:00:00.000+0500",
            "2024-06-01T09:00:00.000+5:00",
            "2024-06-01T09:00:00.000-00:00",  # UTC is written +00:00
            "2024-06-01T09:00:00.000+05:60",
        ],
    )
    def test_parse_rejects_malformed(self, text):
        """Test malformed text raises ParseError."""
        with pytest.raises(ParseError):
            DateTimeTZ.parse(text)

    def test_parse_rejects_offset_out_of_range(self):
        """Test +15:00 raises ParseError caused by InvalidOffsetError."""
        with pytest.raises(ParseError) as exc_info:
            DateTimeTZ.parse("2024-06-01T09:00:00.000+15:00")
        assert isinstance(exc_info.value.__cause__, InvalidOffsetError)
