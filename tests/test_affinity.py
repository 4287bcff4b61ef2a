"""Tests for affinity strategies."""

import pytest

from inputmask import (
    MIN_AFFINITY,
    AffinityStrategy,
    CaretString,
    calculate_affinity,
    get_or_create_mask,
)

DIGITS = get_or_create_mask("[0000]")
LETTERS = get_or_create_mask("[AAAA]")
PHONE = get_or_create_mask("+1 ([000]) [000]-[0000]")


class TestWholeString:
    def test_accepting_everything_beats_dropping(self) -> None:
        assert calculate_affinity(DIGITS, "1234") > calculate_affinity(LETTERS, "1234")

    def test_value(self) -> None:
        assert calculate_affinity(DIGITS, "1234") == 4
        assert calculate_affinity(LETTERS, "1234") == -4
        assert calculate_affinity(DIGITS, "12ab") == 0

    def test_stable(self) -> None:
        text = CaretString("12a4", 2)
        assert calculate_affinity(PHONE, text) == calculate_affinity(PHONE, text)

    def test_ignores_caret(self) -> None:
        assert calculate_affinity(PHONE, CaretString("202", 0)) == calculate_affinity(PHONE, "202")

    def test_is_default(self) -> None:
        assert AffinityStrategy.WHOLE_STRING.score(DIGITS, "12") == calculate_affinity(DIGITS, "12")


class TestPrefix:
    def test_common_prefix(self) -> None:
        assert AffinityStrategy.PREFIX.score(PHONE, "+1 (20") == 6

    def test_inserted_literal_breaks_prefix(self) -> None:
        assert AffinityStrategy.PREFIX.score(PHONE, "202") == 0

    def test_matches_whole_digits(self) -> None:
        assert AffinityStrategy.PREFIX.score(DIGITS, "123") == 3


class TestCapacity:
    def test_room_left(self) -> None:
        assert AffinityStrategy.CAPACITY.score(DIGITS, "12") == -2

    def test_exact_fit(self) -> None:
        assert AffinityStrategy.CAPACITY.score(DIGITS, "1234") == 0

    def test_overflow(self) -> None:
        assert AffinityStrategy.CAPACITY.score(DIGITS, "12345") == MIN_AFFINITY


class TestExtractedValueCapacity:
    def test_room_left(self) -> None:
        assert AffinityStrategy.EXTRACTED_VALUE_CAPACITY.score(PHONE, "202") == -7

    def test_full(self) -> None:
        assert AffinityStrategy.EXTRACTED_VALUE_CAPACITY.score(DIGITS, "123456") == 0


class TestFromName:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("whole_string", AffinityStrategy.WHOLE_STRING),
            ("PREFIX", AffinityStrategy.PREFIX),
            ("extracted-value-capacity", AffinityStrategy.EXTRACTED_VALUE_CAPACITY),
            (AffinityStrategy.CAPACITY, AffinityStrategy.CAPACITY),
        ],
    )
    def test_lookup(self, name, expected) -> None:
        assert AffinityStrategy.from_name(name) is expected

    def test_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown affinity strategy"):
            AffinityStrategy.from_name("fuzzy")
