import pytest

from replypilot.services.tone_policy import (
    TONE_BANDS,
    coerce_rating,
    format_rating,
    resolve_tone,
)

THANKFUL, POSITIVE, GENTLE, APOLOGETIC, SERIOUS = (instruction for _, instruction in TONE_BANDS)


class TestResolveTone:
    @pytest.mark.parametrize("rating", [5, 6, 100, 5.0])
    def test_thankful_band(self, rating):
        assert resolve_tone(rating) == THANKFUL
        assert "thankful" in THANKFUL

    def test_positive_band(self):
        assert resolve_tone(4) == POSITIVE

    def test_gently_apologetic_band(self):
        assert resolve_tone(3) == GENTLE

    def test_clearly_apologetic_band(self):
        assert resolve_tone(2) == APOLOGETIC
        assert "contact support" in APOLOGETIC

    @pytest.mark.parametrize("rating", [1, 0, -1])
    def test_serious_apology_band(self, rating):
        assert resolve_tone(rating) == SERIOUS
        assert "contact support" in SERIOUS

    @pytest.mark.parametrize("rating", [4.5, 3.5, 1.5])
    def test_fractional_ratings_between_bands_match_nothing(self, rating):
        assert resolve_tone(rating) == ""


class TestCoerceRating:
    @pytest.mark.parametrize(
        "value, expected",
        [(4, 4.0), ("3", 3.0), (" 2 ", 2.0), (4.5, 4.5), (0, 0.0), ("-1", -1.0)],
    )
    def test_numeric_values(self, value, expected):
        assert coerce_rating(value) == expected

    @pytest.mark.parametrize("value", [None, "", "five", True, [], {}, "nan", "inf"])
    def test_unusable_values_default_to_five(self, value):
        assert coerce_rating(value) == 5.0

    @pytest.mark.parametrize("value", [10**400, -(10**400), "1e400"])
    def test_out_of_float_range_defaults_to_five(self, value):
        assert coerce_rating(value) == 5.0


def test_format_rating():
    assert format_rating(5.0) == "5"
    assert format_rating(4.5) == "4.5"
    assert format_rating(-1.0) == "-1"
