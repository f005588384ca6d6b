"""Tests for funding-level and tone helpers."""

import pytest

from taxvoice.funding import (
    FundingAction,
    action_for_level,
    describe_funding_level,
    funding_level_to_slider,
    normalize_funding_level,
    slider_to_funding_level,
    tone_bucket,
    tone_label,
)


class TestSliderBuckets:
    @pytest.mark.parametrize("value,level", [
        (0, -2), (10, -2), (11, -1), (35, -1), (36, 0),
        (65, 0), (66, 1), (90, 1), (91, 2), (100, 2),
    ])
    def test_boundaries(self, value, level):
        assert slider_to_funding_level(value) == level

    def test_level_to_slider_lands_in_same_bucket(self):
        for level in (-2, -1, 0, 1, 2):
            assert slider_to_funding_level(funding_level_to_slider(level)) == level

    def test_unknown_level_defaults_to_middle(self):
        assert funding_level_to_slider(7) == 50

    def test_normalize_keeps_levels(self):
        assert normalize_funding_level(-1) == -1
        assert normalize_funding_level(0.4) == 0.4
        assert normalize_funding_level(80) == 1


class TestActions:
    def test_thresholds(self):
        assert action_for_level(-2) is FundingAction.SLASH
        assert action_for_level(-0.6) is FundingAction.SLASH
        assert action_for_level(-0.5) is FundingAction.REVIEW
        assert action_for_level(0.5) is FundingAction.REVIEW
        assert action_for_level(0.6) is FundingAction.FUND


class TestTone:
    @pytest.mark.parametrize("aggressiveness,bucket,label", [
        (0, 0, "Kind"), (24, 0, "Kind"), (25, 1, "Concerned"), (49, 1, "Concerned"),
        (50, 2, "Stern"), (74, 2, "Stern"), (75, 3, "Angry"), (100, 3, "Angry"),
    ])
    def test_buckets(self, aggressiveness, bucket, label):
        assert tone_bucket(aggressiveness) == bucket
        assert tone_label(aggressiveness) == label

    def test_out_of_range_is_clamped(self):
        assert tone_bucket(-10) == 0
        assert tone_bucket(250) == 3


class TestDescriptions:
    def test_long_and_short(self):
        assert describe_funding_level(-2).startswith("Slash Heavily (")
        assert describe_funding_level(2, short=True) == "Fund More"

    def test_unknown_level_falls_back_to_review(self):
        assert describe_funding_level(9, short=True) == "Improve Efficiency/Review"
