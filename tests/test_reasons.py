"""Tests for matched-reason text."""

import pytest

from taxvoice.funding import FundingAction
from taxvoice.suggestions.models import ReasonType, Tag
from taxvoice.suggestions.reasons import (
    clean_item_description,
    format_tag_label,
    generate_matched_reason,
)


class TestGenerateMatchedReason:
    def test_health_fund(self):
        reason = generate_matched_reason("health_fund", "Medicaid (Health Coverage)", "fund")
        assert reason.type is ReasonType.SUPPORTS
        assert reason.actionable_tag == "Health"
        assert reason.description == "Health"
        assert reason.original_concern == "increasing funding for Medicaid (Health Coverage)"

    @pytest.mark.parametrize("tag,expected", [
        ("pentagon_slash", ReasonType.OPPOSES),
        ("pentagon_cut", ReasonType.OPPOSES),
        ("va_review", ReasonType.REVIEWS),
        ("criminal_justice_reform", ReasonType.REVIEWS),
        ("snap_fund", ReasonType.SUPPORTS),
        ("fiscal_responsibility", ReasonType.GENERAL),
    ])
    def test_type_from_tag(self, tag, expected):
        assert generate_matched_reason(tag, "Anything", FundingAction.REVIEW).type is expected

    def test_accepts_tag_objects(self):
        reason = generate_matched_reason(Tag("military_spending", FundingAction.SLASH), "Pentagon", "slash")
        assert reason.actionable_tag == "Military"
        assert reason.original_concern == "slashing funding for Pentagon"

    def test_verb_phrases(self):
        assert generate_matched_reason("nasa_review", "NASA", "review").original_concern == (
            "reviewing spending on National Aeronautics and Space Administration"
        )
        assert generate_matched_reason("snap_slash", "Food stamps (SNAP)", "slash").original_concern == (
            "slashing funding for Food stamps"
        )

    def test_deterministic(self):
        first = generate_matched_reason("k12_schools_fund", "Dept. of Education - K-12 Schools", "fund")
        second = generate_matched_reason("k12_schools_fund", "Dept. of Education - K-12 Schools", "fund")
        assert first == second
        assert first.original_concern == "increasing funding for K-12 Schools"


class TestFormatTagLabel:
    @pytest.mark.parametrize("text,label", [
        ("health_fund", "Health"),
        ("social_safety_net_slash", "Social Safety Net"),
        ("military_spending_slash", "Military"),
        ("healthcare_policy_review", "Healthcare"),
        ("pact_act_fund", "PACT Act"),
        ("fema_drf_fund", "FEMA DRF"),
        ("k12_schools_fund", "K12 Schools"),
        ("debt_reduction", "Debt Reduction"),
        ("spending", "Spending"),
    ])
    def test_labels(self, text, label):
        assert format_tag_label(Tag.parse(text)) == label


class TestCleanItemDescription:
    @pytest.mark.parametrize("raw,cleaned", [
        ("Pentagon - Contractors", "Contractors"),
        ("FEMA - Disaster Relief Fund", "Disaster Relief Fund"),
        ("Federal Court System - Public Defenders", "Public Defenders"),
        ("Veterans' Affairs (VA)", "Veterans' Affairs"),
        ("Nat'l Oceanic & Atmospheric Administration (NOAA)", "National Oceanic & Atmospheric Administration"),
        ("Dept. of Housing and Urban Development", "Department of Housing and Urban Development"),
        ("CDC", "Centers for Disease Control and Prevention"),
        ("Israel wars (Pentagon & aid)", "Israel wars (Pentagon & aid)"),
        ("  Public   transit ", "Public transit"),
        ("cuts to medicaid and snap", "cuts to Medicaid and SNAP"),
        ("FEDERAL PRISONS", "Federal Prisons"),
    ])
    def test_cleaning(self, raw, cleaned):
        assert clean_item_description(raw) == cleaned

    def test_pentagon_alone_is_kept(self):
        assert clean_item_description("Pentagon") == "Pentagon"
