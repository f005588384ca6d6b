"""Tests for data models."""

import json

import pytest

from taxvoice.funding import FundingAction
from taxvoice.suggestions.models import (
    BadgeProfile,
    BadgeType,
    MatchedReason,
    OrganizationEntry,
    OrgType,
    Prominence,
    RankClass,
    ReasonType,
    SuggestedResource,
    Tag,
    UserConcern,
)


class TestTag:
    def test_parse_canonical(self):
        tag = Tag.parse("health_fund")
        assert tag.subject == "health"
        assert tag.action is FundingAction.FUND

    def test_parse_multi_word_subject(self):
        tag = Tag.parse("social_safety_net_slash")
        assert tag == Tag("social_safety_net", FundingAction.SLASH)

    def test_parse_bare(self):
        tag = Tag.parse("fiscal_responsibility")
        assert tag.subject == "fiscal_responsibility"
        assert tag.action is None

    def test_parse_legacy_suffixes(self):
        assert Tag.parse("medicaid_cut") == Tag("medicaid", FundingAction.SLASH)
        assert Tag.parse("criminal_justice_reform") == Tag("criminal_justice", FundingAction.REVIEW)

    def test_parse_does_not_split_lookalike(self):
        assert Tag.parse("pact_act").action is None
        assert Tag.parse("fund").subject == "fund"

    def test_str(self):
        assert str(Tag("pentagon", FundingAction.SLASH)) == "pentagon_slash"
        assert str(Tag("debt_reduction")) == "debt_reduction"

    def test_legacy_tag_prints_canonical(self):
        assert str(Tag.parse("nuclear_weapons_cut")) == "nuclear_weapons_slash"

    def test_hashable_equality(self):
        assert {Tag.parse("snap_fund"), Tag("snap", FundingAction.FUND)} == {Tag("snap", FundingAction.FUND)}

    def test_is_canonical(self):
        assert Tag("health", FundingAction.FUND).is_canonical
        assert not Tag("health_fund").is_canonical


class TestOrganizationEntry:
    def test_from_dict_minimal(self):
        entry = OrganizationEntry.from_dict({
            "name": "Test Org",
            "url": "https://test.example.org/",
            "advocacy_tags": ("health_fund",),
        })
        assert entry.name == "Test Org"
        assert entry.prominence is Prominence.MEDIUM
        assert entry.focus_type is None
        assert entry.badge_profile is BadgeProfile.DOUBLE_DIVERSE
        assert entry.advocacy_tags == frozenset({Tag("health", FundingAction.FUND)})
        assert entry.icon == "Info"

    def test_from_dict_full(self):
        entry = OrganizationEntry.from_dict({
            "name": "Test Org",
            "url": "https://test.example.org/",
            "description": "Does things",
            "main_category": "Healthcare",
            "prominence": "high",
            "focus_type": "niche",
            "org_types": ("legal", "think-tank"),
            "advocacy_tags": ("health_fund", "single_payer"),
            "badge_profile": "single-prominent",
            "icon": "HeartPulse",
        })
        assert entry.prominence is Prominence.HIGH
        assert entry.org_types == frozenset({OrgType.LEGAL, OrgType.THINK_TANK})
        assert Tag("single_payer") in entry.advocacy_tags
        assert entry.badge_profile is BadgeProfile.SINGLE_PROMINENT

    def test_from_dict_rejects_unknown_org_type(self):
        with pytest.raises(ValueError):
            OrganizationEntry.from_dict({"name": "X", "url": "u", "org_types": ("lobbyist",)})


class TestUserConcern:
    def test_level_scale(self):
        assert UserConcern(id="a", description="A", funding_level=-2).action is FundingAction.SLASH
        assert UserConcern(id="a", description="A", funding_level=0).action is FundingAction.REVIEW
        assert UserConcern(id="a", description="A", funding_level=1).action is FundingAction.FUND

    def test_slider_scale(self):
        assert UserConcern(id="a", description="A", funding_level=95).action is FundingAction.FUND
        assert UserConcern(id="a", description="A", funding_level=50).action is FundingAction.REVIEW
        assert UserConcern(id="a", description="A", funding_level=20).action is FundingAction.SLASH

    def test_negative_slider_value_buckets_to_slash(self):
        concern = UserConcern(id="medicaid", description="Medicaid", funding_level=-80)
        assert concern.level == -2
        assert concern.action is FundingAction.SLASH

    @pytest.mark.parametrize("position", [0, 1, 2])
    def test_explicit_slider_position_is_not_a_level(self, position):
        concern = UserConcern(id="medicaid", description="Medicaid", slider_value=position)
        assert concern.level == -2
        assert concern.action is FundingAction.SLASH

    def test_slider_position_overrides_funding_level(self):
        concern = UserConcern(id="medicaid", description="Medicaid", funding_level=2, slider_value=50)
        assert concern.action is FundingAction.REVIEW


class TestSuggestedResource:
    def test_to_dict(self, entries):
        resource = SuggestedResource(
            entry=entries[0],
            match_count=2,
            matched_reasons=[MatchedReason(ReasonType.OPPOSES, "Health", "slashing funding for Medicaid", "Health")],
            badges=[BadgeType.BEST_MATCH, BadgeType.HIGH_IMPACT],
            rank=RankClass.BEST,
            relevance="Alpha Health strongly aligns with your concern.",
        )
        d = resource.to_dict()
        assert d["name"] == "Alpha Health"
        assert d["matchCount"] == 2
        assert d["badges"] == ["Best Match", "High Impact"]
        assert d["rank"] == "best"
        assert d["matchedReasons"][0] == {
            "type": "opposes",
            "description": "Health",
            "originalConcern": "slashing funding for Medicaid",
            "actionableTag": "Health",
        }
        assert d["orgTypeTags"] == ["activism", "grassroots"]

    def test_to_dict_is_json_serialisable(self, entries):
        resource = SuggestedResource(entry=entries[4], badges=[BadgeType.GENERAL_INTEREST])
        text = json.dumps(resource.to_dict())
        assert '"General Interest"' in text
        assert '"rank": null' in text
