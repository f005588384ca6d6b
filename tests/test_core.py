"""Tests for the suggestion orchestrator."""

import random

import pytest

from taxvoice.funding import FundingAction
from taxvoice.suggestions.core import (
    BUDGET_CONCERN_DESCRIPTION,
    ResourceSuggester,
    derive_concerns,
    match_entry,
    rank_class,
    rank_thresholds,
)
from taxvoice.suggestions.models import (
    BadgeType,
    RankClass,
    ReasonType,
    Tag,
    UserConcern,
)

from conftest import make_entry


def names(results):
    return [r.name for r in results]


class TestDeriveConcerns:
    def test_slider_value_below_range_is_slash(self):
        concern = UserConcern(id="medicaid", description="Medicaid", funding_level=-80)
        derived = derive_concerns([concern])
        assert [str(t) for t in derived[0].tags] == [
            "medicaid_slash", "health_slash", "social_safety_net_slash", "poverty_reduction_slash",
        ]

    def test_budget_concern_added(self):
        derived = derive_concerns([], balance_budget=True)
        assert len(derived) == 1
        assert derived[0].description == BUDGET_CONCERN_DESCRIPTION
        assert Tag("fiscal_responsibility") in derived[0].tags

    def test_repeated_id_is_one_concern(self, medicaid_slash):
        medicaid_fund = UserConcern(id="medicaid", description="Medicaid", funding_level=2)
        derived = derive_concerns([medicaid_fund, medicaid_slash])
        assert len(derived) == 1
        assert derived[0].action is FundingAction.SLASH
        assert str(derived[0].tags[0]) == "medicaid_slash"

    def test_repeated_id_keeps_first_position(self, medicaid_slash, snap_slash):
        medicaid_fund = UserConcern(id="medicaid", description="Medicaid", funding_level=2)
        derived = derive_concerns([medicaid_fund, snap_slash, medicaid_slash])
        assert [d.id for d in derived] == ["medicaid", "snap"]
        assert derived[0].action is FundingAction.SLASH


class TestMatchEntry:
    def test_one_count_per_concern(self, entries, medicaid_slash):
        # Alpha carries both medicaid_slash and health_slash
        count, reasons = match_entry(entries[0], derive_concerns([medicaid_slash]))
        assert count == 1
        assert len(reasons) == 1
        assert reasons[0].actionable_tag == "Medicaid"
        assert reasons[0].type is ReasonType.OPPOSES

    def test_counts_distinct_concerns(self, entries, medicaid_slash, snap_slash):
        count, reasons = match_entry(entries[0], derive_concerns([medicaid_slash, snap_slash]))
        assert count == 2
        assert [r.original_concern for r in reasons] == [
            "slashing funding for Medicaid",
            "slashing funding for Food stamps",
        ]

    def test_opposite_action_does_not_match(self, entries):
        snap_fund = UserConcern(id="snap", description="Food stamps (SNAP)", funding_level=2)
        count, reasons = match_entry(entries[0], derive_concerns([snap_fund]))
        assert count == 0
        assert reasons == []


class TestRankTiers:
    def test_thresholds(self):
        assert rank_thresholds([3, 3, 2, 1]) == (3, 2)
        assert rank_thresholds([2, 1, 1]) == (2, None)
        assert rank_thresholds([1, 1, 0]) == (None, None)

    def test_rank_class(self):
        assert rank_class(3, 3, 2) is RankClass.BEST
        assert rank_class(2, 3, 2) is RankClass.TOP
        assert rank_class(1, 3, 2) is RankClass.YOUR
        assert rank_class(0, 3, 2) is None
        assert rank_class(1, None, None) is RankClass.YOUR


class TestResourceSuggester:
    def test_matched_only_by_default(self, catalog, rng, medicaid_slash, snap_slash, pentagon_slash):
        results = ResourceSuggester(catalog, rng).suggest([medicaid_slash, snap_slash, pentagon_slash])
        assert names(results) == ["Alpha Health", "Beta Budget", "Gamma Peace"]
        assert [r.match_count for r in results] == [2, 1, 1]

    def test_ranks(self, catalog, rng, medicaid_slash, snap_slash, pentagon_slash):
        results = ResourceSuggester(catalog, rng).suggest([medicaid_slash, snap_slash, pentagon_slash])
        assert [r.rank for r in results] == [RankClass.BEST, RankClass.YOUR, RankClass.YOUR]

    def test_each_resource_has_one_rank_badge(self, catalog, medicaid_slash, snap_slash, pentagon_slash):
        rank_badges = {BadgeType.BEST_MATCH, BadgeType.TOP_MATCH, BadgeType.YOUR_MATCH}
        for seed in range(25):
            results = ResourceSuggester(catalog, random.Random(seed)).suggest(
                [medicaid_slash, snap_slash, pentagon_slash])
            top = max(r.match_count for r in results)
            for resource in results:
                assert 1 <= len(resource.badges) <= 3
                assert len(rank_badges & set(resource.badges)) == 1
                if BadgeType.BEST_MATCH in resource.badges:
                    assert resource.match_count == top

    def test_no_concerns_returns_everything_as_general_interest(self, catalog, rng):
        results = ResourceSuggester(catalog, rng).suggest([])
        assert len(results) == len(catalog)
        for resource in results:
            assert resource.badges == [BadgeType.GENERAL_INTEREST]
            assert resource.rank is None
            assert resource.match_count == 0

    def test_budget_flag_alone(self, catalog, rng):
        results = ResourceSuggester(catalog, rng).suggest([], balance_budget=True)
        assert names(results) == ["Beta Budget"]
        reason = results[0].matched_reasons[0]
        assert reason.type is ReasonType.GENERAL
        assert reason.original_concern == (
            "reviewing spending on Balancing the Budget & Reducing National Debt"
        )

    def test_budget_flag_counts_as_a_match(self, catalog, rng, pentagon_slash):
        results = ResourceSuggester(catalog, rng).suggest([pentagon_slash], balance_budget=True)
        beta = next(r for r in results if r.name == "Beta Budget")
        assert beta.match_count == 2
        assert beta.rank is RankClass.BEST

    def test_sort_order(self, rng):
        from taxvoice.suggestions.catalog import Catalog
        from taxvoice.suggestions.models import Prominence

        catalog = Catalog([
            make_entry("zeta", ["snap_slash"], prominence=Prominence.LOW),
            make_entry("Yak", ["snap_slash"], prominence=Prominence.HIGH),
            make_entry("able", ["snap_slash"], prominence=Prominence.LOW),
            make_entry("Xylo", ["snap_slash", "food_security_slash"], prominence=Prominence.LOW),
        ])
        snap = UserConcern(id="snap", description="SNAP", funding_level=-2)
        results = ResourceSuggester(catalog, rng).suggest([snap])
        assert names(results) == ["Yak", "able", "Xylo", "zeta"]

    def test_include_unmatched(self, catalog, rng, medicaid_slash):
        results = ResourceSuggester(catalog, rng).suggest([medicaid_slash], include_unmatched=True)
        assert len(results) == len(catalog)
        assert results[0].name == "Alpha Health"
        unmatched = [r for r in results if r.match_count == 0]
        assert all(r.badges == [BadgeType.GENERAL_INTEREST] for r in unmatched)
        assert all(r.relevance.startswith("Works on issues related to") for r in unmatched)

    def test_max_suggestions(self, catalog, rng):
        results = ResourceSuggester(catalog, rng, max_suggestions=2).suggest([])
        assert len(results) == 2

    @pytest.mark.parametrize("cap", [0, -1])
    def test_max_suggestions_must_be_positive(self, catalog, rng, cap):
        with pytest.raises(ValueError, match="max_suggestions"):
            ResourceSuggester(catalog, rng, max_suggestions=cap)

    def test_duplicate_selection_counts_once(self, catalog, rng, medicaid_slash):
        results = ResourceSuggester(catalog, rng).suggest([medicaid_slash, medicaid_slash])
        assert names(results) == ["Alpha Health"]
        assert results[0].match_count == 1
        assert results[0].rank is RankClass.YOUR
        assert BadgeType.BEST_MATCH not in results[0].badges
        assert len(results[0].matched_reasons) == 1

    def test_urls_are_unique(self, catalog, rng):
        results = ResourceSuggester(catalog, rng).suggest([])
        assert len({r.url for r in results}) == len(results)

    def test_same_seed_same_output(self, catalog, medicaid_slash, snap_slash, pentagon_slash):
        concerns = [medicaid_slash, snap_slash, pentagon_slash]
        first = ResourceSuggester(catalog, random.Random(7)).suggest(concerns)
        second = ResourceSuggester(catalog, random.Random(7)).suggest(concerns)
        assert [r.to_dict() for r in first] == [r.to_dict() for r in second]

    def test_seed_only_changes_badges(self, catalog, medicaid_slash, snap_slash, pentagon_slash):
        concerns = [medicaid_slash, snap_slash, pentagon_slash]
        first = ResourceSuggester(catalog, random.Random(1)).suggest(concerns)
        second = ResourceSuggester(catalog, random.Random(2)).suggest(concerns)
        assert names(first) == names(second)
        assert [r.match_count for r in first] == [r.match_count for r in second]
        assert [r.matched_reasons for r in first] == [r.matched_reasons for r in second]

    @pytest.mark.parametrize("aggressiveness,phrase", [
        (10, "may be a good fit for"),
        (30, "aligns well with"),
        (90, "strongly aligns with"),
    ])
    def test_relevance_wording(self, catalog, rng, medicaid_slash, snap_slash, aggressiveness, phrase):
        results = ResourceSuggester(catalog, rng).suggest([medicaid_slash, snap_slash], aggressiveness)
        assert results[0].relevance == (
            f"Alpha Health {phrase} your concern about slashing funding for Medicaid "
            "through its work on Medicaid. It also addresses 1 other concern you highlighted."
        )

    def test_relevance_mentions_fiscal_responsibility(self, catalog, rng, pentagon_slash):
        results = ResourceSuggester(catalog, rng).suggest([pentagon_slash], balance_budget=True)
        gamma = next(r for r in results if r.name == "Gamma Peace")
        beta = next(r for r in results if r.name == "Beta Budget")
        assert "fiscal responsibility" not in gamma.relevance
        assert beta.relevance.endswith("It also advocates for fiscal responsibility.")


class TestDefaultCatalog:
    def test_medicaid_slash_finds_cato(self, rng):
        concern = UserConcern(id="medicaid", description="Medicaid", category="Health", funding_level=-80)
        results = ResourceSuggester(rng=rng).suggest([concern])
        cato = next(r for r in results if r.name == "Cato Institute")
        assert cato.match_count == 1
        assert cato.matched_reasons[0].type is ReasonType.OPPOSES
        assert cato.matched_reasons[0].original_concern == "slashing funding for Medicaid"

    def test_every_result_has_badges(self, rng):
        concerns = [
            UserConcern(id="medicaid", description="Medicaid", funding_level=2),
            UserConcern(id="pentagon", description="Pentagon", funding_level=-2),
            UserConcern(id="nasa", description="NASA", funding_level=0),
        ]
        results = ResourceSuggester(rng=rng).suggest(concerns, balance_budget=True)
        assert results
        for resource in results:
            assert 1 <= len(resource.badges) <= 3
            assert resource.match_count >= 1
