"""Tests for AI prompt generation."""

import pytest

from taxvoice.prompt import (
    DEFAULT_CATEGORY,
    TONE_GUIDE,
    generate_compact_prompt,
    generate_prompt,
    prepare_items_for_prompt,
    slider_value,
)
from taxvoice.suggestions.models import UserConcern


def items():
    return [
        UserConcern(id="pentagon", description="Pentagon", category="War and Weapons", funding_level=5),
        UserConcern(id="medicaid", description="Medicaid", category="Health", funding_level=1),
        UserConcern(id="misc", description="Something Else", funding_level=50),
    ]


class TestGeneratePrompt:
    def test_tone(self):
        prompt = generate_prompt(items(), 60)
        assert "The user desires the email to have a Stern tone." in prompt
        assert "aggressiveness level of 60/100 (tone level 2 of 3)" in prompt
        assert TONE_GUIDE == "0-24: Kind, 25-49: Concerned, 50-74: Stern, 75-100: Angry"

    def test_placeholders(self):
        prompt = generate_prompt(items(), 10)
        assert "Name: [Constituent Name]" in prompt
        assert "Location: [Constituent Location]" in prompt

    def test_user_details(self):
        prompt = generate_prompt(items(), 10, user_name="Pat", user_location="Dayton, OH")
        assert "Name: Pat" in prompt
        assert "Location: Dayton, OH" in prompt

    def test_items_grouped_by_category(self):
        prompt = generate_prompt(items(), 10)
        health = prompt.index('For the category "Health":')
        other = prompt.index(f'For the category "{DEFAULT_CATEGORY}":')
        war = prompt.index('For the category "War and Weapons":')
        assert health < other < war
        assert ('- For "Pentagon": The user wants to Slash Heavily (e.g., eliminate or drastically '
                'reduce funding). This corresponds to a funding preference of 5/100') in prompt
        assert "funding preference of 78/100" in prompt

    def test_no_items(self):
        prompt = generate_prompt([], 50)
        assert "has not selected any specific items" in prompt
        assert "IMPORTANT" not in prompt

    def test_budget(self):
        prompt = generate_prompt([], 50, balance_budget=True)
        assert "has not selected any specific items" not in prompt
        assert "IMPORTANT: The user also expressed a strong preference for balancing the budget" in prompt

    def test_ends_with_newline(self):
        assert generate_prompt(items(), 50).endswith("Do not include a subject line.\n")


class TestCompactPrompt:
    def test_short_labels(self):
        prompt = generate_compact_prompt(items(), 80)
        assert "Tone: Angry (Aggressiveness: 80/100." in prompt
        assert '- Item: "Pentagon", User Stance: Slash Heavily (Preference: 5/100' in prompt
        assert not prompt.endswith("\n")


class TestPrepareItems:
    def test_joins_slider_values(self):
        selected = {"medicaid": UserConcern(id="medicaid", description="Medicaid", category="Health")}
        prepared = prepare_items_for_prompt(selected, {"medicaid": 20, "ghost": 90})
        assert prepared == [UserConcern(id="medicaid", description="Medicaid", category="Health", slider_value=20)]

    def test_slider_value_from_level(self):
        assert slider_value(UserConcern(id="a", description="A", funding_level=-2)) == 5
        assert slider_value(UserConcern(id="a", description="A", funding_level=70)) == 70

    def test_explicit_slider_value_wins(self):
        assert slider_value(UserConcern(id="a", description="A", funding_level=2, slider_value=0)) == 0


class TestLowSliderPositions:
    @pytest.mark.parametrize("position", [0, 1, 2])
    def test_low_slider_is_slash(self, position):
        item = UserConcern(id="medicaid", description="Medicaid", category="Health", slider_value=position)
        prompt = generate_prompt([item], 50)
        assert '- For "Medicaid": The user wants to Slash Heavily' in prompt
        assert f"funding preference of {position}/100" in prompt

    def test_compact_low_slider_is_slash(self):
        item = UserConcern(id="medicaid", description="Medicaid", slider_value=1)
        assert "User Stance: Slash Heavily (Preference: 1/100" in generate_compact_prompt([item], 50)
