"""Tests for the default recipe content rules."""

import math

import pytest

from recipectl.domain.rules import TAG_PATTERN, Rule, RuleSet, bounded_rule, pattern_rule


class TestRule:
    def test_accepts_delegates_to_predicate(self) -> None:
        rule = Rule[int](name="even", message="Must be even.", predicate=lambda n: n % 2 == 0)
        assert rule.accepts(4)
        assert not rule.accepts(3)

    def test_pattern_rule_length_cap(self) -> None:
        rule = pattern_rule("tag", "msg", TAG_PATTERN, max_length=3)
        assert rule.accepts("abc")
        assert not rule.accepts("abcd")

    def test_bounded_rule_exclusive_minimum(self) -> None:
        rule = bounded_rule("q", "msg", minimum=0, maximum=5, inclusive_minimum=False)
        assert not rule.accepts(0)
        assert rule.accepts(0.01)
        assert rule.accepts(5)
        assert not rule.accepts(5.01)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_bounded_rule_rejects_non_finite(self, value: float) -> None:
        rule = bounded_rule("q", "msg", minimum=-math.inf, maximum=math.inf)
        assert not rule.accepts(value)


class TestDefaultRules:
    @pytest.mark.parametrize(
        ("field", "value", "expected"),
        [
            ("title", "Chicken Rice 2", True),
            ("title", "Nasi  Lemak", True),
            ("title", " Leading space", False),
            ("title", "Mac & Cheese", False),
            ("description", "Anything at all: 100% ok!", True),
            ("description", "", False),
            ("step", "Stir.", True),
            ("step", " ", False),
            ("tag", "vegan", True),
            ("tag", "under30", True),
            ("tag", "low carb", False),
            ("ingredient_name", "Soy Sauce", True),
            ("ingredient_name", "", False),
            ("unit", "tbsp", True),
            ("unit", "ml2", False),
            ("quantity", 0.5, True),
            ("quantity", 0.0, False),
            ("quantity", 10_000.0, True),
            ("quantity", 10_000.5, False),
            ("price_per_unit", 0.0, True),
            ("price_per_unit", -0.01, False),
            ("price_per_unit", 10_000.0, True),
        ],
    )
    def test_field_rules(self, rules: RuleSet, field: str, value: object, expected: bool) -> None:
        assert getattr(rules, field).accepts(value) is expected

    def test_limits_are_configurable(self) -> None:
        rules = RuleSet.default(
            title_max_length=5,
            tag_max_length=3,
            max_quantity=2,
            max_price_per_unit=1,
        )
        assert not rules.title.accepts("Laksa Soup")
        assert not rules.tag.accepts("four")
        assert not rules.quantity.accepts(3)
        assert not rules.price_per_unit.accepts(1.5)

    def test_messages_mention_limits(self) -> None:
        rules = RuleSet.default(title_max_length=42, max_quantity=250)
        assert "42" in rules.title.message
        assert "250" in rules.quantity.message

    def test_every_rule_named_after_its_field(self, rules: RuleSet) -> None:
        for field in (
            "title",
            "description",
            "step",
            "tag",
            "ingredient_name",
            "quantity",
            "unit",
            "price_per_unit",
        ):
            assert getattr(rules, field).name == field
