"""Recommended laboratory tests by age."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vaxband.core.models import LabRecommendation, LabRule


if TYPE_CHECKING:
    from collections.abc import Sequence

    from vaxband.core.models import AgeBreakdown


LAB_RULES: tuple[LabRule, ...] = (
    LabRule(
        predicate=lambda years: years >= 2,
        test_name="Quantiferon Gold TB Test",
        rationale="Recommended for ages 2 years and older",
    ),
    LabRule(
        predicate=lambda years: 18 <= years <= 44,
        test_name="RPR Syphilis Test",
        rationale="Recommended for ages 18–44",
    ),
    LabRule(
        predicate=lambda years: 18 <= years <= 24,
        test_name="NAAT Gonorrhoea Test",
        rationale="Recommended for ages 18–24",
    ),
)


def recommend_labs(
    age: AgeBreakdown, rules: Sequence[LabRule] = LAB_RULES
) -> list[LabRecommendation]:
    """Get the lab tests recommended for an age.

    Rules are independent and checked in order against whole years only.
    An empty list means no tests are required.
    """
    return [
        LabRecommendation(test_name=rule.test_name, rationale=rule.rationale)
        for rule in rules
        if rule.applies(age.years)
    ]
