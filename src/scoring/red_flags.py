"""Red-flag rules over raw answers. Independent of category scores and risk level."""

from collections.abc import Mapping
from enum import Enum

from src.scoring.categories import CATEGORY_ORDER, Category
from src.scoring.questions import answer_points, category_points, check_answer_set, points_range, questions_for


class RedFlag(str, Enum):
    STRUCTURAL_REVIEW = "structural_review"
    MOTILITY_DISORDER = "motility_disorder"
    SIBO_RISK = "sibo_risk"
    MULTIPLE_FACTORS = "multiple_factors"


RED_FLAG_MESSAGES = {
    RedFlag.STRUCTURAL_REVIEW: "Consider GI specialist consultation for structural concerns",
    RedFlag.MOTILITY_DISORDER: "Possible motility disorder - medical evaluation recommended",
    RedFlag.SIBO_RISK: "Severe dysbiosis risk - consider SIBO breath test",
    RedFlag.MULTIPLE_FACTORS: "Multiple contributing factors detected - comprehensive GI workup recommended",
}

STRUCTURAL_POINTS_THRESHOLD = 8
MOTILITY_POINTS_THRESHOLD = 9
DYSBIOSIS_POINTS_THRESHOLD = 9
EXTREME_STOOL_TYPES = ("type-1-2", "type-7")
HIGH_SHARE_PERCENT = 66
MULTIPLE_FACTORS_MIN = 3


def _high_share(answers: Mapping, category: Category) -> bool:
    """True when the category's answers reach HIGH_SHARE_PERCENT of its attainable range."""
    above_floor = 0
    span = 0
    for q in questions_for(category):
        lo, hi = points_range(q)
        span += hi - lo
        pts = answer_points(q["id"], answers.get(q["id"]))
        if pts is not None:
            above_floor += pts - lo
    return above_floor * 100 >= HIGH_SHARE_PERCENT * span


def detect_red_flags(answers: Mapping) -> list[RedFlag]:
    """
    Triggered red flags in declaration order.
    Each rule reads specific raw answers only; category scores are never consulted.
    """
    check_answer_set(answers)
    flags = []

    if category_points(answers, Category.STRUCTURAL) >= STRUCTURAL_POINTS_THRESHOLD:
        flags.append(RedFlag.STRUCTURAL_REVIEW)

    if (
        answers.get("stool-type") in EXTREME_STOOL_TYPES
        and category_points(answers, Category.MOTILITY) >= MOTILITY_POINTS_THRESHOLD
    ):
        flags.append(RedFlag.MOTILITY_DISORDER)

    if (
        answers.get("antibiotic-use") == "3-plus"
        and category_points(answers, Category.DYSBIOSIS) >= DYSBIOSIS_POINTS_THRESHOLD
    ):
        flags.append(RedFlag.SIBO_RISK)

    high_count = sum(1 for c in CATEGORY_ORDER if _high_share(answers, c))
    if high_count >= MULTIPLE_FACTORS_MIN:
        flags.append(RedFlag.MULTIPLE_FACTORS)

    return flags
