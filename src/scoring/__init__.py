"""Deterministic root-cause quiz scoring engine."""

from src.scoring.categories import (
    CATEGORY_DISPLAY_NAMES,
    CATEGORY_ORDER,
    CATEGORY_PRIORITY,
    CATEGORY_WEIGHTS,
    Category,
    CategoryLevel,
    RiskLevel,
)
from src.scoring.engine import (
    calculate_overall_score,
    calculate_quiz_scores,
    get_category_level,
    get_risk_level,
    get_top_causes,
    score_quiz,
)
from src.scoring.questions import AnswerSetError
from src.scoring.red_flags import RED_FLAG_MESSAGES, RedFlag, detect_red_flags

__all__ = [
    "AnswerSetError",
    "CATEGORY_DISPLAY_NAMES",
    "CATEGORY_ORDER",
    "CATEGORY_PRIORITY",
    "CATEGORY_WEIGHTS",
    "Category",
    "CategoryLevel",
    "RED_FLAG_MESSAGES",
    "RedFlag",
    "RiskLevel",
    "calculate_overall_score",
    "calculate_quiz_scores",
    "detect_red_flags",
    "get_category_level",
    "get_risk_level",
    "get_top_causes",
    "score_quiz",
]
