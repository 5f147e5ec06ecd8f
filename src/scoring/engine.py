"""Deterministic quiz scoring engine. Pure code, no I/O."""

from collections.abc import Mapping

from src.scoring.categories import (
    CATEGORY_ORDER,
    CATEGORY_PRIORITY,
    CATEGORY_WEIGHTS,
    LEVEL_THRESHOLDS,
    RISK_THRESHOLDS,
    Category,
    CategoryLevel,
    RiskLevel,
)
from src.scoring.questions import answer_points, check_answer_set, points_range, questions_for
from src.scoring.red_flags import detect_red_flags

DEFAULT_TOP_CAUSES = 2


def get_category_level(score: float) -> CategoryLevel:
    for threshold, level in LEVEL_THRESHOLDS:
        if score >= threshold:
            return level
    return CategoryLevel.LOW


def _score_category(answers: Mapping, category: Category) -> dict:
    """
    Normalize answer points against the attainable range of the category.
    Each question contributes points above its own floor, so a category answered
    at minimum severity scores 0 and one answered at maximum scores 100.
    """
    points = 0
    above_floor = 0
    attainable = 0
    max_points = 0
    for q in questions_for(category):
        floor, ceiling = points_range(q)
        attainable += ceiling - floor
        max_points += ceiling
        pts = answer_points(q["id"], answers.get(q["id"]))
        if pts is None:
            continue
        points += pts
        above_floor += pts - floor

    score = round(above_floor / attainable * 100, 1) if attainable else 0.0
    return {
        "score": score,
        "points": points,
        "max_points": max_points,
        "level": get_category_level(score).value,
        "weight": CATEGORY_WEIGHTS[category],
    }


def calculate_quiz_scores(answers: Mapping) -> dict:
    """
    Per-category scores for one answer set, keyed by category id.
    Unknown question ids are ignored; missing answers contribute nothing.
    Raises AnswerSetError if answers is not a mapping.
    """
    check_answer_set(answers)
    return {c.value: _score_category(answers, c) for c in CATEGORY_ORDER}


def calculate_overall_score(category_scores: Mapping) -> float:
    """Weighted mean of the category scores over the fixed category list."""
    total_weight = sum(CATEGORY_WEIGHTS[c] for c in CATEGORY_ORDER)
    weighted = sum(CATEGORY_WEIGHTS[c] * category_scores[c.value]["score"] for c in CATEGORY_ORDER)
    return round(weighted / total_weight, 1)


def get_risk_level(overall_score: float) -> RiskLevel:
    for threshold, level in RISK_THRESHOLDS:
        if overall_score >= threshold:
            return level
    return RiskLevel.LOW


def get_top_causes(category_scores: Mapping, n: int = DEFAULT_TOP_CAUSES) -> list[str]:
    """Top-n category ids by score desc. Ties resolve by CATEGORY_PRIORITY. n <= 0 gives []."""
    ranked = sorted(
        CATEGORY_PRIORITY,
        key=lambda c: (-category_scores[c.value]["score"], CATEGORY_PRIORITY.index(c)),
    )
    return [c.value for c in ranked[:max(n, 0)]]


def score_quiz(answers: Mapping, top_n: int = DEFAULT_TOP_CAUSES) -> dict:
    """Full pipeline: category scores, overall score, risk level, top causes, red flags."""
    category_scores = calculate_quiz_scores(answers)
    overall_score = calculate_overall_score(category_scores)
    return {
        "category_scores": category_scores,
        "overall_score": overall_score,
        "risk_level": get_risk_level(overall_score).value,
        "top_causes": get_top_causes(category_scores, top_n),
        "red_flags": [flag.value for flag in detect_red_flags(answers)],
    }
