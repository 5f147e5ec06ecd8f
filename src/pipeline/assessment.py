"""Assessment records: build from an answer set, number retakes, compare retakes."""

from src.pipeline.report import build_report
from src.scoring import CATEGORY_DISPLAY_NAMES, CATEGORY_ORDER, score_quiz
from src.utils import hash_answers, iso_now, new_assessment_id

SCORE_FIELDS = {c: f"{c.value}_score" for c in CATEGORY_ORDER}


def build_assessment(
    user_id: str,
    answers: dict,
    retake_number: int = 1,
    completed_at: str | None = None,
    assessment_id: str | None = None,
) -> dict:
    """
    Score one answer set and shape it as a storable assessment record.
    Raises AnswerSetError if answers is not a mapping.
    """
    scored = score_quiz(answers)
    record = {
        "id": assessment_id or new_assessment_id(),
        "user_id": user_id,
        "completed_at": completed_at or iso_now(),
        "retake_number": retake_number,
    }
    for category, field in SCORE_FIELDS.items():
        record[field] = scored["category_scores"][category.value]["score"]
    record.update({
        "overall_score": scored["overall_score"],
        "risk_level": scored["risk_level"],
        "top_causes": scored["top_causes"],
        "red_flags": scored["red_flags"],
        "report": build_report(scored),
        "answers_hash": hash_answers(dict(answers)),
        "individual_answers": dict(answers),
    })
    return record


def next_retake_number(previous_records: list[dict]) -> int:
    """Highest stored retake number + 1; the first assessment is retake 1."""
    if not previous_records:
        return 1
    return max(r.get("retake_number", 0) for r in previous_records) + 1


def compare_assessments(previous: dict, current: dict) -> dict:
    """
    Per-category change between two records. Positive change = improvement (score went down).
    percentage_change is None when the previous score was 0. Unchanged categories are omitted.
    """
    improvements = []
    for category, field in SCORE_FIELDS.items():
        before = previous[field]
        change = round(before - current[field], 1)
        if change == 0:
            continue
        improvements.append({
            "category": category.value,
            "display_name": CATEGORY_DISPLAY_NAMES[category],
            "change": change,
            "percentage_change": round(change / before * 100, 1) if before else None,
        })
    return {
        "previous": previous,
        "current": current,
        "improvements": improvements,
        "overall_change": round(previous["overall_score"] - current["overall_score"], 1),
    }
