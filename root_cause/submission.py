"""Orchestrates a quiz submission: validate, score, number the retake, store, compare."""

import logging

from src.pipeline import (
    build_assessment,
    compare_assessments,
    list_assessments,
    next_retake_number,
    save_assessment,
)
from src.scoring.questions import find_unanswered
from src.validation import validate_answers

log = logging.getLogger("root_cause.submission")


def submit_assessment(user_id: str, answers: dict, biological_sex: str | None = None) -> dict:
    """
    Score and store one quiz submission for a user.
    Raises jsonschema.ValidationError for a malformed answer set.
    Unanswered questions are reported back, never rejected.
    Returns dict with the stored assessment, its path, the comparison with the
    previous retake (None on the first attempt) and the unanswered question ids.
    """
    validate_answers(answers)
    unanswered = find_unanswered(answers, biological_sex)

    history = list_assessments(user_id)
    record = build_assessment(user_id, answers, retake_number=next_retake_number(history))
    path = save_assessment(record)
    log.info(
        "Stored assessment %s for user %s: retake=%d overall=%s risk=%s unanswered=%d",
        record["id"], user_id, record["retake_number"], record["overall_score"],
        record["risk_level"], len(unanswered),
    )

    comparison = None
    if history:
        comparison = compare_assessments(history[0], record)
        # The new record is returned in full; the previous one by id.
        comparison = {k: v for k, v in comparison.items() if k not in ("previous", "current")}
        comparison["previous_assessment_id"] = history[0]["id"]

    return {
        "assessment": record,
        "artifact_path": str(path),
        "comparison": comparison,
        "unanswered": unanswered,
    }
