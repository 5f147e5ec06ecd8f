"""Assessment records, retake numbering and retake comparison."""

import pytest

from src.pipeline import build_assessment, compare_assessments, next_retake_number
from src.pipeline.assessment import SCORE_FIELDS
from src.scoring import AnswerSetError
from src.utils import hash_answers
from src.validation import validate_assessment


def test_build_assessment_record(maximal_answers):
    record = build_assessment("user-1", maximal_answers, retake_number=2, completed_at="2025-01-01T00:00:00.000Z")
    validate_assessment(record)
    assert record["user_id"] == "user-1"
    assert record["retake_number"] == 2
    assert record["completed_at"] == "2025-01-01T00:00:00.000Z"
    assert len(record["id"]) == 32
    for field in SCORE_FIELDS.values():
        assert record[field] == 100.0
    assert record["overall_score"] == 100.0
    assert record["risk_level"] == "Severe"
    assert record["red_flags"] == ["structural_review", "motility_disorder", "sibo_risk", "multiple_factors"]
    assert record["answers_hash"] == hash_answers(maximal_answers)
    assert record["individual_answers"] == maximal_answers


def test_build_assessment_uses_given_id(minimal_answers):
    record = build_assessment("user-1", minimal_answers, assessment_id="abc123")
    assert record["id"] == "abc123"
    assert record["retake_number"] == 1
    assert record["report"]["medical_consult"] is None


def test_build_assessment_rejects_non_mapping():
    with pytest.raises(AnswerSetError):
        build_assessment("user-1", [("eating-pace", "slow")])


def test_next_retake_number():
    assert next_retake_number([]) == 1
    assert next_retake_number([{"retake_number": 1}]) == 2
    assert next_retake_number([{"retake_number": 1}, {"retake_number": 3}]) == 4


def _record(overall, **scores):
    record = {field: 0.0 for field in SCORE_FIELDS.values()}
    record.update({f"{k}_score": v for k, v in scores.items()})
    record["overall_score"] = overall
    return record


def test_compare_assessments_arithmetic():
    previous = _record(40.0, aerophagia=50.0, motility=20.0, dysbiosis=30.0)
    current = _record(32.5, aerophagia=25.0, motility=30.0, dysbiosis=30.0)
    comparison = compare_assessments(previous, current)

    assert comparison["previous"] is previous
    assert comparison["current"] is current
    assert comparison["overall_change"] == 7.5
    by_cat = {i["category"]: i for i in comparison["improvements"]}
    assert set(by_cat) == {"aerophagia", "motility"}
    assert by_cat["aerophagia"]["change"] == 25.0
    assert by_cat["aerophagia"]["percentage_change"] == 50.0
    assert by_cat["aerophagia"]["display_name"] == "Eating Mechanics (Air Swallowing)"
    assert by_cat["motility"]["change"] == -10.0
    assert by_cat["motility"]["percentage_change"] == -50.0


def test_compare_assessments_zero_previous_score():
    comparison = compare_assessments(_record(0.0), _record(5.0, hormonal=20.0))
    assert comparison["overall_change"] == -5.0
    assert comparison["improvements"] == [{
        "category": "hormonal",
        "display_name": "Hormonal Factors",
        "change": -20.0,
        "percentage_change": None,
    }]


def test_compare_identical_records_has_no_improvements(minimal_answers):
    record = build_assessment("user-1", minimal_answers)
    comparison = compare_assessments(record, record)
    assert comparison["improvements"] == []
    assert comparison["overall_change"] == 0.0
