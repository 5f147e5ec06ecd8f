"""Question catalog, skip rules, unanswered detection and the answers schema."""

import jsonschema
import pytest

from src.scoring import CATEGORY_ORDER, AnswerSetError, calculate_quiz_scores
from src.scoring.questions import QUESTIONS, MULTI_CHOICE, catalog, find_unanswered, visible_questions
from src.validation import _load_schema, validate_answers

FEMALE_ONLY = {"menstrual-effect", "pelvic-floor-issues"}


def test_catalog_has_every_question_in_section_order():
    entries = catalog()
    assert len(entries) == len(QUESTIONS) == 25
    assert [e["question_number"] for e in entries] == list(range(1, 26))
    sections = [e["section_number"] for e in entries]
    assert sections == sorted(sections)
    assert {e["category"] for e in entries} == {c.value for c in CATEGORY_ORDER}


def test_catalog_hides_points():
    for entry in catalog():
        for opt in entry["options"]:
            assert "points" not in opt


def test_male_skips_female_only_questions():
    male_ids = {q["id"] for q in visible_questions("male")}
    assert FEMALE_ONLY.isdisjoint(male_ids)
    assert len(catalog("male")) == 23
    assert {q["id"] for q in visible_questions("female")} >= FEMALE_ONLY
    assert len(catalog()) == 25


def test_find_unanswered(minimal_answers):
    assert find_unanswered(minimal_answers) == []
    partial = {k: v for k, v in minimal_answers.items() if k not in ("sleep-quality", "menstrual-effect")}
    assert find_unanswered(partial) == ["sleep-quality", "menstrual-effect"]
    assert find_unanswered(partial, "male") == ["sleep-quality"]


def test_find_unanswered_treats_unscorable_values_as_missing():
    unanswered = find_unanswered({"eating-pace": "warp-speed", "eating-habits": []}, "female")
    assert "eating-pace" in unanswered
    assert "eating-habits" in unanswered
    assert len(unanswered) == 25


def test_find_unanswered_rejects_non_mapping():
    with pytest.raises(AnswerSetError):
        find_unanswered(["eating-pace"])


def test_schema_enums_match_catalog_options():
    properties = _load_schema("quiz_answers")["properties"]
    assert set(properties) == {q["id"] for q in QUESTIONS}
    for q in QUESTIONS:
        prop = properties[q["id"]]
        values = {o["value"] for o in q["options"]}
        if q["type"] == MULTI_CHOICE:
            as_list, as_string = prop["anyOf"]
            assert set(as_list["items"]["enum"]) == values, q["id"]
            assert set(as_string["enum"]) == values, q["id"]
        else:
            assert set(prop["enum"]) - {None} == values, q["id"]


def test_validate_answers_accepts_full_sets(minimal_answers, maximal_answers):
    validate_answers(minimal_answers)
    validate_answers(maximal_answers)
    validate_answers({})
    validate_answers({"menstrual-effect": None, "extra-field": "ignored"})


def test_single_string_for_multi_choice_is_accepted_and_scored():
    answers = {"eating-habits": "chew-gum", "diagnosed-conditions": "ibs"}
    validate_answers(answers)
    scores = calculate_quiz_scores(answers)
    assert scores["aerophagia"]["points"] == 1
    assert scores["structural"]["points"] == 2
    assert "eating-habits" not in find_unanswered(answers)


@pytest.mark.parametrize(
    "payload",
    [
        None,
        ["eating-pace"],
        "slow",
        {"eating-pace": "warp-speed"},
        {"eating-habits": "yoga"},
        {"eating-habits": 3},
        {"stress-management": ["yoga"]},
    ],
)
def test_validate_answers_rejects_bad_payloads(payload):
    with pytest.raises(jsonschema.ValidationError):
        validate_answers(payload)
