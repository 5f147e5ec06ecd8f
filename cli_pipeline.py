#!/usr/bin/env python3
"""CLI for the deterministic root-cause quiz scoring pipeline."""

import argparse
import json
import sys
import uuid
from pathlib import Path

import jsonschema
from dotenv import load_dotenv

load_dotenv()

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from root_cause.audit import audit_log, log_assessment_scores
from root_cause.submission import submit_assessment
from src.pipeline import compare_assessments, list_assessments
from src.run_report import write_run_report
from src.scoring import CATEGORY_DISPLAY_NAMES, Category, score_quiz
from src.scoring.questions import catalog, find_unanswered
from src.utils import hash_answers
from src.validation import validate_answers


def _load_answers(path: Path) -> dict:
    if not path.exists():
        print(f"Error: Answers file not found: {path}", file=sys.stderr)
        sys.exit(1)
    try:
        answers = json.loads(path.read_text(encoding="utf-8"))
        validate_answers(answers)
    except json.JSONDecodeError as e:
        print(f"Error: {path} is not valid JSON: {e}", file=sys.stderr)
        sys.exit(1)
    except jsonschema.ValidationError as e:
        print(f"Error: Invalid answers in {path}: {e.message}", file=sys.stderr)
        sys.exit(1)
    return answers


def _print_scores(category_scores: dict) -> None:
    print("\nPer category:")
    for cat, entry in category_scores.items():
        name = CATEGORY_DISPLAY_NAMES[Category(cat)]
        print(f"  {name}: {entry['score']:g} ({entry['level']}, {entry['points']}/{entry['max_points']} pts)")


def cmd_score(args: argparse.Namespace) -> None:
    """Score one answer file. Nothing is stored; a run report is written."""
    answers = _load_answers(Path(args.answers_file))
    scored = score_quiz(answers)
    unanswered = find_unanswered(answers, args.biological_sex)
    run_id = str(uuid.uuid4())[:8]

    report_path = Path(args.reports_dir) / f"run_report_{run_id}.json"
    write_run_report(
        report_path,
        run_id=run_id,
        answers_hash=hash_answers(answers),
        scored=scored,
        answered_count=len(catalog(args.biological_sex)) - len(unanswered),
        unanswered=unanswered,
    )
    audit_log(action="cli_score", status="success", overall_score=scored["overall_score"], extra={"run_id": run_id})
    print(f"Run report: {report_path}")

    if args.json:
        print(json.dumps({**scored, "unanswered": unanswered}, indent=2))
        return

    print("=== Score ===")
    print(f"Overall: {scored['overall_score']:g}/100")
    print(f"Risk level: {scored['risk_level']}")
    print(f"Top causes: {', '.join(scored['top_causes'])}")
    if scored["red_flags"]:
        print(f"Red flags: {', '.join(scored['red_flags'])}")
    if unanswered:
        print(f"Unanswered: {', '.join(unanswered)}")
    _print_scores(scored["category_scores"])


def cmd_submit(args: argparse.Namespace) -> None:
    """Score and store one answer file as the user's next retake."""
    answers = _load_answers(Path(args.answers_file))
    result = submit_assessment(args.user_id, answers, args.biological_sex)
    record = result["assessment"]
    log_assessment_scores(record=record, unanswered_count=len(result["unanswered"]), source="cli")
    audit_log(
        action="cli_submit",
        status="success",
        user_id=args.user_id,
        assessment_id=record["id"],
        overall_score=record["overall_score"],
    )

    if args.json:
        print(json.dumps(result, indent=2))
        return

    print(f"Assessment saved: {result['artifact_path']}")
    print(f"  id: {record['id']}")
    print(f"  retake_number: {record['retake_number']}")
    print(f"  overall_score: {record['overall_score']:g}")
    print(f"  risk_level: {record['risk_level']}")
    print(f"\n{record['report']['summary']}")
    if record["report"]["medical_consult"]:
        print(f"Medical consult: {record['report']['medical_consult']}")


def cmd_compare(args: argparse.Namespace) -> None:
    """Compare a user's latest retake with the previous one."""
    records = list_assessments(args.user_id)
    if len(records) < 2:
        print(f"Error: Need at least two assessments for user {args.user_id}, found {len(records)}", file=sys.stderr)
        sys.exit(1)
    comparison = compare_assessments(records[1], records[0])

    if args.json:
        print(json.dumps({k: v for k, v in comparison.items() if k not in ("previous", "current")}, indent=2))
        return

    print(f"=== Retake {records[1]['retake_number']} -> {records[0]['retake_number']} ===")
    print(f"Overall change: {comparison['overall_change']:+g} (positive = improvement)")
    for item in comparison["improvements"]:
        pct = item["percentage_change"]
        pct_text = f" ({pct:+g}%)" if pct is not None else ""
        print(f"  {item['display_name']}: {item['change']:+g}{pct_text}")


def cmd_questions(args: argparse.Namespace) -> None:
    questions = catalog(args.biological_sex)
    if args.json:
        print(json.dumps(questions, indent=2))
        return
    section = None
    for q in questions:
        if q["section"] != section:
            section = q["section"]
            print(f"\n{q['section_number']}. {section}")
        print(f"  [{q['id']}] {q['text']} ({q['type']})")
        for opt in q["options"]:
            print(f"      - {opt['value']}: {opt['label']}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Deterministic root-cause bloating quiz scoring")
    sub = parser.add_subparsers(dest="command", required=True)

    sex_kwargs = {"choices": ["male", "female"], "default": None, "help": "Skips questions that do not apply"}

    # score
    p_score = sub.add_parser("score", help="Score an answers JSON file without storing it")
    p_score.add_argument("answers_file", type=Path, help="Path to answers JSON (question id -> answer)")
    p_score.add_argument("--biological-sex", **sex_kwargs)
    p_score.add_argument("--reports-dir", type=Path, default=Path("artifacts"), help="Directory for run_report.json")
    p_score.add_argument("--json", action="store_true", help="Output JSON")
    p_score.set_defaults(func=cmd_score)

    # submit
    p_submit = sub.add_parser("submit", help="Score and store an answers JSON file for a user")
    p_submit.add_argument("answers_file", type=Path, help="Path to answers JSON (question id -> answer)")
    p_submit.add_argument("--user-id", required=True, help="User identifier")
    p_submit.add_argument("--biological-sex", **sex_kwargs)
    p_submit.add_argument("--json", action="store_true", help="Output JSON")
    p_submit.set_defaults(func=cmd_submit)

    # compare
    p_compare = sub.add_parser("compare", help="Compare a user's two most recent assessments")
    p_compare.add_argument("--user-id", required=True, help="User identifier")
    p_compare.add_argument("--json", action="store_true", help="Output JSON")
    p_compare.set_defaults(func=cmd_compare)

    # questions
    p_questions = sub.add_parser("questions", help="Print the question catalog")
    p_questions.add_argument("--biological-sex", **sex_kwargs)
    p_questions.add_argument("--json", action="store_true", help="Output JSON")
    p_questions.set_defaults(func=cmd_questions)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
