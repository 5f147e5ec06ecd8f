#!/usr/bin/env python3
"""
Run idempotency check: score the same answers file N times; output variance report if not identical.
Also checks that shuffling answer key order changes nothing.
Usage: python scripts/run_idempotency_check.py answers.json [--runs 10]
"""

import argparse
import json
import random
import sys
from pathlib import Path

# Add project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.pipeline import build_report
from src.scoring import score_quiz
from src.utils import hash_answers

DEFAULT_RUNS = 10


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("answers_file", type=Path)
    parser.add_argument("--runs", type=int, default=DEFAULT_RUNS)
    parser.add_argument("--seed", type=int, default=0, help="Seed for key-order shuffling")
    args = parser.parse_args()

    if not args.answers_file.exists():
        print(f"Error: Answers file not found: {args.answers_file}", file=sys.stderr)
        sys.exit(1)
    answers = json.loads(args.answers_file.read_text(encoding="utf-8"))
    rng = random.Random(args.seed)

    print(f"Running score {args.runs} times...")
    results = []
    for _ in range(args.runs):
        items = list(answers.items())
        rng.shuffle(items)
        shuffled = dict(items)
        scored = score_quiz(shuffled)
        results.append({
            "answers_hash": hash_answers(shuffled),
            "scored": scored,
            "report": build_report(scored),
        })

    # Variance check
    first = results[0]
    variances = []

    for i, r in enumerate(results[1:], start=1):
        if r["answers_hash"] != first["answers_hash"]:
            variances.append(("answers_hash", i + 1, f"{r['answers_hash'][:12]} != {first['answers_hash'][:12]}"))
        for cat, entry in r["scored"]["category_scores"].items():
            if entry != first["scored"]["category_scores"][cat]:
                variances.append(("category", i + 1, f"{cat}: {entry['score']} != {first['scored']['category_scores'][cat]['score']}"))
        for key in ("overall_score", "risk_level", "top_causes", "red_flags"):
            if r["scored"][key] != first["scored"][key]:
                variances.append((key, i + 1, f"{r['scored'][key]} != {first['scored'][key]}"))
        if r["report"] != first["report"]:
            variances.append(("report", i + 1, "report text differs"))

    if variances:
        print("\n=== VARIANCE REPORT ===\n")
        for stage, run, detail in variances:
            print(f"Run {run} - {stage}: {detail}")
        print("\nIdempotency check FAILED.")
        sys.exit(1)
    else:
        scored = first["scored"]
        print(f"\nIdempotency check PASSED: {args.runs} runs identical.")
        print(f"  answers_hash: {first['answers_hash'][:12]}...")
        print(f"  overall_score: {scored['overall_score']}")
        print(f"  risk_level: {scored['risk_level']}")
        print(f"  top_causes: {scored['top_causes']}")
        print(f"  red_flags: {scored['red_flags']}")


if __name__ == "__main__":
    main()
