"""Generate run_report.json for auditability of a scoring run."""

import json
from pathlib import Path

from src.utils import iso_now


def write_run_report(
    output_path: Path,
    run_id: str,
    answers_hash: str,
    scored: dict,
    answered_count: int,
    unanswered: list[str],
) -> None:
    """
    Write run_report.json with the answers hash, counts and scores.
    No answers beyond the hash.
    """
    report = {
        "run_id": run_id,
        "timestamp": iso_now(),
        "answers_hash": answers_hash,
        "answered_count": answered_count,
        "unanswered": unanswered,
        "overall_score": scored.get("overall_score"),
        "risk_level": scored.get("risk_level"),
        "top_causes": scored.get("top_causes", []),
        "red_flags": scored.get("red_flags", []),
        "per_category_scores": {
            cat: entry["score"] for cat, entry in scored.get("category_scores", {}).items()
        },
    }
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
