"""Audit trail for scoring runs and API operations."""

import csv
import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path

AUDIT_DIR = Path(os.environ.get("ROOT_CAUSE_LOG_DIR") or Path(__file__).resolve().parent.parent / "logs")

CSV_HEADERS = [
    "timestamp",
    "source",
    "assessment_id",
    "user_id",
    "retake_number",
    "answers_hash",
    "unanswered_count",
    "aerophagia_score",
    "motility_score",
    "dysbiosis_score",
    "brain_gut_score",
    "hormonal_score",
    "structural_score",
    "lifestyle_score",
    "overall_score",
    "risk_level",
    "top_causes",
    "red_flags",
    "scoring_rationale",
]


def _ensure_log_dir():
    AUDIT_DIR.mkdir(parents=True, exist_ok=True)


def _iso_ts():
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


def _rationale(record: dict) -> str:
    parts = [f"Overall {record['overall_score']:g}/100 ({record['risk_level']})."]
    if record["top_causes"]:
        parts.append(f"Top causes: {', '.join(record['top_causes'])}.")
    if record["red_flags"]:
        parts.append(f"Red flags: {', '.join(record['red_flags'])}.")
    return " ".join(parts)


def log_assessment_scores(*, record: dict, unanswered_count: int, source: str):
    """
    Log one scored assessment for later review: when, which answers (by hash), what it scored and why.
    Writes to assessment_scores.jsonl (append) and assessment_scores.csv.
    """
    _ensure_log_dir()
    ts = _iso_ts()

    row = {header: record.get(header, "") for header in CSV_HEADERS}
    row.update({
        "timestamp": ts,
        "source": source,
        "assessment_id": record.get("id", ""),
        "unanswered_count": unanswered_count,
        "top_causes": json.dumps(record["top_causes"]),
        "red_flags": json.dumps(record["red_flags"]),
        "scoring_rationale": _rationale(record),
    })

    entry = dict(row, top_causes=record["top_causes"], red_flags=record["red_flags"])
    with open(AUDIT_DIR / "assessment_scores.jsonl", "a", encoding="utf-8") as f:
        f.write(json.dumps(entry, default=str) + "\n")

    csv_path = AUDIT_DIR / "assessment_scores.csv"
    csv_exists = csv_path.exists()
    with open(csv_path, "a", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_HEADERS)
        if not csv_exists:
            writer.writeheader()
        writer.writerow(row)


def audit_log(
    action: str,
    status: str,
    *,
    user_id: str | None = None,
    assessment_id: str | None = None,
    overall_score: float | None = None,
    error: str | None = None,
    extra: dict | None = None,
):
    """Append a structured audit entry to the audit log (JSONL)."""
    _ensure_log_dir()
    entry = {
        "timestamp": _iso_ts(),
        "action": action,
        "status": status,
    }
    if user_id:
        entry["user_id"] = user_id
    if assessment_id:
        entry["assessment_id"] = assessment_id
    if overall_score is not None:
        entry["overall_score"] = overall_score
    if error:
        entry["error"] = error
    if extra:
        entry.update(extra)

    with open(AUDIT_DIR / "audit.log", "a", encoding="utf-8") as f:
        f.write(json.dumps(entry, default=str) + "\n")


def setup_app_logging():
    """Configure application logging to console and file."""
    _ensure_log_dir()
    logger = logging.getLogger("root_cause")
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)

    fmt = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"

    # Console
    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(ch)

    # File
    fh = logging.FileHandler(AUDIT_DIR / "app.log", encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(fh)

    return logger
