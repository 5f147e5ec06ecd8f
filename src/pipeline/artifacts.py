"""Artifact storage: one JSON file per assessment record."""

import json
import logging
import os
from pathlib import Path

from src.utils import hash_text
from src.validation import validate_assessment

log = logging.getLogger("root_cause.artifacts")

ASSESSMENTS_DIR = Path(
    os.environ.get("ASSESSMENTS_DIR")
    or Path(__file__).resolve().parent.parent.parent / "artifacts" / "assessments"
)


def _safe(value: str) -> str:
    return "".join(c if c.isalnum() or c in "-_" else "_" for c in value)


def _user_key(user_id: str) -> str:
    """Filename segment for a user id. Distinct ids give distinct segments."""
    return hash_text(user_id)[:16]


def _assessment_path(user_id: str, assessment_id: str) -> Path:
    """Filename: assessment.<user key>.<assessment_id>.v1.json"""
    return ASSESSMENTS_DIR / f"assessment.{_user_key(user_id)}.{_safe(assessment_id)}.v1.json"


def _read(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


def save_assessment(record: dict) -> Path:
    """Validate and store an assessment record. Overwrites a record with the same id."""
    validate_assessment(record)
    ASSESSMENTS_DIR.mkdir(parents=True, exist_ok=True)
    path = _assessment_path(record["user_id"], record["id"])
    path.write_text(json.dumps(record, indent=2), encoding="utf-8")
    log.debug("Saved assessment %s (retake %d) to %s", record["id"], record["retake_number"], path)
    return path


def load_assessment(user_id: str, assessment_id: str) -> dict:
    """Load one stored record. FAILS (raises) if it does not exist."""
    path = _assessment_path(user_id, assessment_id)
    record = _read(path) if path.exists() else None
    if record is None or record.get("user_id") != user_id or record.get("id") != assessment_id:
        raise FileNotFoundError(f"Assessment not found: {assessment_id} for user {user_id}")
    return record


def list_assessments(user_id: str) -> list[dict]:
    """All stored records for a user, newest first (retake number, then completion time)."""
    if not ASSESSMENTS_DIR.exists():
        return []
    records = [
        record
        for record in map(_read, ASSESSMENTS_DIR.glob(f"assessment.{_user_key(user_id)}.*.v1.json"))
        if record.get("user_id") == user_id
    ]
    records.sort(key=lambda r: (r.get("retake_number", 0), r.get("completed_at", "")), reverse=True)
    return records


def load_latest_assessment(user_id: str) -> dict | None:
    records = list_assessments(user_id)
    return records[0] if records else None


def delete_assessment(user_id: str, assessment_id: str) -> None:
    """Delete one stored record. Raises FileNotFoundError if it does not exist."""
    load_assessment(user_id, assessment_id)
    path = _assessment_path(user_id, assessment_id)
    path.unlink()
    log.debug("Deleted assessment %s for user %s", assessment_id, user_id)
