"""Hashing, ids and timestamps for assessment records."""

import hashlib
import json
import uuid
from datetime import datetime, timezone


def hash_text(text: str) -> str:
    """Compute SHA256 hash of text. Deterministic."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def hash_answers(answers: dict) -> str:
    """SHA256 of the canonical JSON form of an answer set. Key order does not matter."""
    return hash_text(json.dumps(answers, sort_keys=True, separators=(",", ":"), default=str))


def new_assessment_id() -> str:
    return uuid.uuid4().hex


def iso_now() -> str:
    """Current UTC timestamp as ISO string."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"
