"""Shared answer sets and storage isolation."""

import pytest

from root_cause import audit
from src.pipeline import artifacts

# Lowest-points option for every question.
MINIMAL_ANSWERS = {
    "eating-pace": "slow",
    "eating-habits": ["none"],
    "liquid-consumption": "minimal",
    "breathing-pattern": "usually-nose",
    "bowel-pattern": "daily",
    "stool-type": "type-3-4",
    "early-fullness": "normal",
    "activity-level": "very-active",
    "antibiotic-use": "none",
    "acid-reflux-meds": "never",
    "bloating-pattern": "post-meal-1-2hrs",
    "probiotic-intake": "daily",
    "stress-impact": "no-relationship",
    "vacation-difference": "no-difference",
    "sleep-quality": "excellent",
    "stress-management": ["meditation", "exercise-3plus", "therapy", "breathing"],
    "work-life-balance": "well-balanced",
    "menstrual-effect": "no-pattern",
    "time-seasonal-pattern": "consistent",
    "surgery-history": "none",
    "pelvic-floor-issues": "no-issues",
    "current-medications": ["none"],
    "diagnosed-conditions": ["none"],
    "daily-posture": "active-minimal-sit",
    "digestive-activities": "daily",
}

# Highest-points option for every question.
MAXIMAL_ANSWERS = {
    "eating-pace": "very-fast",
    "eating-habits": ["chew-gum", "use-straws", "talk-eating", "eat-stressed", "carbonated-daily", "smoke-vape"],
    "liquid-consumption": "large-amounts",
    "breathing-pattern": "often-mouth",
    "bowel-pattern": "less-than-3",
    "stool-type": "type-1-2",
    "early-fullness": "few-bites",
    "activity-level": "sedentary",
    "antibiotic-use": "3-plus",
    "acid-reflux-meds": "daily-ppi",
    "bloating-pattern": "progressive-day",
    "probiotic-intake": "never-worse",
    "stress-impact": "immediate-correlation",
    "vacation-difference": "significantly-better",
    "sleep-quality": "poor",
    "stress-management": ["none"],
    "work-life-balance": "constantly-overwhelmed",
    "menstrual-effect": "severe-bloating",
    "time-seasonal-pattern": "morning-predominant",
    "surgery-history": "multiple",
    "pelvic-floor-issues": "diagnosed",
    "current-medications": ["opioids", "antidepressants", "blood-pressure", "diabetes", "birth-control", "thyroid"],
    "diagnosed-conditions": ["ibs", "ibd", "sibo", "food-intolerances", "endometriosis"],
    "daily-posture": "hunched-8plus",
    "digestive-activities": "never",
}


@pytest.fixture
def minimal_answers():
    return dict(MINIMAL_ANSWERS)


@pytest.fixture
def maximal_answers():
    return dict(MAXIMAL_ANSWERS)


@pytest.fixture
def storage_dirs(tmp_path, monkeypatch):
    """Point assessment storage and audit logs at a temp dir."""
    assessments_dir = tmp_path / "assessments"
    logs_dir = tmp_path / "logs"
    monkeypatch.setattr(artifacts, "ASSESSMENTS_DIR", assessments_dir)
    monkeypatch.setattr(audit, "AUDIT_DIR", logs_dir)
    return {"assessments": assessments_dir, "logs": logs_dir}
