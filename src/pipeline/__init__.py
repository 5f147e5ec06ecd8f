"""Assessment pipeline: score -> record -> report -> store -> compare."""

from src.pipeline.artifacts import (
    delete_assessment,
    list_assessments,
    load_assessment,
    load_latest_assessment,
    save_assessment,
)
from src.pipeline.assessment import build_assessment, compare_assessments, next_retake_number
from src.pipeline.report import build_report

__all__ = [
    "build_assessment",
    "build_report",
    "compare_assessments",
    "delete_assessment",
    "list_assessments",
    "load_assessment",
    "load_latest_assessment",
    "next_retake_number",
    "save_assessment",
]
