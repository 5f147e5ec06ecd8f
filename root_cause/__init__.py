"""Root-cause quiz service layer: submissions, audit trail and logging."""

from root_cause.audit import audit_log, log_assessment_scores, setup_app_logging
from root_cause.submission import submit_assessment

__all__ = ["audit_log", "log_assessment_scores", "setup_app_logging", "submit_assessment"]
