#!/usr/bin/env python3
"""Flask JSON API for the Bloat AI root-cause quiz."""

import os

import jsonschema
from dotenv import load_dotenv
from flask import Flask, jsonify, request

from root_cause.audit import audit_log, log_assessment_scores, setup_app_logging
from root_cause.submission import submit_assessment
from src.pipeline import compare_assessments, delete_assessment, list_assessments, load_latest_assessment
from src.scoring import score_quiz
from src.scoring.questions import catalog, find_unanswered
from src.validation import validate_answers

load_dotenv()

log = setup_app_logging()

app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = 1 * 1024 * 1024  # 1MB

BIOLOGICAL_SEXES = ("male", "female")


def _biological_sex(value):
    return value if value in BIOLOGICAL_SEXES else None


def _json_body():
    """Request JSON object, or None when the body is not a JSON object."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None


def _invalid_body():
    return jsonify({"error": "Request body must be a JSON object", "code": "INVALID_BODY"}), 400


def _invalid_answers(action: str, err: jsonschema.ValidationError, user_id: str | None = None):
    audit_log(action=action, status="error", user_id=user_id, error=err.message, extra={"error_type": "invalid_answers"})
    log.warning("%s rejected: invalid answers (%s)", action, err.message)
    return jsonify({"error": err.message, "code": "INVALID_ANSWERS"}), 400


@app.route("/api/quiz/questions", methods=["GET"])
def api_questions():
    """Question catalog, minus questions skipped for the given biological sex."""
    questions = catalog(_biological_sex(request.args.get("biological_sex")))
    return jsonify({"questions": questions, "count": len(questions)})


@app.route("/api/quiz/score", methods=["POST"])
def api_score():
    """Stateless scoring of one answer set. Nothing is stored."""
    data = _json_body()
    if data is None:
        return _invalid_body()
    answers = data.get("answers")
    biological_sex = _biological_sex(data.get("biological_sex"))

    try:
        validate_answers(answers)
    except jsonschema.ValidationError as e:
        return _invalid_answers("score", e)

    try:
        scored = score_quiz(answers)
        unanswered = find_unanswered(answers, biological_sex)
        audit_log(
            action="score",
            status="success",
            overall_score=scored["overall_score"],
            extra={"risk_level": scored["risk_level"], "unanswered_count": len(unanswered)},
        )
        log.info("Score complete: overall=%s risk=%s", scored["overall_score"], scored["risk_level"])
        return jsonify({**scored, "unanswered": unanswered})
    except Exception as e:
        audit_log(action="score", status="error", error=str(e))
        log.exception("Score failed")
        return jsonify({"error": str(e)}), 500


@app.route("/api/assessments", methods=["POST"])
def api_submit_assessment():
    """Score, store and compare one quiz submission."""
    data = _json_body()
    if data is None:
        return _invalid_body()
    user_id = data.get("user_id")
    user_id = user_id.strip() if isinstance(user_id, str) else ""
    answers = data.get("answers")
    biological_sex = _biological_sex(data.get("biological_sex"))

    if not user_id:
        return jsonify({"error": "user_id must be a non-empty string", "code": "INVALID_USER_ID"}), 400

    try:
        result = submit_assessment(user_id, answers, biological_sex)
    except jsonschema.ValidationError as e:
        return _invalid_answers("submit_assessment", e, user_id)
    except Exception as e:
        audit_log(action="submit_assessment", status="error", user_id=user_id, error=str(e))
        log.exception("Submit assessment failed")
        return jsonify({"error": str(e)}), 500

    record = result["assessment"]
    audit_log(
        action="submit_assessment",
        status="success",
        user_id=user_id,
        assessment_id=record["id"],
        overall_score=record["overall_score"],
        extra={
            "retake_number": record["retake_number"],
            "risk_level": record["risk_level"],
            "red_flags": record["red_flags"],
            "artifact_path": result["artifact_path"],
        },
    )
    log_assessment_scores(record=record, unanswered_count=len(result["unanswered"]), source="api")
    return jsonify(result), 201


@app.route("/api/assessments/<user_id>", methods=["GET"])
def api_assessment_history(user_id):
    records = list_assessments(user_id)
    return jsonify({"assessments": records, "count": len(records)})


@app.route("/api/assessments/<user_id>/latest", methods=["GET"])
def api_latest_assessment(user_id):
    record = load_latest_assessment(user_id)
    if record is None:
        return jsonify({"error": f"No assessments for user {user_id}", "code": "NOT_FOUND"}), 404
    return jsonify(record)


@app.route("/api/assessments/<user_id>/comparison", methods=["GET"])
def api_assessment_comparison(user_id):
    """Latest retake vs the one before it."""
    records = list_assessments(user_id)
    if len(records) < 2:
        return jsonify({
            "error": "At least two assessments are required for a comparison",
            "code": "NOT_ENOUGH_ASSESSMENTS",
        }), 404
    return jsonify(compare_assessments(records[1], records[0]))


@app.route("/api/assessments/<user_id>/<assessment_id>", methods=["DELETE"])
def api_delete_assessment(user_id, assessment_id):
    try:
        delete_assessment(user_id, assessment_id)
    except FileNotFoundError as e:
        return jsonify({"error": str(e), "code": "NOT_FOUND"}), 404
    audit_log(action="delete_assessment", status="success", user_id=user_id, assessment_id=assessment_id)
    log.info("Deleted assessment %s for user %s", assessment_id, user_id)
    return jsonify({"deleted": assessment_id})


if __name__ == "__main__":
    port = int(os.environ.get("PORT", "5000"))
    debug = os.environ.get("FLASK_DEBUG", "0") == "1"
    log.info("Root-cause quiz API starting on http://127.0.0.1:%d | Logs: logs/app.log | Audit: logs/audit.log", port)
    app.run(debug=debug, port=port)
