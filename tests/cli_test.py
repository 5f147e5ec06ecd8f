"""CLI subcommands end to end."""

import json
import sys

import pytest

import cli_pipeline


def _run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["cli_pipeline.py", *argv])
    cli_pipeline.main()


def test_score_writes_run_report(monkeypatch, capsys, tmp_path, storage_dirs, maximal_answers):
    answers_file = tmp_path / "answers.json"
    answers_file.write_text(json.dumps(maximal_answers), encoding="utf-8")
    reports_dir = tmp_path / "reports"

    _run(monkeypatch, "score", str(answers_file), "--reports-dir", str(reports_dir))

    out = capsys.readouterr().out
    assert "Overall: 100/100" in out
    assert "Risk level: Severe" in out
    reports = list(reports_dir.glob("run_report_*.json"))
    assert len(reports) == 1
    report = json.loads(reports[0].read_text(encoding="utf-8"))
    assert report["overall_score"] == 100.0
    assert report["answered_count"] == 25
    assert "individual_answers" not in report


def test_score_missing_file_exits(monkeypatch, tmp_path, storage_dirs):
    with pytest.raises(SystemExit) as exc_info:
        _run(monkeypatch, "score", str(tmp_path / "missing.json"))
    assert exc_info.value.code == 1


def test_submit_then_compare(monkeypatch, capsys, tmp_path, storage_dirs, minimal_answers, maximal_answers):
    first = tmp_path / "first.json"
    second = tmp_path / "second.json"
    first.write_text(json.dumps(maximal_answers), encoding="utf-8")
    second.write_text(json.dumps(minimal_answers), encoding="utf-8")

    _run(monkeypatch, "submit", str(first), "--user-id", "user-1")
    _run(monkeypatch, "submit", str(second), "--user-id", "user-1")
    capsys.readouterr()

    _run(monkeypatch, "compare", "--user-id", "user-1", "--json")
    comparison = json.loads(capsys.readouterr().out)
    assert comparison["overall_change"] == 100.0
    assert len(comparison["improvements"]) == 7


def test_compare_needs_two_assessments(monkeypatch, storage_dirs):
    with pytest.raises(SystemExit):
        _run(monkeypatch, "compare", "--user-id", "nobody")


def test_questions_json(monkeypatch, capsys):
    _run(monkeypatch, "questions", "--biological-sex", "male", "--json")
    questions = json.loads(capsys.readouterr().out)
    assert len(questions) == 23
