"""Tests for persisting parsed resumes as JSON."""

import json
from datetime import datetime, timezone

import pytest

from resume_chat.core.exceptions import ResumeNotFoundError
from resume_chat.core.resume_parser import structure_resume_data
from resume_chat.core.resume_store import ResumeStore, parsed_file_name


@pytest.mark.parametrize(
    "file_name, expected",
    [
        ("resume.docx", "resume.json"),
        ("resume-1700000000000-42.docx", "resume-1700000000000-42.json"),
        ("jane.doe.resume.docx", "jane.doe.resume.json"),
        ("resume", "resume.json"),
    ],
)
def test_parsed_file_name(file_name, expected):
    assert parsed_file_name(file_name) == expected


def test_save_writes_camel_case_json(tmp_path):
    store = ResumeStore(tmp_path / "parsed")
    record = structure_resume_data("Jane Doe\nSkills\nPython", "resume.docx")

    path = store.save(record)

    assert path == tmp_path / "parsed" / "resume.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["fileName"] == "resume.docx"
    assert data["rawText"] == "Jane Doe\nSkills\nPython"
    assert data["sections"]["skills"] == ["Python"]
    assert data["sections"]["contact"]["name"] == "Jane Doe"


def test_load_returns_saved_record(tmp_path):
    store = ResumeStore(tmp_path)
    record = structure_resume_data(
        "Jane Doe\nExperience\nEngineer\n- shipped",
        "resume.docx",
        parsed_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    )
    store.save(record)

    assert store.load("resume.docx") == record


def test_load_missing_raises(tmp_path):
    store = ResumeStore(tmp_path)
    with pytest.raises(ResumeNotFoundError) as exc_info:
        store.load("missing.docx")
    assert "missing.docx" in str(exc_info.value)
