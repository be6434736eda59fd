"""Tests for line normalization, section location and the section extractors."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from resume_chat.core.resume_parser import (
    NOT_FOUND,
    extract_contact,
    extract_education,
    extract_experience,
    extract_skills,
    extract_summary,
    locate_section,
    normalize_lines,
    structure_resume_data,
)
from resume_chat.core.schemas import ExperienceEntry


SAMPLE_RESUME = """Jane Doe
Austin, TX
jane.doe@example.com
(555) 123-4567

Summary
Backend engineer focused on APIs.
Enjoys mentoring.

Experience
Senior Engineer, Acme Corp
- Built billing platform
- Led migration to Postgres
Engineer, Initech
• Maintained reporting jobs

Education
BS Computer Science, State University

Skills
Python, Go; Rust|C++
"""


class TestNormalizeLines:
    def test_trims_and_drops_blank_lines(self):
        assert normalize_lines("  Jane Doe  \n\n\t\nSkills \r\n") == ["Jane Doe", "Skills"]

    def test_empty_input(self):
        assert normalize_lines("") == []
        assert normalize_lines(None) == []

    def test_idempotent(self):
        once = normalize_lines(SAMPLE_RESUME)
        assert normalize_lines("\n".join(once)) == once


class TestLocateSection:
    def test_returns_index_after_header(self):
        lines = ["Jane Doe", "Skills", "Python"]
        assert locate_section(lines, ("skills",)) == 2

    def test_case_insensitive_first_occurrence(self):
        lines = ["EDUCATION", "BS", "Education again"]
        assert locate_section(lines, ("education",)) == 1

    def test_substring_match(self):
        """'Experienced' contains 'experience' and counts as a header."""
        lines = ["Experienced leader", "Experience"]
        assert locate_section(lines, ("experience",)) == 1

    def test_not_found(self):
        assert locate_section(["Jane Doe"], ("skills",)) == NOT_FOUND
        assert locate_section([], ("skills",)) == NOT_FOUND


class TestSummary:
    def test_stops_at_next_section(self):
        lines = ["Summary", "Line one", "Line two", "Experience", "Engineer"]
        assert extract_summary(lines) == "Line one Line two"

    def test_fallback_window_of_five_lines(self):
        body = [f"Sentence {i}" for i in range(1, 9)]
        assert extract_summary(["Summary"] + body) == "Sentence 1 Sentence 2 Sentence 3 Sentence 4 Sentence 5"

    def test_fallback_window_shorter_input(self):
        assert extract_summary(["Objective", "Ship things"]) == "Ship things"

    def test_missing_header(self):
        assert extract_summary(["Jane Doe", "Skills", "Python"]) == ""

    def test_stop_keyword_immediately(self):
        assert extract_summary(["Profile", "Work History"]) == ""


class TestExperience:
    def test_flush_on_termination(self):
        lines = ["Experience", "Engineer A", "- did X", "Engineer B", "- did Y", "Education", "BS CS"]
        assert extract_experience(lines) == [
            ExperienceEntry(title="Engineer A", description=["- did X"]),
            ExperienceEntry(title="Engineer B", description=["- did Y"]),
        ]
        assert extract_education(lines) == ["BS CS"]

    def test_flush_at_end_of_input(self):
        lines = ["Work", "Engineer", "• shipped"]
        assert extract_experience(lines) == [ExperienceEntry(title="Engineer", description=["• shipped"])]

    def test_leading_bullets_without_title_are_ignored(self):
        lines = ["Employment", "- orphan bullet", "Engineer", "- kept"]
        assert extract_experience(lines) == [ExperienceEntry(title="Engineer", description=["- kept"])]

    def test_title_without_description(self):
        lines = ["Career", "Intern", "Analyst"]
        result = extract_experience(lines)
        assert [e.title for e in result] == ["Intern", "Analyst"]
        assert all(e.description == () for e in result)

    def test_skills_line_ends_section(self):
        lines = ["Experience", "Engineer", "- did X", "Technical Skills", "Python"]
        assert extract_experience(lines) == [ExperienceEntry(title="Engineer", description=["- did X"])]

    def test_missing_header(self):
        assert extract_experience(["Jane Doe", "Python"]) == []


class TestEducation:
    def test_stops_at_skills(self):
        lines = ["Education", "BS CS", "MS CS", "Skills", "Python"]
        assert extract_education(lines) == ["BS CS", "MS CS"]

    def test_lines_kept_verbatim(self):
        lines = ["Academic Background", "BS, Computer Science - 2020"]
        assert extract_education(lines) == ["BS, Computer Science - 2020"]

    def test_runs_to_end_of_input(self):
        assert extract_education(["Education", "BS CS"]) == ["BS CS"]

    def test_missing_header(self):
        assert extract_education(["Jane Doe"]) == []


class TestSkills:
    def test_delimiter_splitting(self):
        assert extract_skills(["Skills", "Python, Go; Rust|C++"]) == ["Python", "Go", "Rust", "C++"]

    def test_bullets_and_dashes(self):
        lines = ["Tools", "• Docker", "- Kubernetes", "Git - GitHub"]
        assert extract_skills(lines) == ["Docker", "Kubernetes", "Git", "GitHub"]

    def test_duplicates_kept(self):
        assert extract_skills(["Skills", "Python, Python"]) == ["Python", "Python"]

    def test_scans_to_end_of_input(self):
        lines = ["Skills", "Python", "Education", "BS CS"]
        assert extract_skills(lines) == ["Python", "Education", "BS CS"]

    def test_missing_header(self):
        assert extract_skills(["Jane Doe", "Python"]) == []


class TestStructureResumeData:
    def test_full_resume(self):
        record = structure_resume_data(SAMPLE_RESUME, "resume.docx")
        sections = record.sections

        assert record.file_name == "resume.docx"
        assert record.raw_text == SAMPLE_RESUME
        assert sections.contact.name == "Jane Doe"
        assert sections.contact.location == "Austin, TX"
        assert sections.contact.email == "jane.doe@example.com"
        assert sections.contact.phone == "(555) 123-4567"
        assert sections.summary == "Backend engineer focused on APIs. Enjoys mentoring."
        assert sections.experience == (
            ExperienceEntry(
                title="Senior Engineer, Acme Corp",
                description=["- Built billing platform", "- Led migration to Postgres"],
            ),
            ExperienceEntry(title="Engineer, Initech", description=["• Maintained reporting jobs"]),
        )
        assert sections.education == ("BS Computer Science, State University",)
        assert sections.skills == ("Python", "Go", "Rust", "C++")

    def test_empty_input(self):
        record = structure_resume_data("", "empty.docx")
        sections = record.sections

        assert sections.contact.model_dump() == {"name": "", "email": "", "phone": "", "location": ""}
        assert sections.summary == ""
        assert sections.experience == ()
        assert sections.education == ()
        assert sections.skills == ()

    def test_same_text_gives_same_record(self):
        parsed_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
        first = structure_resume_data(SAMPLE_RESUME, "resume.docx", parsed_at=parsed_at)
        second = structure_resume_data(SAMPLE_RESUME, "resume.docx", parsed_at=parsed_at)
        assert first == second

    def test_default_timestamp_is_utc(self):
        record = structure_resume_data("Jane Doe", "resume.docx")
        assert record.parsed_at.tzinfo is not None

    def test_record_sections_cannot_be_mutated(self):
        record = structure_resume_data(SAMPLE_RESUME, "resume.docx")

        with pytest.raises(AttributeError):
            record.sections.skills.append("COBOL")
        with pytest.raises(AttributeError):
            record.sections.experience[0].description.append("- extra")
        with pytest.raises(ValidationError):
            record.sections.summary = "changed"

    def test_serialized_sections_are_json_arrays(self):
        data = structure_resume_data(SAMPLE_RESUME, "resume.docx").model_dump(mode="json")
        assert data["sections"]["skills"] == ["Python", "Go", "Rust", "C++"]
        assert data["sections"]["experience"][1] == {
            "title": "Engineer, Initech",
            "description": ["• Maintained reporting jobs"],
        }

    def test_serializes_with_camel_case_keys(self):
        data = structure_resume_data("Jane Doe", "resume.docx").model_dump(by_alias=True)
        assert set(data) == {"fileName", "parsedAt", "rawText", "sections"}
