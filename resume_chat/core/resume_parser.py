"""
Heuristic resume section extraction.

Raw text is normalized once into an ordered list of trimmed, non-empty lines.
Every extractor reads that same list and none of them mutates it:

- contact: regex scan over the first CONTACT_WINDOW lines
- summary / experience / education / skills: locate a header by keyword
  (case-insensitive substring match, first occurrence wins), then collect the
  lines after it until a stop keyword or end of input

Extractors are total: on missing data they return "" or [] and never raise.
"""

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Sequence, Union

from resume_chat.core.docx_extractor import extract_docx_text
from resume_chat.core.exceptions import DocumentExtractionError, ResumeParseError
from resume_chat.core.schemas import Contact, ExperienceEntry, ResumeRecord, ResumeSections

logger = logging.getLogger(__name__)

NOT_FOUND = -1
CONTACT_WINDOW = 10
SUMMARY_WINDOW = 5

SUMMARY_KEYWORDS = ("summary", "objective", "profile", "about")
SUMMARY_STOP_KEYWORDS = ("experience", "education", "skills", "work")
EXPERIENCE_KEYWORDS = ("experience", "work", "employment", "career")
EXPERIENCE_STOP_KEYWORDS = ("education", "skills")
EDUCATION_KEYWORDS = ("education", "academic", "degree", "university", "college")
EDUCATION_STOP_KEYWORDS = ("skills", "experience")
SKILLS_KEYWORDS = ("skills", "competencies", "technologies", "tools")

BULLET_PREFIXES = ("-", "•")

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b", re.ASCII)
PHONE_RE = re.compile(r"(\+?1?[-.\s]?)?\(?([0-9]{3})\)?[-.\s]?([0-9]{3})[-.\s]?([0-9]{4})")
# "City, Region" e.g. "Austin, TX" or "New York, New York"
LOCATION_RE = re.compile(r"^[A-Za-z .'-]+,\s*[A-Za-z][A-Za-z .'-]+$")
SKILL_DELIMITER_RE = re.compile(r"[,;|•-]")


def normalize_lines(text: Optional[str]) -> List[str]:
    """Split raw text into trimmed lines, dropping blank ones."""
    if not text:
        return []
    return [line.strip() for line in text.split("\n") if line.strip()]


def _contains_any(line: str, keywords: Sequence[str]) -> bool:
    lowered = line.lower()
    return any(keyword in lowered for keyword in keywords)


def locate_section(lines: Sequence[str], keywords: Sequence[str]) -> int:
    """
    Return the index of the first line after the first header matching any keyword.

    Matching is a case-insensitive substring test, so "Experienced leader"
    matches "experience". Returns NOT_FOUND (-1) when no line matches.
    """
    for i, line in enumerate(lines):
        if _contains_any(line, keywords):
            return i + 1
    return NOT_FOUND


def extract_contact(lines: Sequence[str]) -> Contact:
    """
    Pull name, email, phone and location from the top of the resume.

    Name and location keep their first candidate; email and phone keep the
    last match found inside the window.
    """
    name = email = phone = location = ""

    for line in lines[:CONTACT_WINDOW]:
        email_match = EMAIL_RE.search(line)
        phone_match = PHONE_RE.search(line)

        if not name and len(line) > 2 and not email_match and not phone_match:
            name = line
        elif not location and not email_match and not phone_match and LOCATION_RE.match(line):
            location = line

        if email_match:
            email = email_match.group(0)
        if phone_match:
            phone = phone_match.group(0).strip()

    return Contact(name=name, email=email, phone=phone, location=location)


def extract_summary(lines: Sequence[str]) -> str:
    start = locate_section(lines, SUMMARY_KEYWORDS)
    if start == NOT_FOUND:
        return ""

    end = None
    for i in range(start, len(lines)):
        # The blank-line check never fires on normalized lines; the window cap applies instead.
        if _contains_any(lines[i], SUMMARY_STOP_KEYWORDS) or lines[i] == "":
            end = i
            break

    if end is None:
        end = min(start + SUMMARY_WINDOW, len(lines))

    logger.debug(f"Summary spans lines {start}..{end}")
    return " ".join(lines[start:end])


@dataclass(frozen=True)
class NoCurrentEntry:
    """No experience entry is open."""


@dataclass
class AccumulatingEntry:
    """An open experience entry collecting description lines."""
    title: str
    description: List[str] = field(default_factory=list)

    def to_entry(self) -> ExperienceEntry:
        return ExperienceEntry(title=self.title, description=tuple(self.description))


EntryState = Union[NoCurrentEntry, AccumulatingEntry]
NO_CURRENT_ENTRY = NoCurrentEntry()


class ExperienceAccumulator:
    """
    Single-pass state machine grouping experience lines into entries.

    A line that does not start with a bullet ("-" or "•") opens a new entry;
    bullet lines are appended to the open entry. An entry only reaches
    `entries` when it is flushed: by the next title line, by a line naming
    the education or skills section, or by finish().
    """

    def __init__(self) -> None:
        self.state: EntryState = NO_CURRENT_ENTRY
        self.entries: List[ExperienceEntry] = []
        self.terminated = False

    def flush(self) -> None:
        if isinstance(self.state, AccumulatingEntry):
            self.entries.append(self.state.to_entry())
        self.state = NO_CURRENT_ENTRY

    def feed(self, line: str) -> bool:
        """Consume one line. Returns False once the section has ended."""
        if self.terminated:
            return False

        if _contains_any(line, EXPERIENCE_STOP_KEYWORDS):
            self.flush()
            self.terminated = True
            return False

        if line and not line.startswith(BULLET_PREFIXES):
            self.flush()
            self.state = AccumulatingEntry(title=line)
        elif isinstance(self.state, AccumulatingEntry) and line:
            self.state.description.append(line)
        # bullet with no open entry: ignored
        return True

    def finish(self) -> List[ExperienceEntry]:
        self.flush()
        return list(self.entries)


def extract_experience(lines: Sequence[str]) -> List[ExperienceEntry]:
    start = locate_section(lines, EXPERIENCE_KEYWORDS)
    if start == NOT_FOUND:
        return []

    accumulator = ExperienceAccumulator()
    for line in lines[start:]:
        if not accumulator.feed(line):
            break

    entries = accumulator.finish()
    logger.debug(f"Experience section at line {start}: {len(entries)} entries")
    return entries


def extract_education(lines: Sequence[str]) -> List[str]:
    start = locate_section(lines, EDUCATION_KEYWORDS)
    if start == NOT_FOUND:
        return []

    education: List[str] = []
    for line in lines[start:]:
        if _contains_any(line, EDUCATION_STOP_KEYWORDS):
            break
        if line:
            education.append(line)
    return education


def extract_skills(lines: Sequence[str]) -> List[str]:
    """Split every line after the skills header into items; runs to end of input."""
    start = locate_section(lines, SKILLS_KEYWORDS)
    if start == NOT_FOUND:
        return []

    skills: List[str] = []
    for line in lines[start:]:
        if not line:
            continue
        skills.extend(token.strip() for token in SKILL_DELIMITER_RE.split(line) if token.strip())
    return skills


def structure_resume_data(
    text: Optional[str],
    file_name: str,
    parsed_at: Optional[datetime] = None,
) -> ResumeRecord:
    """
    Build the full ResumeRecord from already-extracted plain text.

    Deterministic apart from `parsed_at`, which defaults to the current UTC time.
    """
    lines = normalize_lines(text)
    logger.debug(f"Structuring '{file_name}': {len(lines)} non-empty lines")

    sections = ResumeSections(
        contact=extract_contact(lines),
        summary=extract_summary(lines),
        experience=extract_experience(lines),
        education=extract_education(lines),
        skills=extract_skills(lines),
    )
    return ResumeRecord(
        file_name=file_name,
        parsed_at=parsed_at or datetime.now(timezone.utc),
        raw_text=text or "",
        sections=sections,
    )


def parse_docx(docx_bytes: bytes, file_name: str) -> ResumeRecord:
    """Decode a DOCX and structure its text. Decoding failures raise ResumeParseError."""
    try:
        text = extract_docx_text(docx_bytes)
    except DocumentExtractionError as exc:
        raise ResumeParseError(f"Failed to parse resume: {exc}") from exc
    return structure_resume_data(text, file_name)
