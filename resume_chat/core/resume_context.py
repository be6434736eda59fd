from typing import List, Optional

from resume_chat.core.schemas import ResumeRecord

SYSTEM_PROMPT_PREAMBLE = (
    "You are a helpful assistant that answers questions about a resume. "
    "Provide concise, direct answers based only on the resume information provided. "
    "If information is not in the resume, say so clearly.\n\n"
)


def build_resume_context(record: Optional[ResumeRecord]) -> str:
    """Render the parsed resume as plain text for a chat prompt. Empty fields are left out."""
    if record is None:
        return ""

    sections = record.sections
    parts: List[str] = ["Resume Information:"]

    if sections.contact.name:
        parts.append(f"Name: {sections.contact.name}")
    if sections.contact.email:
        parts.append(f"Email: {sections.contact.email}")
    if sections.summary:
        parts.append(f"Summary: {sections.summary}")

    if sections.experience:
        parts.append("Experience:")
        for index, entry in enumerate(sections.experience, start=1):
            parts.append(f"{index}. {entry.title}")
            if entry.description:
                parts.append(f"   {' '.join(entry.description)}")

    if sections.education:
        parts.append(f"Education: {', '.join(sections.education)}")
    if sections.skills:
        parts.append(f"Skills: {', '.join(sections.skills)}")

    return "\n".join(parts) + "\n"


def build_system_prompt(resume_context: str) -> str:
    prompt = SYSTEM_PROMPT_PREAMBLE
    if resume_context:
        prompt += f"Resume Information:\n{resume_context}"
    return prompt
