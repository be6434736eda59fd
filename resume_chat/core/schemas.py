from datetime import datetime
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Contact(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""


class ExperienceEntry(BaseModel):
    """One experience record: a title line plus the lines that follow it."""
    model_config = ConfigDict(frozen=True)

    title: str
    description: Tuple[str, ...] = ()


class ResumeSections(BaseModel):
    model_config = ConfigDict(frozen=True)

    contact: Contact = Field(default_factory=Contact)
    summary: str = ""
    experience: Tuple[ExperienceEntry, ...] = ()
    education: Tuple[str, ...] = ()
    skills: Tuple[str, ...] = ()


class ResumeRecord(BaseModel):
    """
    The structured result of one parse.

    Serialized with camelCase keys (fileName, parsedAt, rawText) to match the
    persisted JSON documents; snake_case names are accepted on input too.
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    file_name: str
    parsed_at: datetime
    raw_text: str
    sections: ResumeSections


class UploadResponse(BaseModel):
    success: bool = True
    message: str
    file_name: str
    candidate_name: str
    session_id: str


class SessionInfo(BaseModel):
    has_resume: bool
    candidate_name: Optional[str] = None
    session_id: Optional[str] = None


class Exchange(BaseModel):
    user: str
    bot: str


class ResumeContextResponse(BaseModel):
    session_id: Optional[str] = None
    context: str
    system_prompt: str


class ClearSessionRequest(BaseModel):
    session_id: Optional[str] = None
