from typing import Optional

from fastapi import Request

from resume_chat.config import Settings
from resume_chat.core.resume_store import ResumeStore
from resume_chat.core.schemas import ResumeRecord
from resume_chat.core.session_store import ConversationStore


class CurrentSession:
    """The resume most recently uploaded to this process and its session id."""

    def __init__(self) -> None:
        self.resume: Optional[ResumeRecord] = None
        self.session_id: Optional[str] = None

    def start(self, resume: ResumeRecord, session_id: str) -> None:
        self.resume = resume
        self.session_id = session_id

    def reset(self) -> None:
        self.resume = None
        self.session_id = None


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_resume_store(request: Request) -> ResumeStore:
    return request.app.state.resume_store


def get_conversation_store(request: Request) -> ConversationStore:
    return request.app.state.conversations


def get_current_session(request: Request) -> CurrentSession:
    return request.app.state.current_session
