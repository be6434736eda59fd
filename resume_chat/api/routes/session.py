from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from resume_chat.api.dependencies import CurrentSession, get_conversation_store, get_current_session
from resume_chat.core.resume_context import build_resume_context, build_system_prompt
from resume_chat.core.schemas import ClearSessionRequest, Exchange, ResumeContextResponse, SessionInfo
from resume_chat.core.session_store import DEFAULT_SESSION_ID, ConversationStore

router = APIRouter(tags=["session"])


@router.get("/session", response_model=SessionInfo)
def get_session(session: CurrentSession = Depends(get_current_session)):
    return SessionInfo(
        has_resume=session.resume is not None,
        candidate_name=(session.resume.sections.contact.name or None) if session.resume else None,
        session_id=session.session_id,
    )


@router.get("/session/context", response_model=ResumeContextResponse)
def get_session_context(session: CurrentSession = Depends(get_current_session)):
    """Resume context and system prompt a chat model would be given for the current resume."""
    if session.resume is None:
        raise HTTPException(
            status_code=400,
            detail="No resume data available. Please upload a resume file first.",
        )
    context = build_resume_context(session.resume)
    return ResumeContextResponse(
        session_id=session.session_id,
        context=context,
        system_prompt=build_system_prompt(context),
    )


@router.get("/session/history", response_model=List[Exchange])
def get_session_history(
    session_id: Optional[str] = None,
    session: CurrentSession = Depends(get_current_session),
    conversations: ConversationStore = Depends(get_conversation_store),
):
    return conversations.history(session_id or session.session_id or DEFAULT_SESSION_ID)


@router.post("/session/history", response_model=List[Exchange])
def record_exchange(
    exchange: Exchange,
    session_id: Optional[str] = None,
    session: CurrentSession = Depends(get_current_session),
    conversations: ConversationStore = Depends(get_conversation_store),
):
    """Append one user/bot exchange to a session's history and return the history."""
    session_id = session_id or session.session_id or DEFAULT_SESSION_ID
    conversations.append(session_id, exchange.user, exchange.bot)
    return conversations.history(session_id)


@router.post("/clear-session")
def clear_session(
    payload: Optional[ClearSessionRequest] = None,
    session: CurrentSession = Depends(get_current_session),
    conversations: ConversationStore = Depends(get_conversation_store),
):
    session_id = (payload.session_id if payload else None) or session.session_id or DEFAULT_SESSION_ID
    conversations.clear(session_id)
    session.reset()
    return {"success": True, "message": "Session cleared"}
