import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI

from resume_chat.api.dependencies import CurrentSession
from resume_chat.api.routes.session import router as session_router
from resume_chat.api.routes.upload import router as upload_router
from resume_chat.config import Settings, get_settings
from resume_chat.core.resume_store import ResumeStore
from resume_chat.core.session_store import ConversationStore


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Resume Chat",
        description="Parses DOCX resumes into structured sections and prepares them as chat context",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings
    app.state.resume_store = ResumeStore(settings.parsed_dir)
    app.state.conversations = ConversationStore(settings.conversation_history_limit)
    app.state.current_session = CurrentSession()

    app.include_router(upload_router)
    app.include_router(session_router)

    @app.get("/", tags=["health"])
    def root():
        return {"service": "resume-chat", "status": "running"}

    @app.get("/health", tags=["health"])
    def health():
        return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

    return app


app = create_app()
