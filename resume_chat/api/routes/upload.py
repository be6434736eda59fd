import logging
import random
import time
import uuid
from pathlib import Path

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from resume_chat.api.dependencies import CurrentSession, get_current_session, get_resume_store, get_settings
from resume_chat.config import Settings
from resume_chat.core.exceptions import ResumeNotFoundError, ResumeParseError
from resume_chat.core.resume_parser import parse_docx
from resume_chat.core.resume_store import ResumeStore
from resume_chat.core.schemas import ResumeRecord, UploadResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["resume"])

DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def stored_file_name(upload_name: str) -> str:
    """Unique name an upload is parsed and persisted under, e.g. 'resume-1700000000000-123456789.docx'."""
    suffix = Path(upload_name).suffix.lower() or ".docx"
    return f"resume-{int(time.time() * 1000)}-{random.randint(0, 10**9)}{suffix}"


@router.post(
    "/upload",
    response_model=UploadResponse,
    summary="Upload Resume",
    description="Parse a DOCX resume into contact, summary, experience, education and skills sections, persist it and make it the current session's resume.",
    responses={
        400: {"description": "Empty file uploaded"},
        413: {"description": "File too large"},
        415: {"description": "Only .docx files are allowed"},
        422: {"description": "Document could not be decoded"},
    },
)
async def upload_resume(
    resume: UploadFile = File(..., description="Resume file (.docx)"),
    settings: Settings = Depends(get_settings),
    store: ResumeStore = Depends(get_resume_store),
    session: CurrentSession = Depends(get_current_session),
):
    filename = resume.filename or ""
    content_type = (resume.content_type or "").lower()

    if not (filename.lower().endswith(".docx") or content_type == DOCX_CONTENT_TYPE):
        logger.warning(f"Rejected upload '{filename}' ({content_type or 'no content type'})")
        raise HTTPException(status_code=415, detail="Only .docx files are allowed!")

    raw = await resume.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")
    if len(raw) > settings.max_file_size:
        raise HTTPException(status_code=413, detail="File too large")

    file_name = stored_file_name(filename)
    logger.info(f"Processing uploaded file: {filename} as {file_name}")
    try:
        record = parse_docx(raw, file_name)
    except ResumeParseError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    store.save(record)
    session.start(record, uuid.uuid4().hex)

    return UploadResponse(
        message="Resume uploaded and parsed successfully",
        file_name=record.file_name,
        candidate_name=record.sections.contact.name or "Unknown",
        session_id=session.session_id,
    )


@router.get(
    "/resumes/{file_name}",
    response_model=ResumeRecord,
    response_model_by_alias=True,
    summary="Get Parsed Resume",
)
def get_resume(file_name: str, store: ResumeStore = Depends(get_resume_store)):
    try:
        return store.load(file_name)
    except ResumeNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
