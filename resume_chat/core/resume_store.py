import logging
from pathlib import Path
from typing import Union

from resume_chat.core.exceptions import ResumeNotFoundError
from resume_chat.core.schemas import ResumeRecord

logger = logging.getLogger(__name__)

PARSED_SUFFIX = ".json"


def parsed_file_name(file_name: str) -> str:
    """'resume-123.docx' -> 'resume-123.json'. Names without an extension just gain one."""
    return Path(file_name).with_suffix(PARSED_SUFFIX).name


class ResumeStore:
    """Persists ResumeRecords as JSON documents under one directory."""

    def __init__(self, parsed_dir: Union[str, Path]):
        self.parsed_dir = Path(parsed_dir)

    def path_for(self, file_name: str) -> Path:
        return self.parsed_dir / parsed_file_name(file_name)

    def save(self, record: ResumeRecord) -> Path:
        self.parsed_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(record.file_name)
        path.write_text(record.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
        logger.info(f"Saved parsed resume to {path}")
        return path

    def load(self, file_name: str) -> ResumeRecord:
        path = self.path_for(file_name)
        if not path.is_file():
            raise ResumeNotFoundError(file_name)
        return ResumeRecord.model_validate_json(path.read_text(encoding="utf-8"))
