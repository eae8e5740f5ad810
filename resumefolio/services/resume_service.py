import tempfile
from pathlib import Path
from typing import Any, Dict, List

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from ..config import settings
from ..contracts.resume import IResumeParser, ITextExtractor
from ..core.logger import logger
from .resume.exceptions import FileTooLargeError, UnsupportedFormatError
from .resume.extractor import SUPPORTED_EXTENSIONS, file_extension

TEXT_FIELDS = ("name", "email", "phone", "summary")
STRING_LIST_FIELDS = ("skills", "achievements")
ENTRY_FIELDS = {
    "projects": ("title", "description", "link"),
    "education": ("degree", "institution", "year"),
    "experience": ("company", "title", "duration", "description"),
}
LINK_FIELDS = ("github", "linkedin")


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _as_entries(value: Any, keys) -> List[Dict[str, str]]:
    if not isinstance(value, list):
        return []
    return [
        {key: _as_text(item.get(key)) for key in keys}
        for item in value
        if isinstance(item, dict)
    ]


def coerce_parsed_resume(parsed: Dict[str, Any]) -> Dict[str, Any]:
    """Fill in every editable field the form expects.

    Missing or mistyped text becomes ``""`` and missing lists become ``[]``.
    """
    result: Dict[str, Any] = {field: _as_text(parsed.get(field)) for field in TEXT_FIELDS}

    for field in STRING_LIST_FIELDS:
        value = parsed.get(field)
        result[field] = [_as_text(item) for item in value if _as_text(item)] if isinstance(value, list) else []

    for field, keys in ENTRY_FIELDS.items():
        result[field] = _as_entries(parsed.get(field), keys)

    links = parsed.get("links")
    links = links if isinstance(links, dict) else {}
    result["links"] = {key: _as_text(links.get(key)) for key in LINK_FIELDS}
    return result


class ResumeService:
    def __init__(self, extractor: ITextExtractor, parser: IResumeParser):
        self.extractor = extractor
        self.parser = parser

    async def process_upload(self, upload: UploadFile) -> Dict[str, Any]:
        original_name = upload.filename or ""
        ext = file_extension(original_name)
        if ext not in SUPPORTED_EXTENSIONS:
            raise UnsupportedFormatError("Unsupported file type. Please use .pdf, .doc or .docx")

        limit = settings.MAX_UPLOAD_SIZE_MB * 1024 * 1024
        message = f"Resume file is too large (max {settings.MAX_UPLOAD_SIZE_MB}MB)"
        if upload.size is not None and upload.size > limit:
            raise FileTooLargeError(message)
        raw = await upload.read(limit + 1)
        if len(raw) > limit:
            raise FileTooLargeError(message)

        text = await self.extract_text(raw, original_name)
        parsed = await self.parser.parse(text)
        return coerce_parsed_resume(parsed)

    async def extract_text(self, raw: bytes, original_name: str) -> str:
        """Run the extractor on a temporary copy of the upload.

        The temporary file is removed whether or not writing or
        extraction succeeds.
        """
        temp = tempfile.NamedTemporaryFile(delete=False, suffix=file_extension(original_name))
        tmp_path = temp.name
        try:
            with temp:
                temp.write(raw)
            text = await run_in_threadpool(self.extractor.extract, tmp_path, original_name)
        finally:
            Path(tmp_path).unlink(missing_ok=True)

        logger.info(f"Extracted {len(text)} characters from {file_extension(original_name)} upload")
        return text
