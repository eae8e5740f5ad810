import os
import docx2txt
import pdfplumber

from ...core.logger import logger
from .exceptions import ExtractionFailedError, UnsupportedFormatError

SUPPORTED_EXTENSIONS = (".pdf", ".docx", ".doc")


def file_extension(original_name: str) -> str:
    _, ext = os.path.splitext(original_name or "")
    return ext.lower()


class ResumeTextExtractor:
    """Plain text out of PDF and Word résumés.

    ``.doc`` goes through docx2txt as well; legacy binary Word files it
    cannot open come back as ``ExtractionFailedError``.
    """

    def extract(self, file_path: str, original_name: str) -> str:
        ext = file_extension(original_name)
        if ext not in SUPPORTED_EXTENSIONS:
            raise UnsupportedFormatError("Unsupported file type. Please use .pdf, .doc or .docx")

        try:
            if ext == ".pdf":
                text = self._extract_pdf(file_path)
            else:
                text = docx2txt.process(file_path) or ""
        except Exception as e:
            logger.error(f"Error extracting text from {ext} file: {e}")
            raise ExtractionFailedError(f"Could not read the uploaded {ext} file") from e

        text = text.replace("\xa0", " ").strip()
        if not text:
            raise ExtractionFailedError("Resume appears empty or unreadable")
        return text

    def _extract_pdf(self, file_path: str) -> str:
        with pdfplumber.open(file_path) as pdf:
            return "\n".join(page.extract_text() or "" for page in pdf.pages)
