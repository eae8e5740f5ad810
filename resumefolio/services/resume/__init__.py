from .extractor import ResumeTextExtractor, SUPPORTED_EXTENSIONS
from .parser import GeminiResumeParser, build_prompt, extract_json_block, parse_json_reply
from .exceptions import (
    ResumeProcessingError,
    UnsupportedFormatError,
    FileTooLargeError,
    ExtractionFailedError,
    NoJsonFoundError,
    MalformedJsonError,
    UpstreamError,
)

__all__ = [
    "ResumeTextExtractor",
    "SUPPORTED_EXTENSIONS",
    "GeminiResumeParser",
    "build_prompt",
    "extract_json_block",
    "parse_json_reply",
    "ResumeProcessingError",
    "UnsupportedFormatError",
    "FileTooLargeError",
    "ExtractionFailedError",
    "NoJsonFoundError",
    "MalformedJsonError",
    "UpstreamError",
]
