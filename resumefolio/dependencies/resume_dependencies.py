from fastapi import Depends
from ..contracts.resume import IResumeParser, ITextExtractor
from ..services.resume import GeminiResumeParser, ResumeTextExtractor
from ..services.resume_service import ResumeService


def get_text_extractor() -> ITextExtractor:
    return ResumeTextExtractor()


def get_resume_parser() -> IResumeParser:
    return GeminiResumeParser()


def get_resume_service(
    extractor: ITextExtractor = Depends(get_text_extractor),
    parser: IResumeParser = Depends(get_resume_parser),
) -> ResumeService:
    return ResumeService(extractor=extractor, parser=parser)
