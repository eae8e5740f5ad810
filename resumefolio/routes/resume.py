from fastapi import APIRouter, Depends, File, UploadFile

from ..services.resume_service import ResumeService
from ..dependencies.resume_dependencies import get_resume_service

router = APIRouter()


@router.post("/upload")
async def upload_resume(
    resume: UploadFile = File(...),
    resume_service: ResumeService = Depends(get_resume_service),
):
    """Extract and parse an uploaded résumé into editable portfolio fields."""
    try:
        parsed_data = await resume_service.process_upload(resume)
    finally:
        await resume.close()
    return {"parsedData": parsed_data}
