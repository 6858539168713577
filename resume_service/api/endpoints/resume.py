# File: resume_service/api/endpoints/resume.py
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from pathlib import Path
from typing import Any
import json
import logging

from resume_service.core.exceptions import ResumeMergeError, ResumeRenderError, StorageError
from resume_service.core.fonts import FontTable, get_font_table
from resume_service.schemas.resume import CreateResumeResponse, ResumeInput
from resume_service.services.merge import merge_resume_data
from resume_service.services.resume_pdf import generate_resume_pdf_buffer
from resume_service.services.storage import upload_pdf
from resume_service.utils.validation import validate_resume_data

router = APIRouter()
logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parents[2] / "data"
PDF_FILENAME = "resume.pdf"


def _load_json(name: str) -> Any:
    with open(DATA_DIR / name, encoding="utf-8") as f:
        return json.load(f)


def _pdf_response(pdf_bytes: bytes) -> Response:
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"inline; filename={PDF_FILENAME}"},
    )


async def _render_input(resume_input: ResumeInput, fonts: FontTable) -> bytes:
    """Merge, validate and render; raises HTTPException with an error/details body."""
    try:
        document = merge_resume_data(resume_input)
    except ResumeMergeError as e:
        raise HTTPException(status_code=400, detail={"error": "Invalid resume data", "details": [str(e)]})

    validation = validate_resume_data(document)
    if not validation.valid:
        raise HTTPException(
            status_code=400,
            detail={"error": "Invalid resume data", "details": validation.errors},
        )

    try:
        return await generate_resume_pdf_buffer(document, fonts)
    except ResumeRenderError as e:
        logger.error(f"Error rendering resume: {e}")
        raise HTTPException(status_code=500, detail={"error": "Failed to create resume", "details": [str(e)]})


@router.post("/create-resume", response_model=CreateResumeResponse)
async def create_resume(
    resume_input: ResumeInput,
    fonts: FontTable = Depends(get_font_table),
) -> Any:
    """
    Render a tailored resume and upload it; returns the storage path and a signed URL.
    """
    pdf_bytes = await _render_input(resume_input, fonts)

    try:
        uploaded = await upload_pdf(pdf_bytes, PDF_FILENAME)
    except StorageError as e:
        logger.error(f"Error uploading resume: {e}")
        raise HTTPException(status_code=500, detail={"error": "Failed to create resume", "details": [str(e)]})

    return CreateResumeResponse(
        success=True,
        message="Resume created and uploaded successfully",
        file=uploaded,
    )


@router.get("/base-resume")
def get_base_resume() -> Any:
    """The untailored input the base resume is built from."""
    return _load_json("base_resume.json")


@router.get("/base-resume-pdf")
async def get_base_resume_pdf(fonts: FontTable = Depends(get_font_table)) -> Response:
    resume_input = ResumeInput.model_validate(_load_json("base_resume.json"))
    return _pdf_response(await _render_input(resume_input, fonts))


@router.get("/test")
async def render_example(fonts: FontTable = Depends(get_font_table)) -> Response:
    """Render the bundled example input without uploading it."""
    resume_input = ResumeInput.model_validate(_load_json("example_input.json"))
    return _pdf_response(await _render_input(resume_input, fonts))
