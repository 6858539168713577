# File: resume_service/api/endpoints/health.py
from fastapi import APIRouter

router = APIRouter()


@router.get("/")
def health():
    return {"status": "ok"}
