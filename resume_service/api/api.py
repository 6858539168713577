# File: resume_service/api/api.py
from fastapi import APIRouter

from resume_service.api.endpoints import health, resume

api_router = APIRouter()
api_router.include_router(resume.router, tags=["resume"])
api_router.include_router(health.router, prefix="/health", tags=["health"])
