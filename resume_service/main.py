# File: resume_service/main.py
from fastapi import FastAPI, HTTPException, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from resume_service.core.config import settings
from resume_service.core.fonts import get_font_table
from resume_service.api.api import api_router

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Resolve fonts once at startup; every render reads the same table
fonts = get_font_table()
logger.info(f"Using {'custom' if fonts.has_custom else 'Helvetica'} fonts for rendering")
logger.info(f"Using Supabase bucket: {settings.SUPABASE_BUCKET_NAME}")

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION
)

# Configure CORS with settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router
app.include_router(api_router)


@app.exception_handler(HTTPException)
async def error_body_handler(request: Request, exc: HTTPException):
    # {"error", "details"} bodies go out at the top level, not under "detail"
    if isinstance(exc.detail, dict):
        return JSONResponse(status_code=exc.status_code, content=exc.detail, headers=exc.headers)
    return await http_exception_handler(request, exc)


@app.get("/")
def read_root():
    return {"status": "Resume PDF Service is running"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=3000)
