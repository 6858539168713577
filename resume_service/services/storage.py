"""
Supabase Storage service: upload rendered PDFs and issue signed URLs.
All PDF file I/O goes through this module.
"""

import logging
import time
from typing import Optional

from resume_service.core.config import settings
from resume_service.core.exceptions import StorageError
from resume_service.schemas.resume import UploadedFile

logger = logging.getLogger(__name__)

# Lazy-init Supabase client (secret key for full bucket access)
_supabase_client = None


def _get_supabase():
    """Get or create the Supabase client using the secret key."""
    global _supabase_client
    if _supabase_client is None:
        from supabase import create_client
        if not settings.SUPABASE_URL or not settings.SUPABASE_SECRET_KEY:
            raise StorageError(
                "SUPABASE_URL and SUPABASE_SECRET_KEY must be set for storage operations"
            )
        _supabase_client = create_client(settings.SUPABASE_URL, settings.SUPABASE_SECRET_KEY)
    return _supabase_client


def build_storage_path(filename: str) -> str:
    """Timestamp-prefixed key so repeated uploads never collide."""
    return f"{int(time.time() * 1000)}_{filename}"


def get_signed_url(bucket: str, storage_path: str, expires_in: int) -> str:
    """Get a signed URL for direct browser download (expires in N seconds)."""
    client = _get_supabase()
    try:
        result = client.storage.from_(bucket).create_signed_url(storage_path, expires_in)
    except Exception as e:
        raise StorageError(f"Failed to create signed URL: {e}") from e
    return result["signedURL"]


async def upload_pdf(
    pdf_bytes: bytes,
    filename: str,
    bucket: Optional[str] = None,
    expires_in: Optional[int] = None,
) -> UploadedFile:
    """Upload a rendered PDF and return its storage path and a time-limited URL."""
    bucket = bucket or settings.SUPABASE_BUCKET_NAME
    expires_in = expires_in or settings.SIGNED_URL_EXPIRES_IN
    storage_path = build_storage_path(filename)

    client = _get_supabase()
    try:
        client.storage.from_(bucket).upload(
            path=storage_path,
            file=pdf_bytes,
            file_options={"content-type": "application/pdf", "upsert": "false"},
        )
    except Exception as e:
        logger.error(f"[STORAGE] Upload to {bucket}/{storage_path} failed: {e}")
        raise StorageError(f"Failed to upload to Supabase: {e}") from e
    logger.info(f"[STORAGE] Uploaded {len(pdf_bytes)} bytes to {bucket}/{storage_path}")

    signed_url = get_signed_url(bucket, storage_path, expires_in)
    return UploadedFile(path=storage_path, signed_url=signed_url, expires_in=expires_in)
