# File: resume_service/core/config.py
import os
from pathlib import Path

from dotenv import load_dotenv

# .env.local wins over .env, matching the local dev setup
load_dotenv(".env.local")
load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings:
    PROJECT_NAME: str = "Resume PDF Service"
    PROJECT_VERSION: str = "0.1.0"

    # Supabase storage
    SUPABASE_URL: str = os.getenv("SUPABASE_URL", "")
    SUPABASE_SECRET_KEY: str = os.getenv("SUPABASE_SECRET_KEY", "")
    SUPABASE_BUCKET_NAME: str = os.getenv("SUPABASE_BUCKET_NAME", "resumes")
    SIGNED_URL_EXPIRES_IN: int = int(os.getenv("SIGNED_URL_EXPIRES_IN", "3600"))

    # Fonts
    FONTS_DIR: str = os.getenv("FONTS_DIR", str(PACKAGE_DIR / "fonts"))
    CUSTOM_FONT_FAMILY: str = os.getenv("CUSTOM_FONT_FAMILY", "Cambria")

    # Contact line: explicit map link for the address, otherwise a maps search URL is built
    ADDRESS_MAP_URL: str = os.getenv("ADDRESS_MAP_URL", "")

    # CORS settings
    CORS_ORIGINS: list = os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")


settings = Settings()
