"""
Font resolution: decided once per process, then shared read-only.

The custom four-weight family (regular/bold/italic/bold-italic) is used only
when all four font files exist and load with PyMuPDF. Otherwise every style
tier maps to the matching Helvetica base-14 weight. The renderer never makes
this decision itself; it only consumes the resulting FontTable.
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

import fitz  # PyMuPDF

from resume_service.core.config import settings
from resume_service.core.exceptions import FontResourceMissing

logger = logging.getLogger(__name__)

# PyMuPDF base-14 codes for Helvetica
BASE_FONTS = {
    "regular": "helv",
    "bold": "hebo",
    "italic": "heit",
    "bold_italic": "hebi",
}

# "<family> <suffix>.ttf", e.g. "Cambria BoldItalic.ttf"
STYLE_FILE_SUFFIXES = {
    "regular": "Regular",
    "bold": "Bold",
    "italic": "Italic",
    "bold_italic": "BoldItalic",
}


@dataclass(frozen=True)
class FontTable:
    """Resolved font ids per style tier, plus font files for custom ids."""
    has_custom: bool
    regular: str
    bold: str
    italic: str
    bold_italic: str
    files: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def font_ids(self) -> Tuple[str, str, str, str]:
        return (self.regular, self.bold, self.italic, self.bold_italic)

    def fontfile(self, font_id: str) -> Optional[str]:
        return self.files.get(font_id)


def custom_font_ids(family: str) -> dict:
    return {
        "regular": family,
        "bold": f"{family}Bold",
        "italic": f"{family}Italic",
        "bold_italic": f"{family}BoldItalic",
    }


def custom_font_paths(fonts_dir: Path, family: str) -> dict:
    return {
        style: fonts_dir / f"{family} {suffix}.ttf"
        for style, suffix in STYLE_FILE_SUFFIXES.items()
    }


def _custom_family_loadable(paths: dict) -> bool:
    missing = [str(p) for p in paths.values() if not p.is_file()]
    if missing:
        logger.info(f"[FONTS] Custom font files not found: {', '.join(missing)}")
        return False

    for style, path in paths.items():
        try:
            fitz.Font(fontfile=str(path))
        except Exception as e:
            logger.warning(f"[FONTS] Could not load {style} font {path}: {e}")
            return False
    return True


def base_font_table() -> FontTable:
    """Helvetica table; raises FontResourceMissing if PyMuPDF lacks the base family."""
    for font_id in BASE_FONTS.values():
        try:
            fitz.Font(font_id)
        except Exception as e:
            raise FontResourceMissing(f"Base font '{font_id}' is unavailable: {e}") from e
    return FontTable(has_custom=False, **BASE_FONTS)


def resolve_fonts(fonts_dir: Optional[str] = None, family: Optional[str] = None) -> FontTable:
    """Pick the custom family if all four weights load, else the Helvetica fallback."""
    fonts_dir = Path(fonts_dir or settings.FONTS_DIR)
    family = family or settings.CUSTOM_FONT_FAMILY

    paths = custom_font_paths(fonts_dir, family)
    if _custom_family_loadable(paths):
        ids = custom_font_ids(family)
        files = {ids[style]: str(path) for style, path in paths.items()}
        logger.info(f"[FONTS] {family} fonts found in {fonts_dir}")
        return FontTable(has_custom=True, files=MappingProxyType(files), **ids)

    logger.info(f"[FONTS] {family} fonts not available, using Helvetica fallback")
    logger.info(f"[FONTS] Add '{family} Regular/Bold/Italic/BoldItalic.ttf' to {fonts_dir}")
    return base_font_table()


@lru_cache(maxsize=1)
def get_font_table() -> FontTable:
    """Process-wide font table, resolved on first use (normally at startup)."""
    return resolve_fonts()
