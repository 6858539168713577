"""
Resume PDF assembly.

Renders a ResumeDocument onto one US Letter page in a fixed order:
name → contact line (with links) → SUMMARY → EXPERIENCE → PROJECTS →
EDUCATION → SKILLS, then serializes the page into a single byte buffer.
Nothing is returned unless the whole page rendered.
"""

import asyncio
import logging
from typing import Optional

from resume_service.core.config import settings
from resume_service.core.fonts import FontTable
from resume_service.schemas.resume import ResumeDocument
from resume_service.services.overlay_locator import (
    centered_origin,
    icon_x_after,
    locate_contact_overlays,
)
from resume_service.services.page_writer import PageWriter
from resume_service.services.resume_sections import (
    BODY_SIZE,
    ICON_OFFSET_Y,
    ICON_PADDING,
    ICON_SIZE,
    LINK_HEIGHT,
    render_education,
    render_experience_entry,
    render_project_entry,
    render_section,
    render_skills,
    render_summary,
)

logger = logging.getLogger(__name__)

NAME_SIZE = 20


def render_header(
    writer: PageWriter,
    document: ResumeDocument,
    fonts: FontTable,
    map_url: Optional[str] = None,
) -> None:
    """Centered name and contact line; link zones and the website icon sit on the contact text."""
    writer.set_size(NAME_SIZE).set_font(fonts.bold)
    writer.write(document.name, align="center")

    writer.set_size(BODY_SIZE).set_font(fonts.regular)
    contact = document.contact
    contact_y = writer.y
    x0 = centered_origin(writer.page_width, writer.measure(contact))
    overlays = locate_contact_overlays(contact, x0, writer.measure, map_url)

    writer.write(contact, align="center")

    for item in overlays:
        writer.add_link_zone(item.overlay.x, contact_y, item.overlay.width, LINK_HEIGHT, item.target)
        if item.kind == "website":
            writer.draw_icon(
                icon_x_after(item.overlay, ICON_PADDING),
                contact_y + ICON_OFFSET_Y,
                ICON_SIZE,
            )


def render_resume(
    document: ResumeDocument,
    fonts: FontTable,
    map_url: Optional[str] = None,
) -> PageWriter:
    """Draw the whole page. The returned writer still has to be finalized."""
    writer = PageWriter(fonts)
    try:
        render_header(writer, document, fonts, map_url)

        render_section(writer, "SUMMARY", fonts,
                       lambda: render_summary(writer, document.summary, fonts))

        def experience():
            for job in document.experience:
                render_experience_entry(writer, job, fonts)

        render_section(writer, "EXPERIENCE", fonts, experience)

        def projects():
            for project in document.projects:
                render_project_entry(writer, project, fonts)

        render_section(writer, "PROJECTS", fonts, projects)

        render_section(writer, "EDUCATION", fonts,
                       lambda: render_education(writer, document.education, fonts))
        render_section(writer, "SKILLS", fonts,
                       lambda: render_skills(writer, document.skills, fonts))
    except Exception:
        writer.close()
        raise

    if writer.y > writer.ctx.page.rect.height:
        logger.warning(f"[RENDER] Content runs past the page bottom (y={writer.y:.1f})")
    return writer


def render_resume_pdf(document: ResumeDocument, fonts: FontTable) -> bytes:
    """Render and serialize; returns the complete PDF bytes."""
    writer = render_resume(document, fonts, settings.ADDRESS_MAP_URL or None)
    links = len(writer.ctx.link_zones)
    pdf_bytes = writer.finalize()
    logger.info(
        f"[RENDER] Resume for {document.name}: {len(pdf_bytes)} bytes, "
        f"{links} links, fonts={'custom' if fonts.has_custom else 'base'}"
    )
    return pdf_bytes


async def generate_resume_pdf_buffer(document: ResumeDocument, fonts: FontTable) -> bytes:
    """Async entry point: renders off the event loop, awaited once by the caller."""
    return await asyncio.to_thread(render_resume_pdf, document, fonts)
