"""
Section rendering: titled sections with a rule underneath, bullet lists and
the per-section content blocks of the single-page template.
"""

import logging
import math
from typing import Callable, List, Optional

from resume_service.core.fonts import FontTable
from resume_service.schemas.resume import (
    Education,
    ExperienceEntry,
    ProjectEntry,
    SkillEntry,
)
from resume_service.services.page_writer import PageWriter

logger = logging.getLogger(__name__)

SECTION_TITLE_SIZE = 12
BODY_SIZE = 10
RULE_START = 23.0  # 2pt left of the margin
RULE_END = 588.0

BULLET = "•"
BULLET_INDENT = 20.0

ICON_SIZE = 7.0
ICON_PADDING = 2.0
ICON_OFFSET_Y = 3.0  # centers the icon on a 10pt line
LINK_HEIGHT = 12.0


def render_section_title(writer: PageWriter, title: str, fonts: FontTable) -> None:
    """Bold title, hairline gap, rule across the page, half-line gap."""
    writer.set_size(SECTION_TITLE_SIZE).set_font(fonts.bold)
    writer.write(title)
    writer.move_down(0.125)
    writer.draw_line(RULE_START, RULE_END)
    writer.move_down(0.5)


def render_section(
    writer: PageWriter,
    title: str,
    fonts: FontTable,
    content: Callable[[], None],
) -> None:
    render_section_title(writer, title, fonts)
    content()


def render_bullets(writer: PageWriter, bullets: List[str], font_id: str) -> None:
    """
    Bullet glyph at the left margin, text at a 20pt hanging indent.

    The x-origin is set explicitly for every bullet: after a wrapped bullet the
    writer's next line starts back at the left margin.
    """
    left = writer.left
    text_width = writer.content_width - BULLET_INDENT
    writer.set_size(BODY_SIZE).set_font(font_id)

    for bullet in bullets:
        start_y = writer.y
        writer.write(BULLET, x=left, y=start_y, continued=True)
        writer.write(bullet, x=left + BULLET_INDENT, y=start_y, width=text_width)

    writer.reset_x()


def render_summary(writer: PageWriter, summary: str, fonts: FontTable) -> None:
    writer.set_size(BODY_SIZE).set_font(fonts.regular)
    writer.write(summary)
    writer.move_down()


def render_experience_entry(writer: PageWriter, job: ExperienceEntry, fonts: FontTable) -> None:
    # Role (bold), Institution - Location (regular), dates right-aligned
    writer.set_size(BODY_SIZE).set_font(fonts.bold)
    writer.write(job.role, continued=True)
    writer.set_font(fonts.regular)
    writer.write(f", {job.institution} - {job.location}", continued=True)
    writer.write(job.dates, align="right")

    render_bullets(writer, job.bullets, fonts.regular)
    writer.move_down()


def project_url(link: Optional[str]) -> Optional[str]:
    if not link:
        return None
    return link if link.startswith("http") else f"https://{link}"


def render_project_entry(writer: PageWriter, project: ProjectEntry, fonts: FontTable) -> None:
    """
    Bold title + link icon, italic subtitle, dates right-aligned, then bullets.

    Projects without a link get neither icon nor link zone.
    """
    url = project_url(project.link)
    if not url:
        logger.debug(f"Project '{project.title}' has no link, skipping icon")

    writer.set_size(BODY_SIZE).set_font(fonts.bold)
    title_x = writer.x
    title_y = writer.y
    title_width = writer.measure(project.title)
    writer.write(project.title, continued=True)

    if url:
        writer.draw_icon(title_x + title_width + ICON_PADDING, title_y + ICON_OFFSET_Y, ICON_SIZE)
        writer.add_link_zone(title_x, title_y, title_width + ICON_PADDING + ICON_SIZE, LINK_HEIGHT, url)
        # Blank room for the icon, 1pt tighter so the comma sits close to it
        space_width = ICON_SIZE + ICON_PADDING * 2 - 1
        writer.write(" " * math.ceil(space_width / writer.measure(" ")), continued=True)

    writer.set_font(fonts.italic)
    writer.write(f", {project.subtitle}", continued=True)
    writer.set_font(fonts.regular)
    writer.write(project.dates, align="right")

    render_bullets(writer, project.bullets, fonts.regular)
    writer.move_down()


def render_education(writer: PageWriter, education: Education, fonts: FontTable) -> None:
    writer.set_size(BODY_SIZE).set_font(fonts.bold)
    writer.write(education.university, continued=True)
    writer.write(education.expected_grad, align="right")

    writer.set_font(fonts.regular)
    writer.write(education.degree, continued=True)
    writer.write(education.cumulative_gpa, align="right")

    writer.set_font(fonts.italic)
    writer.write(education.coursework)
    writer.move_down()


def render_skills(writer: PageWriter, skills: List[SkillEntry], fonts: FontTable) -> None:
    writer.set_size(BODY_SIZE)
    for skill in skills:
        writer.set_font(fonts.bold)
        writer.write(f"{skill.label}: ", continued=True)
        writer.set_font(fonts.regular)
        writer.write(skill.value)
