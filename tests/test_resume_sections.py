"""Section title, bullet and per-section content rendering tests."""

import pytest

from resume_service.schemas.resume import ProjectEntry, SkillEntry
from resume_service.services.resume_sections import (
    BULLET,
    BULLET_INDENT,
    ICON_PADDING,
    ICON_SIZE,
    RULE_END,
    RULE_START,
    project_url,
    render_bullets,
    render_project_entry,
    render_section_title,
    render_skills,
)

LONG_BULLET = (
    "Designed and shipped a document rendering service that assembles resumes from "
    "structured data, places clickable links over contact details and project titles, "
    "and uploads the finished page to object storage with time-limited download links."
)


class TestSectionTitle:

    def test_title_rule_and_gap(self, writer, fonts):
        render_section_title(writer, "EXPERIENCE", fonts)
        title = writer.ctx.runs[-1]
        rule = writer.ctx.rules[-1]
        assert title.text == "EXPERIENCE"
        assert title.font_id == fonts.bold
        assert title.size == 12
        assert (rule.x1, rule.x2) == (RULE_START, RULE_END)
        assert rule.y > title.y
        assert writer.y == pytest.approx(rule.y + 0.5 * writer.line_height())

    def test_titles_are_identical_across_sections(self, writer, fonts):
        render_section_title(writer, "SUMMARY", fonts)
        first_gap = writer.y - writer.ctx.runs[-1].y
        render_section_title(writer, "SKILLS", fonts)
        second_gap = writer.y - writer.ctx.runs[-1].y
        assert first_gap == pytest.approx(second_gap)


class TestBullets:

    def test_hanging_indent(self, writer, fonts):
        render_bullets(writer, [LONG_BULLET], fonts.regular)
        glyph, first, *continuation = writer.ctx.runs
        assert glyph.text == BULLET
        assert glyph.x == writer.left
        assert first.x == pytest.approx(writer.left + BULLET_INDENT)
        assert first.y == glyph.y
        assert continuation, "bullet should wrap onto more than one line"
        for run in continuation:
            assert run.x == pytest.approx(writer.left)

    def test_indent_reapplied_after_wrapped_bullet(self, writer, fonts):
        render_bullets(writer, [LONG_BULLET, "Short follow-up bullet."], fonts.regular)
        glyphs = [r for r in writer.ctx.runs if r.text == BULLET]
        assert len(glyphs) == 2
        second_text = writer.ctx.runs[writer.ctx.runs.index(glyphs[1]) + 1]
        assert second_text.text == "Short follow-up bullet."
        assert second_text.x == pytest.approx(writer.left + BULLET_INDENT)
        assert writer.x == writer.left

    def test_empty_bullet_list_draws_nothing(self, writer, fonts):
        y0 = writer.y
        render_bullets(writer, [], fonts.regular)
        assert writer.ctx.runs == []
        assert writer.y == y0


class TestProjects:

    def test_linked_project_gets_icon_and_zone(self, writer, fonts):
        project = ProjectEntry(title="Resume Builder", subtitle="PDF Service", dates="2025",
                               link="example.com/app", bullets=["One bullet."])
        render_project_entry(writer, project, fonts)
        title = writer.ctx.runs[0]
        zone = writer.ctx.link_zones[0]
        icon = writer.ctx.icons[0]
        assert zone.target == "https://example.com/app"
        assert zone.x == title.x
        assert zone.width == pytest.approx(title.width + ICON_PADDING + ICON_SIZE)
        assert icon.x == pytest.approx(title.x + title.width + ICON_PADDING)

    def test_project_without_link_has_no_overlay(self, writer, fonts):
        project = ProjectEntry(title="Private CRM", subtitle="Booking System", dates="2024",
                               link=None, bullets=["Managed bookings."])
        render_project_entry(writer, project, fonts)
        texts = [r.text for r in writer.ctx.runs]
        assert "Private CRM" in texts
        assert ", Booking System" in texts
        assert "Managed bookings." in texts
        assert writer.ctx.link_zones == []
        assert writer.ctx.icons == []

    def test_subtitle_is_italic_and_dates_right_aligned(self, writer, fonts):
        project = ProjectEntry(title="Tracker", subtitle="Fitness Logging", dates="2025",
                               link=None, bullets=[])
        render_project_entry(writer, project, fonts)
        subtitle = next(r for r in writer.ctx.runs if r.text == ", Fitness Logging")
        dates = next(r for r in writer.ctx.runs if r.text == "2025")
        assert subtitle.font_id == fonts.italic
        assert dates.x + dates.width == pytest.approx(writer.right)
        assert dates.y == subtitle.y

    @pytest.mark.parametrize("link,expected", [
        ("https://example.com", "https://example.com"),
        ("http://example.com", "http://example.com"),
        ("example.com/x", "https://example.com/x"),
        (None, None),
        ("", None),
    ])
    def test_project_url(self, link, expected):
        assert project_url(link) == expected


class TestSkills:

    def test_label_bold_value_regular_one_per_line(self, writer, fonts):
        render_skills(writer, [SkillEntry(label="Languages", value="Python"),
                               SkillEntry(label="Tools", value="Git")], fonts)
        label, value, label2, value2 = writer.ctx.runs
        assert (label.text, label.font_id) == ("Languages: ", fonts.bold)
        assert (value.text, value.font_id) == ("Python", fonts.regular)
        assert value.y == label.y
        assert value.x == pytest.approx(label.x + label.width)
        assert label2.y > label.y
