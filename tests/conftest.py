import pytest

from resume_service.core.fonts import base_font_table
from resume_service.schemas.resume import ResumeDocument
from resume_service.services.page_writer import PageWriter

CONTACT_LINE = "123 Main St, City | user@example.com | +1 (555) 123-4567 | https://example.com"


@pytest.fixture
def contact_line():
    return CONTACT_LINE


@pytest.fixture
def fonts():
    return base_font_table()


@pytest.fixture
def writer(fonts):
    w = PageWriter(fonts)
    yield w
    w.close()


@pytest.fixture
def document():
    return ResumeDocument.model_validate({
        "name": "Jordan Lee",
        "contactLine": CONTACT_LINE,
        "summary": "Developer focused on reliable backend services and document tooling.",
        "skills": [
            {"label": "Languages", "value": "Python, SQL, TypeScript"},
            {"label": "Tools", "value": "PostgreSQL, Docker, Git"},
        ],
        "experience": [
            {
                "role": "Software Developer",
                "institution": "Acme Corp",
                "location": "Halifax, NS",
                "dates": "2024 - 2025",
                "bullets": [
                    "Built PDF generation for customer invoices.",
                    "Reduced report latency by moving aggregation into SQL views.",
                ],
            },
        ],
        "projects": [
            {
                "title": "Resume Builder",
                "subtitle": "PDF Resume Service",
                "dates": "2025",
                "link": "example.com/resume-builder",
                "bullets": ["Rendered resumes with clickable links."],
            },
            {
                "title": "Private CRM",
                "subtitle": "Booking System",
                "dates": "2024",
                "link": None,
                "bullets": ["Managed customers and bookings."],
            },
        ],
        "education": {
            "university": "Dalhousie University",
            "degree": "Bachelor of Computer Science",
            "coursework": "Data Structures, Algorithms",
            "expectedGrad": "Expected Graduation: 2029",
            "cumulativeGPA": "GPA: 4.0/4.3",
        },
    })
