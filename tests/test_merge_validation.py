"""Merging tailored input with template data, and validating the result."""

import pytest

from resume_service.core.exceptions import ResumeMergeError
from resume_service.schemas.resume import ResumeInput
from resume_service.services.merge import merge_resume_data
from resume_service.services.template_data import TEMPLATE_DATA
from resume_service.utils.validation import validate_resume_data


def make_input(**overrides):
    data = {
        "isInternship": False,
        "summary": "Backend developer.",
        "skills": [{"label": "Languages", "value": "Python"}],
        "experience": [
            {"experienceId": "harbour-analytics", "role": "Backend Developer", "bullets": ["Built queues."]},
            {"experienceId": "northwind", "role": "Intern", "bullets": ["Wrote SQL views."]},
        ],
        "projects": [
            {"projectId": "booking-crm", "bullets": ["Modelled bookings."]},
            {"projectId": "campus-sms", "bullets": ["Scheduled sends."]},
        ],
    }
    data.update(overrides)
    return ResumeInput.model_validate(data)


class TestMerge:

    def test_fixed_fields_come_from_template(self):
        document = merge_resume_data(make_input())
        assert document.name == TEMPLATE_DATA["name"]
        assert document.experience[0].institution == "Harbour Analytics"
        assert document.experience[0].role == "Backend Developer"
        assert document.education.expected_grad == "Expected Graduation: 2029"

    def test_input_order_is_kept(self):
        document = merge_resume_data(make_input())
        assert [e.institution for e in document.experience] == ["Harbour Analytics", "Northwind Labs"]
        assert [p.title for p in document.projects] == ["Booking CRM", "Campus SMS"]

    def test_null_link_is_preserved(self):
        document = merge_resume_data(make_input())
        assert document.projects[0].link is None
        assert document.projects[1].link == "https://campus-sms.example.com/en"

    @pytest.mark.parametrize("internship,expected", [
        (True, TEMPLATE_DATA["contact"]["internship"]),
        (False, TEMPLATE_DATA["contact"]["job"]),
    ])
    def test_contact_selected_by_position_type(self, internship, expected):
        document = merge_resume_data(make_input(isInternship=internship))
        assert document.contact == expected

    def test_unknown_project_id(self):
        with pytest.raises(ResumeMergeError, match="Unknown project ID"):
            merge_resume_data(make_input(projects=[{"projectId": "nope", "bullets": ["x"]}]))

    def test_unknown_experience_id(self):
        with pytest.raises(ResumeMergeError, match="Unknown experience ID"):
            merge_resume_data(make_input(experience=[{"experienceId": "nope", "role": "x", "bullets": ["x"]}]))


class TestValidation:

    def test_merged_document_is_valid(self):
        result = validate_resume_data(merge_resume_data(make_input()))
        assert result.valid
        assert result.errors == []

    def test_not_an_object(self):
        result = validate_resume_data(["nope"])
        assert not result.valid
        assert result.errors == ["Invalid data: must be an object"]

    def test_every_problem_is_reported(self):
        data = merge_resume_data(make_input()).model_dump(by_alias=True)
        data["summary"] = "  "
        data["experience"][0]["bullets"] = []
        data["projects"][1]["link"] = ""
        data["education"]["cumulativeGPA"] = ""
        data["skills"] = []

        errors = validate_resume_data(data).errors
        assert errors == [
            "Missing or invalid field: summary (must be a non-empty string)",
            "Invalid skills array (must have at least one skill category)",
            "Invalid experience[0].bullets (must have at least one bullet)",
            "Invalid projects[1].link (must be a non-empty string or null)",
            "Missing or invalid field: education.cumulativeGPA (must be a non-empty string)",
        ]

    def test_blank_bullet(self):
        data = merge_resume_data(make_input()).model_dump(by_alias=True)
        data["projects"][0]["bullets"] = ["ok", ""]
        assert validate_resume_data(data).errors == [
            "Invalid projects[0].bullets[1] (must be a non-empty string)"
        ]

    def test_missing_sections(self):
        errors = validate_resume_data({"name": "A", "contact": "B", "summary": "C"}).errors
        assert "Missing or invalid field: skills (must be an array)" in errors
        assert "Missing or invalid field: experience (must be an array)" in errors
        assert "Missing or invalid field: projects (must be an array)" in errors
        assert "Missing or invalid field: education (must be an object)" in errors
