"""
Business validation of a merged resume.

The renderer trusts its input; this runs before it and reports every problem
at once, one message per violated rule.
"""

from typing import Any, List

from pydantic import BaseModel

from resume_service.schemas.resume import ValidationResult

EDUCATION_FIELDS = ["university", "degree", "coursework", "expectedGrad", "cumulativeGPA"]


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _check_bullets(errors: List[str], prefix: str, bullets: Any) -> None:
    if not isinstance(bullets, list):
        errors.append(f"Invalid {prefix}.bullets (must be an array)")
    elif not bullets:
        errors.append(f"Invalid {prefix}.bullets (must have at least one bullet)")
    else:
        for b_index, bullet in enumerate(bullets):
            if not _is_text(bullet):
                errors.append(f"Invalid {prefix}.bullets[{b_index}] (must be a non-empty string)")


def _check_entries(errors: List[str], data: dict, section: str, text_fields: List[str]) -> None:
    entries = data.get(section)
    if not isinstance(entries, list):
        errors.append(f"Missing or invalid field: {section} (must be an array)")
        return

    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            errors.append(f"Invalid {section} item at index {index}")
            continue
        for field in text_fields:
            if not _is_text(entry.get(field)):
                errors.append(f"Invalid {section}[{index}].{field} (must be a non-empty string)")
        if section == "projects":
            link = entry.get("link")
            if link is not None and not _is_text(link):
                errors.append(f"Invalid projects[{index}].link (must be a non-empty string or null)")
        _check_bullets(errors, f"{section}[{index}]", entry.get("bullets"))


def validate_resume_data(data: Any) -> ValidationResult:
    """Validate a ResumeDocument (or its JSON form) before rendering."""
    if isinstance(data, BaseModel):
        data = data.model_dump(by_alias=True)
    if not isinstance(data, dict):
        return ValidationResult(valid=False, errors=["Invalid data: must be an object"])

    errors: List[str] = []

    for field in ("name", "contact", "summary"):
        if not _is_text(data.get(field)):
            errors.append(f"Missing or invalid field: {field} (must be a non-empty string)")

    skills = data.get("skills")
    if not isinstance(skills, list):
        errors.append("Missing or invalid field: skills (must be an array)")
    elif not skills:
        errors.append("Invalid skills array (must have at least one skill category)")
    else:
        for index, skill in enumerate(skills):
            if not isinstance(skill, dict):
                errors.append(f"Invalid skill item at index {index}")
                continue
            for field in ("label", "value"):
                if not _is_text(skill.get(field)):
                    errors.append(f"Invalid skills[{index}].{field} (must be a non-empty string)")

    _check_entries(errors, data, "experience", ["role", "institution", "location", "dates"])
    _check_entries(errors, data, "projects", ["title", "subtitle", "dates"])

    education = data.get("education")
    if not isinstance(education, dict):
        errors.append("Missing or invalid field: education (must be an object)")
    else:
        for field in EDUCATION_FIELDS:
            if not _is_text(education.get(field)):
                errors.append(f"Missing or invalid field: education.{field} (must be a non-empty string)")

    return ValidationResult(valid=not errors, errors=errors)
