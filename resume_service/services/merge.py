"""Merge tailored input with the fixed template data into a ResumeDocument."""

import logging
from typing import Any, Dict, Optional

from resume_service.core.exceptions import ResumeMergeError
from resume_service.schemas.resume import (
    Education,
    ExperienceEntry,
    ProjectEntry,
    ResumeDocument,
    ResumeInput,
)
from resume_service.services.template_data import TEMPLATE_DATA

logger = logging.getLogger(__name__)


def merge_resume_data(input_data: ResumeInput, template: Optional[Dict[str, Any]] = None) -> ResumeDocument:
    """
    Experience and projects are looked up by id; the input decides which
    entries appear and in what order. Unknown ids raise ResumeMergeError.
    """
    template = template or TEMPLATE_DATA

    experience = []
    for item in input_data.experience:
        fixed = template["experience"].get(item.experience_id)
        if fixed is None:
            raise ResumeMergeError(
                f'Unknown experience ID: "{item.experience_id}". '
                f"Valid IDs: {', '.join(template['experience'])}"
            )
        experience.append(ExperienceEntry(role=item.role, bullets=item.bullets, **fixed))

    projects = []
    for item in input_data.projects:
        fixed = template["projects"].get(item.project_id)
        if fixed is None:
            raise ResumeMergeError(
                f'Unknown project ID: "{item.project_id}". '
                f"Valid IDs: {', '.join(template['projects'])}"
            )
        projects.append(ProjectEntry(bullets=item.bullets, **fixed))

    contact = template["contact"]["internship" if input_data.is_internship else "job"]

    logger.info(
        f"Merged resume: {len(experience)} experience, {len(projects)} projects, "
        f"internship={input_data.is_internship}"
    )
    return ResumeDocument(
        name=template["name"],
        contact=contact,
        summary=input_data.summary,
        skills=input_data.skills,
        experience=experience,
        projects=projects,
        education=Education.model_validate(template["education"]),
    )
