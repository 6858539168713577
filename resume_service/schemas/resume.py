# File: resume_service/schemas/resume.py
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import List, Optional


class SkillEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str  # "Languages", "Frameworks", ...
    value: str  # "Python, TypeScript, SQL"


class ExperienceEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: str  # bold
    institution: str
    location: str
    dates: str  # right-aligned
    bullets: List[str] = []


class ProjectEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str  # bold, carries the link icon
    subtitle: str  # italic
    dates: str
    link: Optional[str] = None
    bullets: List[str] = []


class Education(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    university: str
    degree: str
    coursework: str
    expected_grad: str = Field(alias="expectedGrad")
    cumulative_gpa: str = Field(alias="cumulativeGPA")


class ResumeDocument(BaseModel):
    """Fully merged resume, the only input of the renderer."""
    model_config = ConfigDict(frozen=True)

    name: str
    # "address | email | phone | website"
    contact: str = Field(validation_alias=AliasChoices("contact", "contactLine"))
    summary: str
    skills: List[SkillEntry] = []
    experience: List[ExperienceEntry] = []
    projects: List[ProjectEntry] = []
    education: Education


# ── Tailored input (merged with the fixed data before rendering) ─────────────

class ExperienceInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    experience_id: str = Field(alias="experienceId")
    role: str
    bullets: List[str]


class ProjectInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    project_id: str = Field(alias="projectId")
    bullets: List[str]


class ResumeInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    summary: str
    skills: List[SkillEntry]
    experience: List[ExperienceInput]
    projects: List[ProjectInput]
    is_internship: bool = Field(default=False, alias="isInternship")


# ── Responses ────────────────────────────────────────────────────────────────

class ValidationResult(BaseModel):
    valid: bool
    errors: List[str] = []


class UploadedFile(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    path: str
    signed_url: str = Field(alias="signedUrl")
    expires_in: int = Field(alias="expiresIn")


class CreateResumeResponse(BaseModel):
    success: bool
    message: str
    file: UploadedFile
