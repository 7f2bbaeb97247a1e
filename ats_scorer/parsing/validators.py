"""Pydantic models for extractor output.

Resume and job fields arrive as loosely-typed JSON from a language model.
These models coerce that data into scorer inputs with defensive defaults:
wrong types become empty lists or None instead of failing validation.
"""
import math
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ats_scorer.matching.models import (
    EducationEntry,
    JobRequirements,
    ResumeProfile,
    WorkExperience,
)


def _clean_string_list(value: Any) -> list[str]:
    """Keep non-blank strings from a list; anything else becomes []."""
    if not isinstance(value, list):
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def _optional_string(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


class ParsedEducation(BaseModel):
    """Education entry as returned by the extractor."""
    degree: str = Field(min_length=1)
    institution: str = ""
    year: Optional[int] = None
    field: Optional[str] = None

    @field_validator("degree", mode="before")
    @classmethod
    def strip_degree(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("institution", mode="before")
    @classmethod
    def default_institution(cls, v):
        return v if isinstance(v, str) else ""

    @field_validator("year", mode="before")
    @classmethod
    def coerce_year(cls, v):
        """Accept 2020 or "2020"; drop anything else."""
        if isinstance(v, bool):
            return None
        if isinstance(v, int):
            return v
        if isinstance(v, str) and v.strip().isdigit():
            return int(v.strip())
        return None

    @field_validator("field", mode="before")
    @classmethod
    def coerce_field(cls, v):
        return _optional_string(v)

    def to_entry(self) -> EducationEntry:
        return EducationEntry(
            degree=self.degree,
            institution=self.institution,
            year=self.year,
            field=self.field,
        )


class ParsedWorkExperience(BaseModel):
    """Work history entry as returned by the extractor."""
    title: str = Field(min_length=1)
    company: str = ""
    duration: str = ""
    description: Optional[str] = None

    @field_validator("company", "duration", mode="before")
    @classmethod
    def default_text(cls, v):
        return v if isinstance(v, str) else ""

    @field_validator("description", mode="before")
    @classmethod
    def coerce_description(cls, v):
        return _optional_string(v)


def _valid_entries(value: Any, model: type[BaseModel]) -> list:
    """Validate list items one by one, dropping the ones that do not fit."""
    if not isinstance(value, list):
        return []
    entries = []
    for item in value:
        if not isinstance(item, dict):
            continue
        try:
            entries.append(model.model_validate(item))
        except ValueError:
            continue
    return entries


class ParsedResumeData(BaseModel):
    """Structured resume fields extracted from resume text."""
    candidate_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    skills: list[str] = Field(default_factory=list)
    experience_years: Optional[float] = None
    education: list[ParsedEducation] = Field(default_factory=list)
    work_experience: list[ParsedWorkExperience] = Field(default_factory=list)
    raw_text: Optional[str] = None

    @field_validator("candidate_name", "email", "phone", mode="before")
    @classmethod
    def coerce_contact(cls, v):
        return _optional_string(v)

    @field_validator("skills", mode="before")
    @classmethod
    def filter_skills(cls, v):
        """Remove non-strings and empty strings from the skill list."""
        return _clean_string_list(v)

    @field_validator("experience_years", mode="before")
    @classmethod
    def coerce_experience(cls, v):
        """Only finite, non-negative numbers count as detected experience."""
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            return None
        if math.isnan(v) or math.isinf(v) or v < 0:
            return None
        return float(v)

    @field_validator("education", mode="before")
    @classmethod
    def filter_education(cls, v):
        return _valid_entries(v, ParsedEducation)

    @field_validator("work_experience", mode="before")
    @classmethod
    def filter_work_experience(cls, v):
        return _valid_entries(v, ParsedWorkExperience)

    def to_profile(self) -> ResumeProfile:
        """Convert into the scorer's ResumeProfile."""
        return ResumeProfile(
            skills=list(self.skills),
            experience_years=self.experience_years,
            education=[e.to_entry() for e in self.education],
            full_text=self.raw_text,
            candidate_name=self.candidate_name,
            email=self.email,
            phone=self.phone,
            work_experience=[
                WorkExperience(
                    title=w.title,
                    company=w.company,
                    duration=w.duration,
                    description=w.description,
                )
                for w in self.work_experience
            ],
        )


class ExtractedJobKeywords(BaseModel):
    """Skill and education requirements extracted from a job description."""
    required_skills: list[str] = Field(default_factory=list)
    preferred_skills: list[str] = Field(default_factory=list)
    education_requirements: list[str] = Field(default_factory=list)

    @field_validator("required_skills", "preferred_skills", "education_requirements", mode="before")
    @classmethod
    def filter_empty_strings(cls, v):
        """Remove empty strings from lists."""
        return _clean_string_list(v)


class JobPosting(BaseModel):
    """Job posting fields entered by the job editor."""
    title: str = ""
    description: str = ""
    experience_years_min: float = Field(ge=0, default=0)
    experience_years_max: Optional[float] = Field(ge=0, default=None)
    required_skills: list[str] = Field(default_factory=list)
    preferred_skills: list[str] = Field(default_factory=list)
    education_requirements: list[str] = Field(default_factory=list)

    @field_validator("required_skills", "preferred_skills", "education_requirements", mode="before")
    @classmethod
    def filter_empty_strings(cls, v):
        """Remove empty strings and non-strings from lists."""
        return _clean_string_list(v)

    @model_validator(mode="after")
    def validate_experience_range(self):
        """Ensure experience_years_min is less than or equal to experience_years_max."""
        if self.experience_years_max is not None and self.experience_years_min > self.experience_years_max:
            raise ValueError("Minimum experience must be less than or equal to maximum experience")
        return self

    def to_requirements(self, keywords: Optional[ExtractedJobKeywords] = None) -> JobRequirements:
        """
        Build scorer input, filling skill lists from extracted keywords.

        Lists entered on the posting win; extracted keywords only fill
        lists the posting left empty.
        """
        keywords = keywords or ExtractedJobKeywords()
        return JobRequirements(
            required_skills=list(self.required_skills or keywords.required_skills),
            preferred_skills=list(self.preferred_skills or keywords.preferred_skills),
            experience_years_min=self.experience_years_min,
            experience_years_max=self.experience_years_max,
            education_requirements=list(self.education_requirements or keywords.education_requirements),
            description=self.description,
            title=self.title,
        )
