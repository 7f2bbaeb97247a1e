"""Input and result records for resume scoring."""
from dataclasses import asdict, dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class EducationEntry:
    """One education line as delivered by the resume extractor."""

    degree: str
    institution: str = ""
    year: Optional[int] = None
    field: Optional[str] = None


@dataclass(frozen=True)
class WorkExperience:
    """One work history entry. Carried for display only."""

    title: str
    company: str = ""
    duration: str = ""
    description: Optional[str] = None


@dataclass(frozen=True)
class ResumeProfile:
    """Structured resume data consumed by the scorer."""

    skills: list[str] = field(default_factory=list)
    experience_years: Optional[float] = None
    education: list[EducationEntry] = field(default_factory=list)
    full_text: Optional[str] = None

    # Descriptive fields from the extractor, never scored
    candidate_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    work_experience: list[WorkExperience] = field(default_factory=list)


@dataclass(frozen=True)
class JobRequirements:
    """Structured job requisition consumed by the scorer."""

    required_skills: list[str] = field(default_factory=list)
    preferred_skills: list[str] = field(default_factory=list)
    experience_years_min: float = 0
    experience_years_max: Optional[float] = None
    education_requirements: list[str] = field(default_factory=list)
    description: str = ""
    title: str = ""


@dataclass(frozen=True)
class AssessedScore:
    """A sub-score together with the sentence explaining it."""

    score: float  # 0-100
    assessment: str


@dataclass(frozen=True)
class ScoreBreakdown:
    """Human-readable explanation attached to a score."""

    required_skills_matched: list[str] = field(default_factory=list)
    required_skills_missing: list[str] = field(default_factory=list)
    preferred_skills_matched: list[str] = field(default_factory=list)
    experience_assessment: str = ""
    education_assessment: str = ""
    keyword_analysis: str = ""


@dataclass(frozen=True)
class ScoreResult:
    """Result of scoring one resume against one job (all scores 0-100)."""

    overall_score: int
    skill_match_score: int
    experience_score: int
    education_score: int
    keyword_density_score: int
    keyword_matches: list[str] = field(default_factory=list)
    score_breakdown: ScoreBreakdown = field(default_factory=ScoreBreakdown)

    def to_dict(self) -> dict[str, Any]:
        """Flatten into the record shape stored by the calling application."""
        return asdict(self)
