"""ATS score aggregation."""
import logging
import math
from pathlib import Path
from typing import Optional, Union

from ats_scorer.matching.education import score_education
from ats_scorer.matching.experience import score_experience
from ats_scorer.matching.keyword_density import score_keyword_density
from ats_scorer.matching.models import (
    JobRequirements,
    ResumeProfile,
    ScoreBreakdown,
    ScoreResult,
)
from ats_scorer.matching.skill_matcher import score_skills
from ats_scorer.matching.weights import DEFAULT_WEIGHTS, ScoringWeights, load_weights

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounding up (2.5 -> 3, not 2)."""
    return int(math.floor(value + 0.5))


def calculate_ats_score(
    resume: ResumeProfile,
    job: JobRequirements,
    weights: Optional[ScoringWeights] = None,
) -> ScoreResult:
    """
    Score a resume against a job.

    Each evaluator runs once. The overall score is rounded once from the
    weighted sum of the unrounded sub-scores; the sub-score fields are
    rounded independently for display.

    Args:
        resume: Structured resume data
        job: Structured job requirements
        weights: Sub-score weights (defaults to 0.40/0.30/0.15/0.15)

    Returns:
        ScoreResult with all scores in 0-100
    """
    w = weights or DEFAULT_WEIGHTS

    skills = score_skills(resume.skills, job.required_skills, job.preferred_skills)
    experience = score_experience(
        resume.experience_years,
        job.experience_years_min,
        job.experience_years_max,
    )
    education = score_education(resume.education, job.education_requirements)
    keywords = score_keyword_density(resume.full_text or "", job)

    weighted = (
        skills.score * w.skill_match
        + experience.score * w.experience
        + education.score * w.education
        + keywords.score * w.keyword_density
    )

    result = ScoreResult(
        overall_score=round_half_up(weighted),
        skill_match_score=round_half_up(skills.score),
        experience_score=round_half_up(experience.score),
        education_score=round_half_up(education.score),
        keyword_density_score=round_half_up(keywords.score),
        keyword_matches=keywords.matches,
        score_breakdown=ScoreBreakdown(
            required_skills_matched=skills.required_matched,
            required_skills_missing=skills.required_missing,
            preferred_skills_matched=skills.preferred_matched,
            experience_assessment=experience.assessment,
            education_assessment=education.assessment,
            keyword_analysis=keywords.analysis,
        ),
    )

    logger.debug(
        "ATS score %d (skills=%.1f experience=%.1f education=%.1f keywords=%.1f)",
        result.overall_score,
        skills.score,
        experience.score,
        education.score,
        keywords.score,
    )
    return result


class ATSScorer:
    """Rule-based resume scorer with a fixed set of weights."""

    def __init__(self, weights: Optional[ScoringWeights] = None):
        """
        Initialize scorer.

        Args:
            weights: Sub-score weights (defaults to DEFAULT_WEIGHTS)
        """
        self.weights = weights or DEFAULT_WEIGHTS

    def score(self, resume: ResumeProfile, job: JobRequirements) -> ScoreResult:
        return calculate_ats_score(resume, job, self.weights)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.weights!r}>"


def get_scorer(scoring_config_file: Optional[Union[str, Path]] = None) -> ATSScorer:
    """Factory: create an ATSScorer, loading weights from a YAML profile if given.

    Args:
        scoring_config_file: Optional path to a scoring profile YAML

    Returns:
        An ATSScorer using the profile's weights, or the defaults.
    """
    if scoring_config_file:
        weights = load_weights(scoring_config_file)
        logger.info("Loaded scoring weights from %s", scoring_config_file)
        return ATSScorer(weights)
    return ATSScorer()
