"""Resume-to-job matching and scoring."""
from ats_scorer.matching.models import (
    EducationEntry,
    JobRequirements,
    ResumeProfile,
    ScoreBreakdown,
    ScoreResult,
)
from ats_scorer.matching.ranker import RankedResume, ResumeRanker
from ats_scorer.matching.scorer import ATSScorer, calculate_ats_score, get_scorer
from ats_scorer.matching.skill_matcher import is_skill_present
from ats_scorer.matching.weights import DEFAULT_WEIGHTS, ScoringWeights, load_weights

__all__ = [
    "ATSScorer",
    "DEFAULT_WEIGHTS",
    "EducationEntry",
    "JobRequirements",
    "RankedResume",
    "ResumeProfile",
    "ResumeRanker",
    "ScoreBreakdown",
    "ScoreResult",
    "ScoringWeights",
    "calculate_ats_score",
    "get_scorer",
    "is_skill_present",
    "load_weights",
]
