"""Education level classification and comparison."""
from typing import Iterable, Optional

from ats_scorer.matching.models import AssessedScore, EducationEntry

# Ordinal degree levels. Higher is more advanced.
EDUCATION_LEVELS: dict[str, int] = {
    "phd": 5, "doctorate": 5,
    "master": 4, "masters": 4, "mba": 4, "ms": 4, "ma": 4,
    "bachelor": 3, "bachelors": 3, "bs": 3, "ba": 3, "btech": 3, "be": 3,
    "associate": 2,
    "diploma": 1, "certificate": 1,
    "high school": 0, "ged": 0,
}

NO_REQUIREMENT_SCORE = 100.0
NO_EDUCATION_SCORE = 30.0
UNRECOGNIZED_EDUCATION_SCORE = 50.0
UNRECOGNIZED_REQUIREMENT_SCORE = 80.0
MEETS_REQUIREMENT_SCORE = 100.0
ONE_LEVEL_BELOW_SCORE = 60.0
BELOW_REQUIREMENT_SCORE = 35.0


def _normalize_degree(text: str) -> str:
    # "B.S." -> "bs", "Ph.D." -> "phd"
    return (text or "").lower().replace(".", "")


def education_level(text: str) -> Optional[int]:
    """Highest level named anywhere in a degree or requirement string.

    Keys match as plain substrings, so short keys also fire inside longer
    words ("ma" in "diploma", "ms" in "systems").

    Returns None when the text names no known degree.
    """
    normalized = _normalize_degree(text)
    best = None
    for key, level in EDUCATION_LEVELS.items():
        if key in normalized and (best is None or level > best):
            best = level
    return best


def _highest(texts: Iterable[str]) -> tuple[Optional[int], str]:
    """Highest level across texts, with the first text that reached it."""
    best_level = None
    best_text = ""
    for text in texts:
        level = education_level(text)
        if level is not None and (best_level is None or level > best_level):
            best_level = level
            best_text = text
    return best_level, best_text


def score_education(
    education: list[EducationEntry],
    requirements: list[str],
) -> AssessedScore:
    """
    Compare the candidate's highest degree with the highest required degree.

    Args:
        education: Education entries from the resume
        requirements: Free-text education requirements from the job

    Returns:
        AssessedScore: 100 when the requirement is met (or there is none),
        60 one level below, 35 further below; 30/50/80 when one side
        is missing or unrecognized.
    """
    if not requirements:
        return AssessedScore(
            score=NO_REQUIREMENT_SCORE,
            assessment="No specific education requirements",
        )

    if not education:
        return AssessedScore(
            score=NO_EDUCATION_SCORE,
            assessment="No education information found in resume",
        )

    highest_level, highest_degree = _highest(entry.degree for entry in education)
    required_level, required_degree = _highest(requirements)

    if highest_level is None:
        found = ", ".join(entry.degree for entry in education)
        return AssessedScore(
            score=UNRECOGNIZED_EDUCATION_SCORE,
            assessment=f"Could not match education level. Found: {found}",
        )

    if required_level is None:
        return AssessedScore(
            score=UNRECOGNIZED_REQUIREMENT_SCORE,
            assessment=f"Education found: {highest_degree}",
        )

    if highest_level >= required_level:
        return AssessedScore(
            score=MEETS_REQUIREMENT_SCORE,
            assessment=f"Meets requirement: {highest_degree} (required: {required_degree})",
        )
    if highest_level == required_level - 1:
        return AssessedScore(
            score=ONE_LEVEL_BELOW_SCORE,
            assessment=f"One level below: {highest_degree} (required: {required_degree})",
        )
    return AssessedScore(
        score=BELOW_REQUIREMENT_SCORE,
        assessment=f"Below requirement: {highest_degree} (required: {required_degree})",
    )
