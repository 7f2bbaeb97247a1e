"""Experience band evaluation."""
from typing import Optional

from ats_scorer.matching.models import AssessedScore

# Band scores, checked in this order
EXPERIENCE_UNKNOWN_SCORE = 50.0
EXPERIENCE_IN_RANGE_SCORE = 100.0
EXPERIENCE_SLIGHTLY_OVER_SCORE = 85.0
EXPERIENCE_OVER_SCORE = 70.0
EXPERIENCE_SLIGHTLY_UNDER_SCORE = 60.0
EXPERIENCE_UNDER_SCORE = 40.0

# Width of the "slightly" bands, in years
OVERQUALIFIED_TOLERANCE_YEARS = 3
UNDERQUALIFIED_TOLERANCE_YEARS = 2


def format_years(years: float) -> str:
    """Render 5.0 as "5" and 4.5 as "4.5"."""
    return f"{years:g}"


def format_range(min_years: float, max_years: Optional[float]) -> str:
    if max_years is None:
        return f"{format_years(min_years)}+"
    return f"{format_years(min_years)}-{format_years(max_years)}"


def score_experience(
    candidate_years: Optional[float],
    min_years: float,
    max_years: Optional[float],
) -> AssessedScore:
    """
    Grade years of experience against the required range.

    Rules (first match wins):
      - years unknown                      → 50
      - min <= years <= max                → 100 (max=None means open-ended)
      - max < years <= max + 3             → 85
      - years > max + 3                    → 70
      - min - 2 <= years < min             → 60
      - otherwise                          → 40

    Args:
        candidate_years: Total years from the resume, or None if not detected
        min_years: Minimum years required by the job
        max_years: Maximum years wanted by the job, or None for no ceiling

    Returns:
        AssessedScore whose assessment names the candidate years and the bound(s)
    """
    if candidate_years is None:
        return AssessedScore(
            score=EXPERIENCE_UNKNOWN_SCORE,
            assessment="Experience years not detected in resume",
        )

    years = format_years(candidate_years)
    upper = float("inf") if max_years is None else max_years

    if min_years <= candidate_years <= upper:
        return AssessedScore(
            score=EXPERIENCE_IN_RANGE_SCORE,
            assessment=f"Perfect match: {years} years (required: {format_range(min_years, max_years)})",
        )

    if max_years is not None and candidate_years > max_years:
        if candidate_years <= max_years + OVERQUALIFIED_TOLERANCE_YEARS:
            return AssessedScore(
                score=EXPERIENCE_SLIGHTLY_OVER_SCORE,
                assessment=f"Slightly overqualified: {years} years (max: {format_years(max_years)})",
            )
        return AssessedScore(
            score=EXPERIENCE_OVER_SCORE,
            assessment=f"Overqualified: {years} years (max: {format_years(max_years)})",
        )

    if min_years - UNDERQUALIFIED_TOLERANCE_YEARS <= candidate_years < min_years:
        return AssessedScore(
            score=EXPERIENCE_SLIGHTLY_UNDER_SCORE,
            assessment=f"Slightly under requirement: {years} years (min: {format_years(min_years)})",
        )

    return AssessedScore(
        score=EXPERIENCE_UNDER_SCORE,
        assessment=f"Below requirement: {years} years (min: {format_years(min_years)})",
    )
