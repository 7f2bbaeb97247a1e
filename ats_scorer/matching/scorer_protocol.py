"""Scorer protocol for pluggable scoring engines.

Defines the interface that resume scoring implementations must satisfy.
ATSScorer is the rule-based implementation; ResumeRanker accepts anything
that implements the same protocol.
"""
from typing import Protocol, runtime_checkable

from ats_scorer.matching.models import JobRequirements, ResumeProfile, ScoreResult


@runtime_checkable
class Scorer(Protocol):
    """Protocol for resume scoring engines."""

    def score(self, resume: ResumeProfile, job: JobRequirements) -> ScoreResult:
        """Score a single resume against a job and return a ScoreResult."""
        ...
