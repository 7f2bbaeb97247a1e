"""Resume ranking against a single job."""
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Union

from ats_scorer.matching.models import JobRequirements, ResumeProfile, ScoreResult
from ats_scorer.matching.scorer_protocol import Scorer

logger = logging.getLogger(__name__)

Candidates = Union[Mapping[str, ResumeProfile], Iterable[tuple[str, ResumeProfile]]]


@dataclass
class RankedResume:
    """A resume with its score against the job being ranked."""

    resume_id: str
    resume: ResumeProfile
    result: ScoreResult

    @property
    def score(self) -> int:
        return self.result.overall_score

    @property
    def candidate_name(self) -> Optional[str]:
        return self.resume.candidate_name


class ResumeRanker:
    """Score and rank resumes for one job."""

    def __init__(self, scorer: Scorer, min_score: float = 0, max_workers: int = 1):
        """
        Initialize resume ranker.

        Args:
            scorer: Any Scorer implementation (usually ATSScorer)
            min_score: Minimum overall score to include (0-100)
            max_workers: Threads used for scoring; 1 scores sequentially
        """
        self.scorer = scorer
        self.min_score = min_score
        self.max_workers = max(1, max_workers)

    def rank(self, candidates: Candidates, job: JobRequirements) -> list[RankedResume]:
        """
        Score every resume against the job.

        Each resume is scored independently, so calls may run in parallel;
        ordering is restored before sorting.

        Args:
            candidates: resume_id -> ResumeProfile mapping, or (id, profile) pairs
            job: Job requirements shared by every call

        Returns:
            RankedResume list at or above min_score, sorted by score
            descending; ties keep input order.
        """
        pairs = list(candidates.items()) if isinstance(candidates, Mapping) else list(candidates)

        if self.max_workers > 1 and len(pairs) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                results = list(pool.map(lambda pair: self.scorer.score(pair[1], job), pairs))
        else:
            results = [self.scorer.score(resume, job) for _, resume in pairs]

        ranked = [
            RankedResume(resume_id=resume_id, resume=resume, result=result)
            for (resume_id, resume), result in zip(pairs, results)
            if result.overall_score >= self.min_score
        ]

        # Sort by score descending
        ranked.sort(key=lambda r: r.score, reverse=True)

        logger.info(
            "Ranked %d resume(s) for %s: %d at or above min score %s",
            len(pairs),
            job.title or "job",
            len(ranked),
            self.min_score,
        )
        return ranked

    def filter_by_score(
        self,
        ranked: list[RankedResume],
        min_score: Optional[float] = None,
    ) -> list[RankedResume]:
        """Filter ranked resumes by minimum score."""
        threshold = min_score if min_score is not None else self.min_score
        return [r for r in ranked if r.score >= threshold]

    def get_top(self, ranked: list[RankedResume], n: int = 10) -> list[RankedResume]:
        """Get top N resumes by score."""
        return ranked[:n]
