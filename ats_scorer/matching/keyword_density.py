"""Keyword density analysis between resume text and a job posting."""
from dataclasses import dataclass, field

from ats_scorer.matching.models import JobRequirements

NO_TEXT_SCORE = 50.0
# Flat credit every resume with text receives before overlap is measured
KEYWORD_BASELINE = 20.0
MIN_DESCRIPTION_TOKEN_LENGTH = 4

# Trimmed from tokens that already passed the length and stop-word checks
# ("aws." -> "aws")
_TOKEN_PUNCTUATION = ".,;:!?()[]{}\"'"

# Function words and recruiting boilerplate. Only tokens of 4+ characters
# are considered, so shorter words need no entry.
STOP_WORDS = frozenset({
    # function words
    "about", "above", "across", "after", "also", "among", "because", "been",
    "before", "being", "between", "both", "does", "each", "from", "have",
    "having", "here", "into", "just", "more", "most", "must", "only", "other",
    "ours", "over", "same", "should", "some", "such", "than", "that", "their",
    "them", "then", "there", "these", "they", "this", "those", "through",
    "under", "until", "very", "were", "what", "when", "where", "which",
    "while", "will", "with", "within", "without", "would", "your", "yours",
    # recruiting boilerplate
    "ability", "able", "applicant", "applicants", "apply", "benefits",
    "candidate", "candidates", "company", "competitive", "environment",
    "excellent", "experience", "good", "great", "hiring", "ideal", "join",
    "looking", "opportunity", "plus", "position", "preferred", "required",
    "requirements", "responsibilities", "role", "seeking", "skills", "strong",
    "team", "work", "working", "years",
})


@dataclass
class KeywordScore:
    """Keyword density score with the keywords found in the resume."""

    score: float  # 0-100
    matches: list[str] = field(default_factory=list)
    analysis: str = ""


def description_keywords(description: str) -> list[str]:
    """Significant terms of a job description, first-seen order."""
    keywords: list[str] = []
    for raw in (description or "").lower().split():
        # Filters see the whitespace token as written, punctuation included
        if len(raw) < MIN_DESCRIPTION_TOKEN_LENGTH or raw in STOP_WORDS:
            continue
        token = raw.strip(_TOKEN_PUNCTUATION)
        if token and token not in keywords:
            keywords.append(token)
    return keywords


def job_keywords(job: JobRequirements) -> list[str]:
    """Lowercased union of job skills and description terms, deduplicated."""
    # dict keeps insertion order, giving a stable keyword order
    keywords: dict[str, None] = {}
    for skill in list(job.required_skills) + list(job.preferred_skills):
        keyword = (skill or "").strip().lower()
        if keyword:
            keywords[keyword] = None
    for keyword in description_keywords(job.description):
        keywords[keyword] = None
    return list(keywords)


def score_keyword_density(resume_full_text: str, job: JobRequirements) -> KeywordScore:
    """
    Measure how many job keywords occur in the resume text.

    Args:
        resume_full_text: Full resume text (may be empty or None)
        job: Job whose skills and description supply the keywords

    Returns:
        KeywordScore with score = min(100, matched_ratio * 100 + 20),
        or 50 when there is no resume text.
    """
    if not resume_full_text:
        return KeywordScore(
            score=NO_TEXT_SCORE,
            matches=[],
            analysis="No resume text available for keyword analysis",
        )

    text = resume_full_text.lower()
    keywords = job_keywords(job)
    matches = [keyword for keyword in keywords if keyword in text]

    ratio = len(matches) / len(keywords) if keywords else 0.0
    score = min(100.0, ratio * 100 + KEYWORD_BASELINE)

    return KeywordScore(
        score=score,
        matches=matches,
        analysis=f"{len(matches)}/{len(keywords)} keywords matched from job description",
    )
