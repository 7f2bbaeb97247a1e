"""Parsing of extractor output into scorer inputs."""
from ats_scorer.parsing.llm_response import (
    parse_job_keywords_response,
    parse_resume_response,
    strip_code_fences,
)
from ats_scorer.parsing.validators import (
    ExtractedJobKeywords,
    JobPosting,
    ParsedEducation,
    ParsedResumeData,
    ParsedWorkExperience,
)

__all__ = [
    "ExtractedJobKeywords",
    "JobPosting",
    "ParsedEducation",
    "ParsedResumeData",
    "ParsedWorkExperience",
    "parse_job_keywords_response",
    "parse_resume_response",
    "strip_code_fences",
]
