"""Decoding of language-model responses from the resume and job extractors.

A response that is not valid JSON never reaches the scorer as an error:
it is replaced with an empty record, which the scorer grades with its
"not detected" / "no information" mid-range scores.
"""
import json
import logging
import re
from typing import Any, Optional

from ats_scorer.parsing.validators import ExtractedJobKeywords, ParsedResumeData

logger = logging.getLogger(__name__)

_CODE_FENCE_RE = re.compile(r"```(?:json)?\n?")


def strip_code_fences(content: str) -> str:
    """Remove Markdown code fences that models wrap around JSON."""
    return _CODE_FENCE_RE.sub("", content or "").strip()


def _load_object(content: str) -> Optional[dict[str, Any]]:
    """Decode a JSON object, or return None if the content is not one."""
    try:
        data = json.loads(strip_code_fences(content))
    except json.JSONDecodeError as e:
        logger.warning("Failed to parse LLM response as JSON: %s", e)
        return None
    if not isinstance(data, dict):
        logger.warning("Expected a JSON object from LLM, got %s", type(data).__name__)
        return None
    return data


def parse_resume_response(content: str, raw_text: Optional[str] = None) -> ParsedResumeData:
    """
    Parse the resume extractor's response.

    Args:
        content: Model response, ideally a JSON object (fences allowed)
        raw_text: Resume text the model was given; kept for keyword analysis

    Returns:
        ParsedResumeData; all-empty (but still carrying raw_text) when the
        response cannot be decoded.
    """
    data = _load_object(content) or {}
    data["raw_text"] = raw_text
    return ParsedResumeData.model_validate(data)


def parse_job_keywords_response(content: str) -> ExtractedJobKeywords:
    """Parse the job keyword extractor's response (empty lists on failure)."""
    data = _load_object(content) or {}
    return ExtractedJobKeywords.model_validate(data)
