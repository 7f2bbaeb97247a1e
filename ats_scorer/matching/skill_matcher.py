"""Skill normalization, fuzzy skill matching and skill scoring.

Skill vocabularies differ between resumes and job posts ("Node", "Node.js",
"NodeJS"), so matching is deliberately permissive: after an exact check,
spelling variants of the job skill are compared against every resume skill
by substring containment in both directions. This favours recall over
precision, which means short names can overlap ("java" is found inside
"javascript").
"""
import re
from dataclasses import dataclass, field
from typing import Iterable

# Points available to each skill list (sum is the 100-point skill score)
REQUIRED_SKILL_POINTS = 80.0
PREFERRED_SKILL_POINTS = 20.0

_SEPARATORS_RE = re.compile(r"[.\-_]")


@dataclass
class SkillScore:
    """Skill score with the per-skill partition used for reporting."""

    score: float  # 0-100
    required_matched: list[str] = field(default_factory=list)
    required_missing: list[str] = field(default_factory=list)
    preferred_matched: list[str] = field(default_factory=list)


def normalize_skill(skill: str) -> str:
    """Canonical comparison form of a skill name."""
    return (skill or "").strip().lower()


def normalize_skills(skills: Iterable[str]) -> list[str]:
    """Normalize a skill list, dropping entries that end up empty."""
    normalized = []
    for skill in skills or []:
        value = normalize_skill(skill)
        if value:
            normalized.append(value)
    return normalized


def skill_variants(skill: str) -> list[str]:
    """Spelling variants of an already-normalized skill.

    "react.js" -> ["react.js", "reactjs", "react"]
    "reactjs"  -> ["reactjs", "react.js", "react"]
    "ci-cd"    -> ["ci-cd", "cicd"]
    """
    variants = [skill]

    if skill.endswith(".js"):
        stem = skill[: -len(".js")]
        variants.extend([stem + "js", stem])
    elif skill.endswith("js"):
        stem = skill[: -len("js")]
        variants.extend([stem + ".js", stem])

    without_separators = _SEPARATORS_RE.sub("", skill)
    if without_separators != skill:
        variants.append(without_separators)

    # Drop empty and duplicate variants ("js" alone has an empty stem)
    unique = []
    for variant in variants:
        if variant and variant not in unique:
            unique.append(variant)
    return unique


def is_skill_present(candidate_skill: str, resume_skills: Iterable[str]) -> bool:
    """Check whether a job skill appears in a resume skill list.

    Args:
        candidate_skill: Skill named by the job (any casing/spacing)
        resume_skills: Skills listed on the resume (any casing/spacing)

    Returns:
        True on an exact match, or when any variant of the job skill contains,
        or is contained in, a resume skill.
    """
    skill = normalize_skill(candidate_skill)
    if not skill:
        return False

    normalized_resume = normalize_skills(resume_skills)
    if skill in normalized_resume:
        return True

    for variant in skill_variants(skill):
        for resume_skill in normalized_resume:
            if variant in resume_skill or resume_skill in variant:
                return True

    return False


def score_skills(
    resume_skills: Iterable[str],
    required_skills: Iterable[str],
    preferred_skills: Iterable[str],
) -> SkillScore:
    """
    Score resume skills against the job's required and preferred skills.

    Required skills carry 80 points and preferred skills 20, each prorated by
    the fraction matched. An empty list awards its full share, so a job with
    no skill lists scores 100.

    Args:
        resume_skills: Skills listed on the resume
        required_skills: Must-have skills from the job
        preferred_skills: Nice-to-have skills from the job

    Returns:
        SkillScore; matched/missing lists keep the job's original spelling
        and order. Missing preferred skills are not tracked.
    """
    normalized_resume = normalize_skills(resume_skills)
    required = list(required_skills or [])
    preferred = list(preferred_skills or [])

    required_matched = []
    required_missing = []
    for skill in required:
        if is_skill_present(skill, normalized_resume):
            required_matched.append(skill)
        else:
            required_missing.append(skill)

    preferred_matched = [s for s in preferred if is_skill_present(s, normalized_resume)]

    if required:
        required_points = len(required_matched) / len(required) * REQUIRED_SKILL_POINTS
    else:
        required_points = REQUIRED_SKILL_POINTS

    if preferred:
        preferred_points = len(preferred_matched) / len(preferred) * PREFERRED_SKILL_POINTS
    else:
        preferred_points = PREFERRED_SKILL_POINTS

    return SkillScore(
        score=required_points + preferred_points,
        required_matched=required_matched,
        required_missing=required_missing,
        preferred_matched=preferred_matched,
    )
