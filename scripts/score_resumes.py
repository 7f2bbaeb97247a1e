#!/usr/bin/env python3
"""Rank extracted resumes against a job posting.

Resumes are JSON files in the resume extractor's output shape; the job is a
YAML or JSON posting (title, description, experience range, skill lists).
Prints a ranked table, or the full score records with --json.

Usage:
    python -m scripts.score_resumes --job job.yaml resumes/*.json
    python -m scripts.score_resumes --job job.yaml --top 5 --json resumes/*.json

Environment variables:
    SCORING_CONFIG_FILE: YAML scoring profile with custom weights (optional)
    BATCH_MAX_WORKERS: Threads used for scoring (optional)
    MIN_SCORE: Drop resumes below this overall score (optional)
    SCORER_LOG_LEVEL: Level for ats_scorer loggers, e.g. DEBUG (optional)
"""
import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from scripts.bootstrap import settings
from ats_scorer.logging_config import setup_logging
from ats_scorer.matching import ResumeRanker, get_scorer
from ats_scorer.parsing import JobPosting, ParsedResumeData

logger = logging.getLogger(__name__)


def load_job(path: Path) -> JobPosting:
    """Load a job posting from YAML or JSON."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    return JobPosting.model_validate(data)


def load_resume(path: Path) -> ParsedResumeData:
    """Load one extracted resume; raw_text may be inline or a sibling .txt/.md file."""
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object, got {type(data).__name__}")
    if not data.get("raw_text"):
        for suffix in (".md", ".txt"):
            text_path = path.with_suffix(suffix)
            if text_path.exists():
                data["raw_text"] = text_path.read_text(encoding="utf-8")
                break
    return ParsedResumeData.model_validate(data)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Rank resumes against a job posting")
    parser.add_argument("resumes", nargs="+", type=Path, help="Extracted resume JSON files")
    parser.add_argument("--job", required=True, type=Path, help="Job posting (YAML or JSON)")
    parser.add_argument("--top", type=int, default=None, help="Only show the top N resumes")
    parser.add_argument("--json", action="store_true", help="Print full score records as JSON")
    args = parser.parse_args(argv)

    setup_logging(settings.log_level, settings.log_file, scorer_level=settings.scorer_log_level)

    try:
        job = load_job(args.job).to_requirements()
        candidates = [(path.stem, load_resume(path).to_profile()) for path in args.resumes]
    except (OSError, ValueError) as e:
        logger.error("Could not read input: %s", e)
        return 1

    scorer = get_scorer(settings.scoring_config_file)
    ranker = ResumeRanker(scorer, min_score=settings.min_score, max_workers=settings.batch_max_workers)
    ranked = ranker.rank(candidates, job)
    if args.top is not None:
        ranked = ranker.get_top(ranked, n=args.top)

    if args.json:
        records = [
            {"resume_id": r.resume_id, "candidate_name": r.candidate_name, **r.result.to_dict()}
            for r in ranked
        ]
        print(json.dumps(records, indent=2))
        return 0

    print(f"{'Rank':<5} {'Score':>5}  {'Skills':>6} {'Exp':>4} {'Edu':>4} {'Kw':>4}  Resume")
    for position, r in enumerate(ranked, start=1):
        res = r.result
        name = r.candidate_name or r.resume_id
        print(
            f"{position:<5} {res.overall_score:>5}  {res.skill_match_score:>6} "
            f"{res.experience_score:>4} {res.education_score:>4} {res.keyword_density_score:>4}  {name}"
        )
        missing = res.score_breakdown.required_skills_missing
        if missing:
            print(f"{'':<13}missing: {', '.join(missing)}")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Interrupted.")
        sys.exit(1)
