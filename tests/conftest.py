"""Pytest fixtures for ATS scorer tests."""
import sys
from pathlib import Path

import pytest
import yaml

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ats_scorer.matching.models import EducationEntry, JobRequirements, ResumeProfile


# =============================================================================
# SCORING INPUT FIXTURES
# =============================================================================


@pytest.fixture
def sample_resume():
    """Resume from the reference end-to-end scenario."""
    return ResumeProfile(
        skills=["Python", "SQL"],
        experience_years=4,
        education=[EducationEntry(degree="Bachelor's in CS")],
        full_text="Experienced Python developer with SQL and AWS skills",
        candidate_name="Ada Lovelace",
    )


@pytest.fixture
def sample_job():
    """Job from the reference end-to-end scenario."""
    return JobRequirements(
        title="Python Developer",
        required_skills=["Python", "AWS"],
        preferred_skills=["SQL"],
        experience_years_min=3,
        experience_years_max=6,
        education_requirements=["Bachelor's degree"],
        description="Looking for a Python developer with AWS and cloud experience",
    )


@pytest.fixture
def empty_resume():
    """Fallback profile produced when extraction fails."""
    return ResumeProfile()


# =============================================================================
# CONFIG FIXTURES
# =============================================================================


@pytest.fixture
def weights_file(tmp_path):
    """Factory writing a scoring profile YAML and returning its path."""

    def _write(weights: dict) -> Path:
        path = tmp_path / "scoring.yaml"
        path.write_text(yaml.dump({"weights": weights}))
        return path

    return _write
