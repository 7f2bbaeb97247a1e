"""Tests for keyword density analysis."""
import pytest

from ats_scorer.matching.keyword_density import (
    STOP_WORDS,
    description_keywords,
    job_keywords,
    score_keyword_density,
)
from ats_scorer.matching.models import JobRequirements


class TestKeywordExtraction:
    """Tests for building the job keyword set."""

    def test_description_drops_short_tokens_and_stop_words(self):
        keywords = description_keywords("Looking for a Python developer with AWS and cloud experience")
        assert keywords == ["python", "developer", "cloud"]

    def test_description_trims_punctuation(self):
        assert description_keywords("Kubernetes, Terraform; (Docker).") == ["kubernetes", "terraform", "docker"]

    def test_length_checked_before_trimming(self):
        """Length is measured as written: "AWS." has four characters and is kept as "aws"."""
        assert description_keywords("Python, AWS. Java") == ["python", "aws", "java"]

    def test_bare_short_token_dropped(self):
        assert description_keywords("AWS and Java") == ["java"]

    def test_stop_words_compared_as_written(self):
        """A trailing comma keeps "experience," out of the stop-word table."""
        assert description_keywords("cloud experience, team") == ["cloud", "experience"]

    def test_punctuation_only_token_dropped(self):
        assert description_keywords("Python .... Java") == ["python", "java"]

    def test_description_deduplicates(self):
        assert description_keywords("python Python PYTHON") == ["python"]

    def test_boilerplate_is_stop_word(self):
        for word in ("experience", "required", "preferred", "team", "role", "with", "that"):
            assert word in STOP_WORDS

    def test_job_keywords_union_in_order(self, sample_job):
        assert job_keywords(sample_job) == ["python", "aws", "sql", "developer", "cloud"]

    def test_short_skills_kept(self):
        """Length filter applies to description tokens, not to listed skills."""
        job = JobRequirements(required_skills=["Go", "R"], description="")
        assert job_keywords(job) == ["go", "r"]

    def test_empty_job(self):
        assert job_keywords(JobRequirements()) == []


class TestScoreKeywordDensity:
    """Tests for keyword density scoring."""

    @pytest.mark.parametrize("text", ["", None])
    def test_no_text_floor(self, sample_job, text):
        result = score_keyword_density(text, sample_job)
        assert result.score == 50
        assert result.matches == []
        assert "No resume text" in result.analysis

    def test_reference_scenario(self, sample_job):
        result = score_keyword_density("Experienced Python developer with SQL and AWS skills", sample_job)
        assert result.matches == ["python", "aws", "sql", "developer"]
        assert result.score == pytest.approx(100)
        assert "4/5 keywords matched" in result.analysis

    def test_partial_overlap(self):
        job = JobRequirements(required_skills=["Python", "Docker", "Kafka", "Spark"])
        result = score_keyword_density("I write python", job)
        assert result.matches == ["python"]
        assert result.score == pytest.approx(45)
        assert "1/4 keywords matched" in result.analysis

    def test_no_overlap_gets_baseline(self):
        job = JobRequirements(required_skills=["Rust"])
        result = score_keyword_density("Accountant", job)
        assert result.score == pytest.approx(20)
        assert result.matches == []

    def test_no_keywords_gets_baseline(self):
        result = score_keyword_density("Some resume text", JobRequirements())
        assert result.score == pytest.approx(20)
        assert "0/0 keywords matched" in result.analysis

    def test_punctuated_short_term_counts(self):
        job = JobRequirements(description="Python, AWS. Java")
        result = score_keyword_density("Python and AWS", job)
        assert result.matches == ["python", "aws"]
        assert "2/3 keywords matched" in result.analysis

    def test_case_insensitive_substring(self):
        job = JobRequirements(required_skills=["PostgreSQL"])
        result = score_keyword_density("Managed POSTGRESQL clusters", job)
        assert result.matches == ["postgresql"]

    def test_score_capped_at_100(self):
        job = JobRequirements(required_skills=["python"])
        assert score_keyword_density("python", job).score == 100
