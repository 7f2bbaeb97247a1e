"""Tests for scoring weight profiles."""
import pytest
from pydantic import ValidationError

from ats_scorer.matching.weights import DEFAULT_WEIGHTS, ScoringWeights, load_weights


class TestScoringWeights:
    """Tests for ScoringWeights validation."""

    def test_defaults(self):
        assert DEFAULT_WEIGHTS.skill_match == 0.40
        assert DEFAULT_WEIGHTS.experience == 0.30
        assert DEFAULT_WEIGHTS.education == 0.15
        assert DEFAULT_WEIGHTS.keyword_density == 0.15

    def test_must_sum_to_one(self):
        with pytest.raises(ValidationError):
            ScoringWeights(skill_match=0.5, experience=0.5, education=0.5, keyword_density=0.0)

    def test_negative_weight_rejected(self):
        with pytest.raises(ValidationError):
            ScoringWeights(skill_match=1.2, experience=-0.2, education=0.0, keyword_density=0.0)

    def test_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_WEIGHTS.skill_match = 0.9


class TestLoadWeights:
    """Tests for loading weights from YAML."""

    def test_load_valid_profile(self, weights_file):
        path = weights_file({"skill_match": 0.25, "experience": 0.25, "education": 0.25, "keyword_density": 0.25})
        weights = load_weights(path)
        assert weights.education == 0.25

    def test_load_invalid_sum(self, weights_file):
        path = weights_file({"skill_match": 0.9, "experience": 0.3, "education": 0.15, "keyword_density": 0.15})
        with pytest.raises(ValidationError):
            load_weights(path)

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "scoring.yaml"
        path.write_text("")
        assert load_weights(path) == DEFAULT_WEIGHTS

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_weights(tmp_path / "missing.yaml")

    def test_bundled_profile_matches_defaults(self):
        from config.settings import settings

        assert load_weights(settings.default_scoring_profile) == DEFAULT_WEIGHTS
