"""Sub-score weights for the overall ATS score."""
from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

WEIGHT_SUM_TOLERANCE = 1e-9


class ScoringWeights(BaseModel):
    """Fixed-weight convex combination of the four sub-scores."""

    model_config = ConfigDict(frozen=True)

    skill_match: float = Field(ge=0, le=1, default=0.40)
    experience: float = Field(ge=0, le=1, default=0.30)
    education: float = Field(ge=0, le=1, default=0.15)
    keyword_density: float = Field(ge=0, le=1, default=0.15)

    @model_validator(mode="after")
    def validate_sum(self):
        """Weights must sum to 1.0 so the overall score stays within 0-100."""
        total = self.skill_match + self.experience + self.education + self.keyword_density
        if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
            raise ValueError(f"Scoring weights must sum to 1.0, got {total:.4f}")
        return self


DEFAULT_WEIGHTS = ScoringWeights()


def load_weights(path: Union[str, Path]) -> ScoringWeights:
    """
    Load weights from a YAML scoring profile.

    Expected layout:

        weights:
          skill_match: 0.40
          experience: 0.30
          education: 0.15
          keyword_density: 0.15

    Omitted keys keep their defaults, which usually breaks the 1.0 sum,
    so profiles should list all four.

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If the weights are invalid
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    return ScoringWeights(**(data.get("weights") or {}))
