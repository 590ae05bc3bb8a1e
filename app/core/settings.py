from pydantic import BaseModel, Field, model_validator

from app.core.config import settings


class SegmentWeights(BaseModel):
    conversation: float = 1.0
    social_profile: float = 0.5
    structured: float = 0.5


class ScoringSettings(BaseModel):
    """Thresholds and caps used by the profile and ranking pipeline."""

    min_messages: int = Field(default=3, ge=0, description="Minimum conversation messages before profiling")
    min_category_score: int = Field(default=3, ge=0, description="Weighted keyword hits a category needs")
    max_categories: int = Field(default=3, ge=1)
    contribution_override: int = Field(default=55, ge=0, le=100, description="Contribution above this is a Cultivator")
    high_dimension: int = Field(default=65, ge=0, le=100)
    low_dimension: int = Field(default=35, ge=0, le=100)
    score_threshold: int = Field(default=25, ge=0, le=100, description="Bucket items at or above this are 'decent'")
    min_per_bucket: int = Field(default=3, ge=0)
    max_per_bucket: int = Field(default=7, ge=1)
    source_timeout: float = Field(default=8.0, gt=0, description="Per-source fetch timeout in seconds")
    segment_weights: SegmentWeights = Field(default_factory=SegmentWeights)

    @model_validator(mode="after")
    def _check_bucket_bounds(self):
        if self.min_per_bucket > self.max_per_bucket:
            raise ValueError("min_per_bucket must not exceed max_per_bucket")
        return self


def get_default_scoring_settings() -> ScoringSettings:
    return ScoringSettings(
        min_messages=settings.MIN_MESSAGES,
        min_category_score=settings.MIN_CATEGORY_SCORE,
        contribution_override=settings.CONTRIBUTION_OVERRIDE,
        score_threshold=settings.SCORE_THRESHOLD,
        min_per_bucket=settings.MIN_PER_BUCKET,
        max_per_bucket=settings.MAX_PER_BUCKET,
        source_timeout=settings.SOURCE_TIMEOUT_SECONDS,
    )
