from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from pydantic import BaseModel, Field, model_validator

from app.api.deps import get_adapters, get_profile_service, get_recommendation_engine
from app.api.endpoints.profile import build_profile_or_raise
from app.models.candidate import RankedRecommendation
from app.models.corpus import EvidenceInput
from app.models.profile import PersonalityProfile
from app.services.profile.service import ProfileService
from app.services.recommendation.engine import RecommendationEngine
from app.services.sources.base import ContentSourceAdapter

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


class RecommendationRequest(BaseModel):
    profile: PersonalityProfile | None = Field(default=None, description="A previously built profile")
    evidence: EvidenceInput | None = Field(default=None, description="Raw evidence, profiled on the fly")

    @model_validator(mode="after")
    def _require_one(self):
        if self.profile is None and self.evidence is None:
            raise ValueError("Provide either 'profile' or 'evidence'")
        return self


class RecommendationResponse(BaseModel):
    profile: PersonalityProfile
    recommendations: list[RankedRecommendation]


@router.post("", response_model=RecommendationResponse)
async def create_recommendations(
    payload: RecommendationRequest,
    engine: RecommendationEngine = Depends(get_recommendation_engine),
    profile_service: ProfileService = Depends(get_profile_service),
    adapters: list[ContentSourceAdapter] = Depends(get_adapters),
) -> RecommendationResponse:
    profile = payload.profile or build_profile_or_raise(profile_service, payload.evidence)

    try:
        recommendations = await engine.recommend(profile, adapters)
    except Exception as e:
        logger.exception(f"Recommendation pipeline failed: {e}")
        raise HTTPException(status_code=500, detail="Failed to build recommendations")

    return RecommendationResponse(profile=profile, recommendations=recommendations)
