from fastapi import Request

from app.core.settings import get_default_scoring_settings
from app.services.profile.service import ProfileService
from app.services.recommendation.engine import RecommendationEngine
from app.services.sources.base import ContentSourceAdapter


def get_profile_service() -> ProfileService:
    return ProfileService(get_default_scoring_settings())


def get_recommendation_engine() -> RecommendationEngine:
    return RecommendationEngine(get_default_scoring_settings())


def get_adapters(request: Request) -> list[ContentSourceAdapter]:
    """Adapters are created once per process by the lifespan handler, which also closes them."""
    return request.app.state.adapters
