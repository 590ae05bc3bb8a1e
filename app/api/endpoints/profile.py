from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from app.api.deps import get_profile_service
from app.core.exceptions import InsufficientSignalError
from app.models.corpus import EvidenceInput
from app.models.profile import PersonalityProfile
from app.services.profile.service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])


def build_profile_or_raise(service: ProfileService, evidence: EvidenceInput) -> PersonalityProfile:
    """Run profiling and translate domain errors to HTTP errors."""
    try:
        return service.build_profile(evidence)
    except InsufficientSignalError as e:
        logger.info(f"Profile rejected: {e}")
        raise HTTPException(
            status_code=422,
            detail={"message": str(e), "observed": e.observed, "required": e.required},
        )
    except Exception as e:
        logger.exception(f"Profile build failed: {e}")
        raise HTTPException(status_code=500, detail="Failed to build profile")


@router.post("", response_model=PersonalityProfile)
async def create_profile(
    evidence: EvidenceInput,
    service: ProfileService = Depends(get_profile_service),
) -> PersonalityProfile:
    return build_profile_or_raise(service, evidence)
