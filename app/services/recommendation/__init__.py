"""
Recommendation pipeline: aggregate -> dedupe -> rank -> bucket.

Only the aggregator performs I/O. The remaining stages are pure in-memory
transforms over the candidate pool of a single request.
"""

from app.services.recommendation.aggregator import AggregationResult, CandidateAggregator
from app.services.recommendation.bucketing import CategoryBucketer
from app.services.recommendation.dedup import Deduplicator
from app.services.recommendation.engine import RecommendationEngine
from app.services.recommendation.ranking import PersonalizedRanker

__all__ = [
    "AggregationResult",
    "CandidateAggregator",
    "Deduplicator",
    "PersonalizedRanker",
    "CategoryBucketer",
    "RecommendationEngine",
]
