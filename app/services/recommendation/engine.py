from collections.abc import Sequence

from loguru import logger

from app.core.settings import ScoringSettings, get_default_scoring_settings
from app.models.candidate import RankedRecommendation
from app.models.profile import PersonalityProfile
from app.services.recommendation.aggregator import CandidateAggregator
from app.services.recommendation.bucketing import CategoryBucketer
from app.services.recommendation.dedup import Deduplicator
from app.services.recommendation.ranking import PersonalizedRanker
from app.services.sources.base import ContentSourceAdapter


class RecommendationEngine:
    """
    Main orchestration logic for generating recommendations from a profile.

    Stateless between calls: every request fetches, ranks and buckets from scratch.
    """

    def __init__(self, scoring: ScoringSettings | None = None):
        self.scoring = scoring or get_default_scoring_settings()
        self.aggregator = CandidateAggregator(timeout=self.scoring.source_timeout)
        self.deduplicator = Deduplicator()
        self.ranker = PersonalizedRanker(self.scoring)
        self.bucketer = CategoryBucketer(self.scoring)

    async def recommend(
        self,
        profile: PersonalityProfile,
        adapters: Sequence[ContentSourceAdapter],
    ) -> list[RankedRecommendation]:
        """Recommendation Pipeline. Source failures degrade to fewer candidates, never to an error."""
        categories = profile.category_labels
        logger.info(
            f"Starting Recommendation Pipeline for {profile.archetype.display_name} "
            f"({', '.join(c.value for c in categories)})"
        )

        # 1. Candidate Generation (all sources, settled)
        aggregated = await self.aggregator.fetch(adapters, categories)

        # 2. Deduplication
        candidates = self.deduplicator.dedupe(aggregated.items)
        if not candidates:
            logger.warning("No candidates available after aggregation")
            return []

        # 3. Personalized Ranking
        ranked = self.ranker.rank_all(candidates, profile)

        # 4. Category Grouping
        grouped = self.bucketer.bucket(ranked, categories)

        logger.info(
            f"Recommendation Pipeline finished: {len(aggregated.items)} fetched, "
            f"{len(candidates)} unique, {len(grouped)} recommended"
        )
        return grouped
