from loguru import logger

from app.core.settings import ScoringSettings
from app.models.candidate import RankedRecommendation
from app.models.profile import Category
from app.services.profile.constants import CATEGORY_KEYWORDS
from app.services.recommendation.constants import BUCKET_EXACT_TAG_POINTS, BUCKET_KEYWORD_POINTS
from app.shared.text import contains_keyword, normalize_tag


class CategoryBucketer:
    """
    Groups ranked recommendations under the profile's categories.

    Every candidate lands in exactly one bucket. Each bucket keeps everything at or
    above the score threshold up to `max_per_bucket`, padded with lower scorers up to
    `min_per_bucket` when it has them.
    """

    def __init__(self, scoring: ScoringSettings | None = None):
        self.scoring = scoring or ScoringSettings()

    @staticmethod
    def affinity(item: RankedRecommendation, category: Category) -> int:
        score = 0
        label = normalize_tag(category.value)
        if any(normalize_tag(tag) == label for tag in item.tags):
            score += BUCKET_EXACT_TAG_POINTS
        text = item.search_text
        score += sum(BUCKET_KEYWORD_POINTS for kw in CATEGORY_KEYWORDS.get(category, []) if contains_keyword(text, kw))
        return score

    def assign(self, item: RankedRecommendation, categories: list[Category]) -> Category:
        best, best_score = categories[0], 0
        for category in categories:
            score = self.affinity(item, category)
            if score > best_score:
                best, best_score = category, score
        return best

    def bucket_size(self, bucket: list[RankedRecommendation]) -> int:
        decent = sum(1 for item in bucket if item.match_score >= self.scoring.score_threshold)
        return max(min(decent, self.scoring.max_per_bucket), min(self.scoring.min_per_bucket, len(bucket)))

    def bucket(self, ranked: list[RankedRecommendation], categories: list[Category]) -> list[RankedRecommendation]:
        if not categories:
            raise ValueError("At least one profile category is required for bucketing")

        buckets: dict[Category, list[RankedRecommendation]] = {category: [] for category in categories}
        for item in ranked:
            category = self.assign(item, categories)
            buckets[category].append(item.model_copy(update={"category_group": category}))

        result: list[RankedRecommendation] = []
        for category in categories:
            bucket = sorted(buckets[category], key=lambda r: r.match_score, reverse=True)
            size = self.bucket_size(bucket)
            result.extend(bucket[:size])
            logger.debug(f"Bucket '{category.value}': kept {size} of {len(bucket)}")
        return result
