from app.core.settings import ScoringSettings
from app.models.corpus import SignalCorpus
from app.models.profile import Category, CategoryTag
from app.services.profile.constants import CATEGORY_KEYWORDS
from app.shared.text import count_occurrences


class CategoryDetector:
    """
    Frequency-weighted category detection.

    A category needs an accumulated score of `min_category_score` to qualify, so a
    single passing mention of "blockchain" never labels someone a Crypto person.
    """

    def __init__(
        self,
        scoring: ScoringSettings | None = None,
        keywords: dict[Category, list[str]] | None = None,
    ):
        self.scoring = scoring or ScoringSettings()
        self.keywords = keywords or CATEGORY_KEYWORDS

    def score_all(self, corpus: SignalCorpus) -> dict[Category, int]:
        """Weighted keyword hits for every category, in vocabulary order."""
        scores: dict[Category, int] = {}
        for category, keywords in self.keywords.items():
            total = 0.0
            for segment in corpus.segments:
                hits = sum(count_occurrences(segment.text, kw) for kw in keywords)
                total += hits * segment.weight
            scores[category] = int(round(total))
        return scores

    def detect(self, corpus: SignalCorpus) -> list[CategoryTag]:
        scores = self.score_all(corpus)
        # sorted() is stable, so ties keep vocabulary order
        ranked = sorted(scores.items(), key=lambda x: x[1], reverse=True)

        qualified = [
            CategoryTag(label=category, score=score)
            for category, score in ranked
            if score >= self.scoring.min_category_score
        ]
        if qualified:
            return qualified[: self.scoring.max_categories]

        category, score = ranked[0]
        return [CategoryTag(label=category, score=score)]
