from collections import Counter

from app.models.corpus import SignalCorpus, SignalSource, StructuredSignals
from app.models.profile import Category, DimensionRationale, DimensionScore
from app.services.profile.constants import (
    ANALYSIS_KEYWORDS,
    CATEGORY_KEYWORDS,
    COMMITMENT_KEYWORDS,
    CONTRIBUTION_FACTORS,
    DIMENSION_MIDPOINT,
    EARLY_MARKERS,
    ESTABLISHED_MARKERS,
    EXPLORATION_KEYWORDS,
    GOVERNANCE_ACTIONS,
    GOVERNANCE_CAP,
    GOVERNANCE_POINTS_PER_ACTION,
    INTUITION_POINTS_PER_NET_HIT,
    LEXICAL_NET_LADDER,
    TOPIC_MIN_DISTINCT_KEYWORDS,
    TREND_KEYWORDS,
    TREND_POINTS_CAP,
    TREND_POINTS_PER_POST,
    UNIQUE_ENTITY_LADDER,
    UNIQUE_ENTITY_SPRAWL,
    UNIQUE_ENTITY_SPRAWL_PENALTY,
    VISION_KEYWORDS,
)
from app.shared.text import contains_keyword, count_occurrences, matched_keywords


def clamp(value: float, low: int = 0, high: int = 100) -> int:
    return int(min(max(round(value), low), high))


class DimensionScorer:
    """
    Computes Conviction, Intuition and Contribution from a corpus.

    Every factor is additive and independent; each dimension is clamped to 0-100
    at the end. No hidden state, no I/O.
    """

    def __init__(self, category_keywords: dict[Category, list[str]] | None = None):
        self.category_keywords = category_keywords or CATEGORY_KEYWORDS

    def score(self, corpus: SignalCorpus, structured: StructuredSignals | None = None) -> DimensionScore:
        structured = structured if structured is not None else corpus.structured
        if structured is not None and structured.is_empty:
            structured = None

        conviction, conviction_notes = self.conviction(corpus, structured)
        intuition, intuition_notes = self.intuition(corpus, structured)
        contribution, contribution_notes = self.contribution(corpus, structured)

        return DimensionScore(
            conviction=clamp(conviction),
            intuition=clamp(intuition),
            contribution=clamp(contribution),
            rationale=DimensionRationale(
                conviction=self._summarize(conviction_notes),
                intuition=self._summarize(intuition_notes),
                contribution=self._summarize(contribution_notes),
            ),
        )

    # ------------------------------------------------------------------ conviction

    def topic_mentions(self, text: str) -> dict[Category, int]:
        """Categories with enough distinct keyword hits to count as topics -> total mentions."""
        topics = {}
        for category, keywords in self.category_keywords.items():
            hits = matched_keywords(text, keywords)
            if len(hits) >= TOPIC_MIN_DISTINCT_KEYWORDS:
                topics[category] = sum(count_occurrences(text, kw) for kw in hits)
        return topics

    def conviction(self, corpus: SignalCorpus, structured: StructuredSignals | None = None) -> tuple[float, list[str]]:
        score = float(DIMENSION_MIDPOINT)
        notes: list[str] = []
        text = corpus.full_text

        # Topic concentration
        topics = self.topic_mentions(text)
        topic_count = len(topics)
        if topic_count <= 1:
            score += 15
            notes.append(f"{topic_count} topic(s): focused (+15)")
        elif topic_count == 2:
            score += 5
            notes.append("2 topics (+5)")
        elif topic_count >= 6:
            score -= 10
            notes.append(f"{topic_count} topics: scattered (-10)")

        # Topic dominance
        counts = sorted(topics.values(), reverse=True)
        if len(counts) >= 2:
            top, runner_up = counts[0], counts[1]
            if top >= 3 * runner_up and top >= 3:
                score += 20
                notes.append("one dominant topic (+20)")
            elif top >= 2 * runner_up and top >= 2:
                score += 10
                notes.append("leading topic (+10)")
            elif top <= runner_up + 1:
                score -= 10
                notes.append("even topic spread (-10)")

            if topic_count >= 4 and top <= counts[-1] * 2:
                score -= 10
                notes.append("many evenly mentioned topics (-10)")

        # Exploration vs. commitment language
        net = len(matched_keywords(text, EXPLORATION_KEYWORDS)) - len(matched_keywords(text, COMMITMENT_KEYWORDS))
        for threshold, points in LEXICAL_NET_LADDER:
            if net >= threshold:
                score -= points
                notes.append(f"exploration language (-{points})")
                break
            if net <= -threshold:
                score += points
                notes.append(f"commitment language (+{points})")
                break

        if structured:
            score += self._structured_conviction(structured, notes)

        return score, notes

    @staticmethod
    def _structured_conviction(structured: StructuredSignals, notes: list[str]) -> float:
        delta = 0.0
        entity_counts = Counter(record.entity.lower() for record in structured.records if record.entity)
        unique = len(entity_counts)
        if unique == 0:
            return delta

        for limit, points in UNIQUE_ENTITY_LADDER:
            if unique <= limit:
                delta += points
                notes.append(f"{unique} unique entities (+{points})")
                break
        else:
            if unique > UNIQUE_ENTITY_SPRAWL:
                delta += UNIQUE_ENTITY_SPRAWL_PENALTY
                notes.append(f"{unique} unique entities ({UNIQUE_ENTITY_SPRAWL_PENALTY})")

        avg_repeat = sum(entity_counts.values()) / unique
        if avg_repeat > 5:
            delta += 15
            notes.append("heavy repeat interaction (+15)")
        elif avg_repeat > 2:
            delta += 5
            notes.append("repeat interaction (+5)")
        elif avg_repeat < 1.5:
            delta -= 10
            notes.append("one-off interactions (-10)")
        return delta

    # ------------------------------------------------------------------ intuition

    def intuition(self, corpus: SignalCorpus, structured: StructuredSignals | None = None) -> tuple[float, list[str]]:
        score = float(DIMENSION_MIDPOINT)
        notes: list[str] = []
        text = corpus.full_text

        vision = len(matched_keywords(text, VISION_KEYWORDS))
        analysis = len(matched_keywords(text, ANALYSIS_KEYWORDS))
        if vision or analysis:
            delta = (vision - analysis) * INTUITION_POINTS_PER_NET_HIT
            score += delta
            notes.append(f"vision {vision} vs analysis {analysis} ({delta:+d})")

        posts = corpus.segments_for(SignalSource.SOCIAL_PROFILE)
        trend_posts = sum(1 for seg in posts if any(contains_keyword(seg.text, kw) for kw in TREND_KEYWORDS))
        if trend_posts:
            delta = min(trend_posts * TREND_POINTS_PER_POST, TREND_POINTS_CAP)
            score += delta
            notes.append(f"{trend_posts} trend posts (+{delta})")

        if structured:
            early = sum(1 for r in structured.records if self._record_matches(r, EARLY_MARKERS))
            established = sum(1 for r in structured.records if self._record_matches(r, ESTABLISHED_MARKERS))
            if early:
                score += 10
                notes.append(f"{early} early-stage interactions (+10)")
            if established > 10:
                score -= 10
                notes.append(f"{established} established-protocol interactions (-10)")
            elif established >= 3:
                score -= 5
                notes.append(f"{established} established-protocol interactions (-5)")
            if len(structured.records) > 100:
                score += 5
                notes.append("high activity volume (+5)")

        return score, notes

    @staticmethod
    def _record_matches(record, markers: list[str]) -> bool:
        text = " ".join(filter(None, [record.entity, record.action, *record.tags]))
        return any(contains_keyword(text, marker) for marker in markers)

    # ------------------------------------------------------------------ contribution

    def contribution(
        self, corpus: SignalCorpus, structured: StructuredSignals | None = None
    ) -> tuple[float, list[str]]:
        score = 0.0
        notes: list[str] = []
        text = corpus.full_text

        for name, (keywords, points, cap) in CONTRIBUTION_FACTORS.items():
            hits = len(matched_keywords(text, keywords))
            if hits:
                delta = min(hits * points, cap)
                score += delta
                notes.append(f"{name} x{hits} (+{delta})")

        if structured:
            governance = sum(
                1
                for record in structured.records
                if record.action and any(g in record.action.lower() for g in GOVERNANCE_ACTIONS)
            )
            if governance:
                delta = min(governance * GOVERNANCE_POINTS_PER_ACTION, GOVERNANCE_CAP)
                score += delta
                notes.append(f"governance x{governance} (+{delta})")

        post_count = corpus.post_count
        if post_count > 100:
            score += 10
            notes.append("prolific poster (+10)")
        elif post_count > 50:
            score += 5
            notes.append("active poster (+5)")

        return min(score, 100), notes

    @staticmethod
    def _summarize(notes: list[str]) -> str:
        return "; ".join(notes) if notes else "baseline"
