from typing import Final

from app.models.profile import PersonalityArchetype

# How each archetype tends to describe what it likes
ARCHETYPE_KEYWORDS: Final[dict[PersonalityArchetype, list[str]]] = {
    PersonalityArchetype.VISIONARY: [
        "innovative", "early-stage", "vision", "future", "paradigm", "pioneer",
        "disrupt", "bold", "ambitious", "frontier", "emerging", "breakthrough",
    ],
    PersonalityArchetype.EXPLORER: [
        "diverse", "experimental", "discovery", "research", "explore", "curiosity",
        "variety", "breadth", "survey", "sandbox", "prototype", "tinker",
    ],
    PersonalityArchetype.CULTIVATOR: [
        "community", "social", "collaborate", "nurture", "build", "ecosystem",
        "mentor", "contribute", "share", "governance", "collective", "stewardship",
    ],
    PersonalityArchetype.OPTIMIZER: [
        "efficiency", "data-driven", "optimize", "systematic", "analytics", "performance",
        "metrics", "roi", "benchmark", "refine", "precision", "reliable",
    ],
    PersonalityArchetype.INNOVATOR: [
        "technology", "ai", "automation", "creative", "cutting-edge", "novel",
        "hybrid", "synthesis", "interdisciplinary", "integrate", "cross-domain", "generative",
    ],
}

# Category overlap: points for the 1st, 2nd, 3rd matching profile category
CATEGORY_MATCH_WEIGHTS: Final[list[int]] = [20, 12, 8]
CAP_CATEGORY: Final[int] = 40

# Archetype affinity: (hits covered by this tier, points per hit)
ARCHETYPE_HIT_TIERS: Final[list[tuple[int, int]]] = [(3, 3), (3, 2)]
ARCHETYPE_TAIL_POINTS: Final[int] = 1
CAP_ARCHETYPE: Final[int] = 15

# Dimension-aware bonuses
BONUS_EXACT_CATEGORY: Final[int] = 8
BONUS_NOVEL_CATEGORY: Final[int] = 5
BONUS_EARLY_STAGE: Final[int] = 6
BONUS_ESTABLISHED: Final[int] = 6
BONUS_COMMUNITY: Final[int] = 6
CAP_DIMENSION: Final[int] = 15

EARLY_STAGE_MARKERS: Final[list[str]] = ["early", "beta", "alpha", "experimental"]
EARLY_STAGE_MAX_POPULARITY: Final[int] = 500
ESTABLISHED_MIN_POPULARITY: Final[int] = 5000
COMMUNITY_MARKERS: Final[list[str]] = ["community", "collaborat", "contribut", "open-source", "governance"]

# Source relevance: share of the adapter's 0-100 raw score
SOURCE_RELEVANCE_FACTOR: Final[float] = 0.3
CAP_SOURCE: Final[int] = 30

# Bucketing: how strongly a candidate belongs to a category
BUCKET_EXACT_TAG_POINTS: Final[int] = 10
BUCKET_KEYWORD_POINTS: Final[int] = 2
