from typing import Final

from app.models.profile import Category, PersonalityArchetype

# Category vocabulary: every category's keyword list. Keywords of <=3 chars match on word boundaries.
CATEGORY_KEYWORDS: Final[dict[Category, list[str]]] = {
    Category.AI_TOOLS: [
        "ai", "gpt", "llm", "machine learning", "neural", "model", "chatbot", "openai",
        "anthropic", "claude", "copilot", "prompt", "inference", "transformer", "agent",
    ],
    Category.PRODUCTIVITY: [
        "productivity", "workflow", "automation", "efficiency", "task management",
        "notion", "calendar", "time tracking", "optimize", "systematic",
    ],
    Category.WELLNESS: [
        "wellness", "health", "fitness", "meditation", "mindfulness", "mental health",
        "yoga", "sleep", "nutrition", "self-care", "wellbeing",
    ],
    Category.EDUCATION: [
        "education", "learning", "course", "teach", "knowledge", "tutorial", "study",
        "mentor", "curriculum", "workshop", "training",
    ],
    Category.CRYPTO: [
        "crypto", "defi", "web3", "blockchain", "token", "dao", "nft", "onchain",
        "smart contract", "wallet", "protocol", "ethereum", "solana", "base",
    ],
    Category.LIFESTYLE: [
        "lifestyle", "fashion", "travel", "personal brand", "food", "photography",
        "cooking", "hobby",
    ],
    Category.DESIGN: ["design", "ui", "ux", "figma", "creative", "visual", "typography", "layout", "prototype"],
    Category.DEVELOPMENT: [
        "development", "coding", "programming", "software", "engineering", "code",
        "developer", "api", "framework", "architecture", "debugging", "typescript", "python", "rust",
    ],
    Category.MARKETING: [
        "marketing", "growth", "seo", "content strategy", "advertising", "brand",
        "conversion", "funnel", "campaign", "audience",
    ],
    Category.FINANCE: [
        "finance", "investing", "trading", "portfolio", "wealth", "stock", "market", "budget", "revenue",
    ],
}

# A category is a conversation "topic" once this many distinct keywords show up
TOPIC_MIN_DISTINCT_KEYWORDS: Final[int] = 2

# Conviction vocabulary
EXPLORATION_KEYWORDS: Final[list[str]] = [
    "curious", "explore", "exploring", "explorer", "discovery", "discover",
    "experiment", "experimenting", "variety", "diverse", "try new",
    "always looking", "different", "comparing", "new things", "so many things",
    "rabbit hole", "stumble upon",
]
COMMITMENT_KEYWORDS: Final[list[str]] = [
    "committed", "dedicated", "focused", "deep dive", "specialize",
    "expert", "obsessed", "passionate about", "all in", "doubled down",
]
# (minimum net hits, points), checked in order
LEXICAL_NET_LADDER: Final[list[tuple[int, int]]] = [(4, 25), (2, 15), (1, 5)]

# Structured-signal conviction
UNIQUE_ENTITY_LADDER: Final[list[tuple[int, int]]] = [(5, 20), (10, 10)]
UNIQUE_ENTITY_SPRAWL: Final[int] = 30
UNIQUE_ENTITY_SPRAWL_PENALTY: Final[int] = -20

# Intuition vocabulary
VISION_KEYWORDS: Final[list[str]] = [
    "vision", "future", "believe", "potential", "revolutionary", "paradigm", "early", "first",
]
ANALYSIS_KEYWORDS: Final[list[str]] = [
    "data", "metrics", "roi", "tvl", "apy", "analysis", "performance", "track record",
]
INTUITION_POINTS_PER_NET_HIT: Final[int] = 5
TREND_KEYWORDS: Final[list[str]] = ["trend", "new", "launch", "alpha", "early"]
TREND_POINTS_PER_POST: Final[int] = 2
TREND_POINTS_CAP: Final[int] = 10

EARLY_MARKERS: Final[list[str]] = [
    "early", "beta", "alpha", "experimental", "pre-launch", "testnet", "prototype",
]
ESTABLISHED_MARKERS: Final[list[str]] = [
    "established", "mature", "stable", "uniswap", "aave", "compound", "curve", "maker",
]

# Contribution: category -> (keywords, points per hit, cap)
CONTRIBUTION_FACTORS: Final[dict[str, tuple[list[str], int, int]]] = {
    "content creation": (["wrote", "published", "created", "shared", "tutorial", "guide", "review"], 5, 35),
    "community engagement": (["feedback", "suggestion", "improvement", "helped", "support", "community"], 5, 30),
    "referral": (["recommend", "check out", "try this", "using", "love this"], 3, 15),
}
GOVERNANCE_ACTIONS: Final[list[str]] = ["vote", "propose", "delegate"]
GOVERNANCE_POINTS_PER_ACTION: Final[int] = 10
GOVERNANCE_CAP: Final[int] = 40

DIMENSION_MIDPOINT: Final[int] = 50

# Presentation
TAGLINE_TEMPLATES: Final[dict[PersonalityArchetype, str]] = {
    PersonalityArchetype.VISIONARY: "The {category} Pioneer",
    PersonalityArchetype.EXPLORER: "The {category} Nomad",
    PersonalityArchetype.CULTIVATOR: "The {category} Gardener",
    PersonalityArchetype.OPTIMIZER: "The {category} Analyst",
    PersonalityArchetype.INNOVATOR: "The {category} Architect",
}

DESCRIPTIONS: Final[dict[PersonalityArchetype, list[str]]] = {
    PersonalityArchetype.VISIONARY: [
        "You back bold ideas before they're obvious. Your conviction is your edge, "
        "and {primary} is where you spot the next paradigm shift.",
        "Vision-driven and future-oriented, you champion projects that challenge the status quo.",
    ],
    PersonalityArchetype.EXPLORER: [
        "Every project is a new adventure. Your diverse interests across {all} fuel your journey.",
        "You don't settle into one niche. Exploration is your strategy and variety is your strength.",
    ],
    PersonalityArchetype.CULTIVATOR: [
        "You help projects grow. Through feedback, content and community building in {primary}, "
        "you're the supporter every builder hopes for.",
        "You're an active participant, not a passive observer. Projects thrive when you're involved.",
    ],
    PersonalityArchetype.OPTIMIZER: [
        "Always leveling up. You're data-driven, focused and relentless about improvement. "
        "{primary} tools that maximize efficiency earn your support.",
        "There's always a better way and you're determined to find it.",
    ],
    PersonalityArchetype.INNOVATOR: [
        "You spot breakthrough technology early, especially in {primary}.",
        "Technical depth meets early adoption. You understand how things work under the hood.",
    ],
}

INTEREST_LABELS: Final[list[str]] = [
    "AI Tools", "Machine Learning", "Crypto", "DeFi", "NFTs", "Education", "Wellness",
    "Fitness", "Productivity", "Meditation", "Web3", "DAOs", "Gaming", "Art", "Music",
    "Writing", "Coding", "Design", "Marketing", "Finance", "Health",
]
MAX_INTERESTS: Final[int] = 10

FALLBACK_CATEGORY_NAME: Final[str] = "Tech"
