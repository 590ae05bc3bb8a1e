from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Fixed topic vocabulary. Describes WHAT someone is into."""

    AI_TOOLS = "AI Tools"
    PRODUCTIVITY = "Productivity"
    WELLNESS = "Wellness"
    EDUCATION = "Education"
    CRYPTO = "Crypto"
    LIFESTYLE = "Lifestyle"
    DESIGN = "Design"
    DEVELOPMENT = "Development"
    MARKETING = "Marketing"
    FINANCE = "Finance"


class PersonalityArchetype(str, Enum):
    """Behavioral class. Describes HOW someone engages."""

    VISIONARY = "Visionary"
    EXPLORER = "Explorer"
    CULTIVATOR = "Cultivator"
    OPTIMIZER = "Optimizer"
    INNOVATOR = "Innovator"

    @property
    def display_name(self) -> str:
        return f"The {self.value}"


class CategoryTag(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: Category
    score: int = Field(ge=0)


class DimensionRationale(BaseModel):
    model_config = ConfigDict(frozen=True)

    conviction: str
    intuition: str
    contribution: str


class DimensionScore(BaseModel):
    """
    The three behavioral axes, each clamped to 0-100.

    conviction: focused commitment (high) vs. curious exploration (low)
    intuition: vision-driven (high) vs. data-driven (low)
    contribution: how actively someone creates, helps and evangelises
    """

    model_config = ConfigDict(frozen=True)

    conviction: int = Field(ge=0, le=100)
    intuition: int = Field(ge=0, le=100)
    contribution: int = Field(ge=0, le=100)
    rationale: DimensionRationale = Field(
        default_factory=lambda: DimensionRationale(conviction="", intuition="", contribution="")
    )


class PersonalityProfile(BaseModel):
    """
    Result of profiling. `categories` is never empty.
    """

    model_config = ConfigDict(frozen=True)

    categories: list[CategoryTag] = Field(min_length=1)
    dimensions: DimensionScore
    archetype: PersonalityArchetype

    # Presentation extras
    tagline: str = ""
    description: str = ""
    interests: list[str] = Field(default_factory=list)
    confidence: int = Field(default=0, ge=0, le=100)
    data_quality: int = Field(default=0, ge=0, le=100)

    @property
    def primary_category(self) -> Category:
        return self.categories[0].label

    @property
    def category_labels(self) -> list[Category]:
        return [tag.label for tag in self.categories]
