from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.models.profile import Category
from app.shared.ids import canonicalize_url


class CandidateItem(BaseModel):
    """
    Content item supplied by a source adapter.

    `canonical_id` defaults to the normalized `url`. `raw_score` is the source's own
    preliminary relevance on a 0-100 scale, when it has one.
    """

    model_config = ConfigDict(frozen=True)

    canonical_id: str = ""
    url: str = ""
    title: str
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    popularity: int | None = Field(default=None, description="Stars, installs or similar counter")
    source_name: str
    raw_score: float | None = None
    creator: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _derive_canonical_id(cls, data):
        if isinstance(data, dict):
            given = canonicalize_url(data.get("canonical_id"))
            data = {**data, "canonical_id": given or canonicalize_url(data.get("url"))}
        return data

    @property
    def search_text(self) -> str:
        """Lower-cased title, description and tags used for keyword matching."""
        return " ".join([self.title, self.description, *self.tags]).lower()


class RankedRecommendation(CandidateItem):
    match_score: int = Field(ge=0, le=100)
    category_group: Category | None = None
    reason: str = ""
