from enum import Enum

from app.core.config import settings
from app.services.sources.base import ContentSourceAdapter
from app.services.sources.curated import CuratedListAdapter
from app.services.sources.github import GitHubClient, GitHubSearchAdapter


class SourceProvider(Enum):
    GITHUB = "github"
    CURATED = "curated"


def build_adapter(provider: SourceProvider, client: GitHubClient | None = None) -> ContentSourceAdapter:
    client = client or GitHubClient(token=settings.GITHUB_TOKEN)
    if provider is SourceProvider.GITHUB:
        return GitHubSearchAdapter(client, limit=settings.GITHUB_RESULTS_LIMIT)
    return CuratedListAdapter(client, limit=settings.CURATED_RESULTS_LIMIT)


def build_default_adapters() -> list[ContentSourceAdapter]:
    """Adapters in priority order: the first source wins dedupe ties."""
    return [build_adapter(provider) for provider in (SourceProvider.CURATED, SourceProvider.GITHUB)]
