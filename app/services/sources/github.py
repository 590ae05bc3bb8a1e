import asyncio
import math
from datetime import datetime, timedelta, timezone
from typing import Any

import httpx
from loguru import logger

from app.core.base_client import BaseClient
from app.core.constants import USER_AGENT_NAME
from app.core.exceptions import SourceFetchError
from app.core.version import __version__
from app.models.candidate import CandidateItem
from app.models.profile import Category
from app.services.sources.constants import CATEGORY_SEARCH_TOPICS
from app.services.sources.base import ContentSourceAdapter

MAX_SEARCH_TOPICS = 3
MIN_STARS = 50
ACTIVE_WITHIN_DAYS = 182


class GitHubClient(BaseClient):
    """
    Client for the GitHub REST API.
    """

    def __init__(
        self,
        token: str | None = None,
        timeout: float = 10.0,
        max_retries: int = 2,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        headers = {
            "User-Agent": f"{USER_AGENT_NAME}/{__version__}",
            "Accept": "application/vnd.github+json",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        super().__init__(
            base_url="https://api.github.com",
            timeout=timeout,
            max_retries=max_retries,
            headers=headers,
            transport=transport,
        )

    async def search_repositories(self, query: str, per_page: int = 10) -> list[dict[str, Any]]:
        params = {"q": query, "sort": "stars", "order": "desc", "per_page": per_page}
        data = await self.get("/search/repositories", params=params)
        items = data.get("items") if isinstance(data, dict) else None
        if not isinstance(items, list):
            raise ValueError("Malformed search response: missing 'items'")
        return items


class GitHubSearchAdapter(ContentSourceAdapter):
    """
    Repository search by category topics, quality-gated on stars and recent activity.
    """

    name = "github"

    def __init__(self, client: GitHubClient | None = None, limit: int = 20):
        self.client = client or GitHubClient()
        self.limit = limit

    async def close(self) -> None:
        await self.client.close()

    @staticmethod
    def search_topics(hints: list[Category]) -> list[str]:
        topics: list[str] = []
        for category in hints:
            for topic in CATEGORY_SEARCH_TOPICS.get(category, []):
                if topic not in topics:
                    topics.append(topic)
        return topics

    async def fetch(self, hints: list[Category]) -> list[CandidateItem]:
        topics = self.search_topics(hints)
        if not topics:
            return []

        searched = topics[:MAX_SEARCH_TOPICS]
        pushed_after = (datetime.now(timezone.utc) - timedelta(days=ACTIVE_WITHIN_DAYS)).date().isoformat()
        per_page = max(1, math.ceil(self.limit / len(searched)))

        tasks = [
            self.client.search_repositories(f"topic:{topic} stars:>{MIN_STARS} pushed:>{pushed_after}", per_page)
            for topic in searched
        ]
        batches = await asyncio.gather(*tasks, return_exceptions=True)

        repos: dict[str, dict[str, Any]] = {}
        failures = 0
        for topic, batch in zip(searched, batches):
            if isinstance(batch, Exception):
                failures += 1
                logger.warning(f"GitHub search failed for topic '{topic}': {batch}")
                continue
            for repo in batch:
                full_name = repo.get("full_name")
                if full_name and full_name not in repos:
                    repos[full_name] = repo

        if failures == len(searched):
            raise SourceFetchError(self.name, batches[0] if isinstance(batches[0], Exception) else None)

        items = [self._to_candidate(repo, topics) for repo in repos.values()]
        items.sort(key=lambda it: it.raw_score or 0.0, reverse=True)
        logger.info(f"GitHub returned {len(items)} repositories for topics {searched}")
        return items[: self.limit]

    def _to_candidate(self, repo: dict[str, Any], user_topics: list[str]) -> CandidateItem:
        repo_topics = [t for t in (repo.get("topics") or []) if isinstance(t, str)]
        stars = int(repo.get("stargazers_count") or 0)
        description = repo.get("description") or ""
        owner = (repo.get("owner") or {}).get("login")
        return CandidateItem(
            url=repo.get("html_url") or "",
            title=repo.get("name") or repo.get("full_name") or "",
            description=description,
            tags=repo_topics,
            popularity=stars,
            source_name=self.name,
            raw_score=self.relevance(repo_topics, user_topics, stars, repo.get("pushed_at") or repo.get("updated_at"), description),
            creator=owner,
        )

    @staticmethod
    def relevance(
        repo_topics: list[str],
        user_topics: list[str],
        stars: int,
        updated_at: str | None,
        description: str,
    ) -> float:
        """
        Preliminary relevance, 0-100.

        topic match (<=40) + log-scaled stars (<=30) + recent activity (<=15) + description (<=15)
        """
        topic_matches = sum(1 for t in repo_topics if t in user_topics)
        score = min(topic_matches * 10, 40)

        # 100 stars = 20pts, 1000 stars = 30pts
        score += min(math.log10(max(stars, 0) + 1) * 10, 30)

        if updated_at:
            try:
                updated = datetime.fromisoformat(updated_at.replace("Z", "+00:00"))
                if updated.tzinfo is None:
                    updated = updated.replace(tzinfo=timezone.utc)
                days = max((datetime.now(timezone.utc) - updated).days, 0)
                score += max(15 - days / 30, 0)
            except ValueError:
                logger.debug(f"Unparseable GitHub timestamp: {updated_at}")

        score += min(len(description) / 10, 15)
        return round(min(score, 100.0), 2)
