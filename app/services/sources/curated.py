import asyncio
import re

from async_lru import alru_cache
from loguru import logger
from pydantic import BaseModel

from app.core.config import settings
from app.core.exceptions import SourceFetchError
from app.models.candidate import CandidateItem
from app.models.profile import Category
from app.services.profile.constants import CATEGORY_KEYWORDS
from app.services.sources.base import ContentSourceAdapter
from app.services.sources.github import GitHubClient

# Raw list scores rarely exceed this; used to map them onto 0-100
CURATED_SCORE_CEILING = 30
LABEL_HIT_POINTS = 10
WORD_HIT_POINTS = 2
OFFICIAL_LIST_POINTS = 5

_HEADING = re.compile(r"^#{2,3}\s+(.+?)\s*#*$")
# - [Name](url) - description   /   * **[Name](url)** – description   /   - [Name](url): description
_ENTRY = re.compile(r"^[\s\-*]+\**\[([^\]]+)\]\(([^)\s]+)\)\**\s*(?:[-–—]|:)\s*(.+)$")


class CuratedList(BaseModel):
    owner: str
    repo: str
    official: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


DEFAULT_CURATED_LISTS: list[CuratedList] = [
    CuratedList(owner="anthropics", repo="skills", official=True),
    CuratedList(owner="travisvn", repo="awesome-claude-skills"),
    CuratedList(owner="VoltAgent", repo="awesome-agent-skills"),
    CuratedList(owner="hesreallyhim", repo="awesome-claude-code"),
]


class CuratedEntry(BaseModel):
    name: str
    url: str
    description: str
    section: str
    official: bool = False
    list_owner: str = ""


def parse_curated_markdown(markdown: str, curated: CuratedList) -> list[CuratedEntry]:
    """Extract link entries from an awesome-list README. The enclosing heading becomes the section."""
    entries: list[CuratedEntry] = []
    section = "General"
    for line in markdown.splitlines():
        heading = _HEADING.match(line)
        if heading:
            section = heading.group(1).strip()
            continue
        entry = _ENTRY.match(line)
        if not entry:
            continue
        name, url, description = (part.strip() for part in entry.groups())
        if not url.startswith("http"):
            continue
        entries.append(
            CuratedEntry(
                name=name,
                url=url,
                description=description,
                section=section,
                official=curated.official,
                list_owner=curated.owner,
            )
        )
    return entries


def score_entry(entry: CuratedEntry, hints: list[Category]) -> int:
    text = f"{entry.name} {entry.description} {entry.section}".lower()
    score = 0
    for category in hints:
        label = category.value.lower()
        if label in text:
            score += LABEL_HIT_POINTS
        words = {w for w in label.split() if len(w) > 3}
        words.update(kw for kw in CATEGORY_KEYWORDS.get(category, []) if len(kw) > 3)
        score += sum(WORD_HIT_POINTS for w in words if w in text)
    if entry.official:
        score += OFFICIAL_LIST_POINTS
    return score


class CuratedListAdapter(ContentSourceAdapter):
    """
    Entries from curated awesome-lists on GitHub, keyword-matched against the profile.
    """

    name = "curated"

    def __init__(
        self,
        client: GitHubClient | None = None,
        lists: list[CuratedList] | None = None,
        limit: int = 20,
    ):
        self.client = client or GitHubClient()
        self.lists = lists or DEFAULT_CURATED_LISTS
        self.limit = limit
        # Cached per adapter instance and dropped on close
        self.get_readme = alru_cache(maxsize=64, ttl=settings.CURATED_CACHE_TTL_SECONDS)(self._get_readme)

    async def close(self) -> None:
        self.get_readme.cache_clear()
        await self.client.close()

    async def _get_readme(self, full_name: str) -> str:
        """Raw README markdown. Cached: lists change slowly and the API is rate limited."""
        return await self.client.get_text(
            f"/repos/{full_name}/readme", headers={"Accept": "application/vnd.github.raw"}
        )

    async def fetch(self, hints: list[Category]) -> list[CandidateItem]:
        results = await asyncio.gather(*(self.get_readme(c.full_name) for c in self.lists), return_exceptions=True)

        entries: list[CuratedEntry] = []
        errors: list[Exception] = []
        for curated, result in zip(self.lists, results):
            if isinstance(result, Exception):
                errors.append(result)
                logger.warning(f"Failed to fetch curated list {curated.full_name}: {result}")
                continue
            parsed = parse_curated_markdown(result, curated)
            logger.debug(f"Parsed {len(parsed)} entries from {curated.full_name}")
            entries.extend(parsed)

        if errors and len(errors) == len(self.lists):
            raise SourceFetchError(self.name, errors[0])

        seen: set[str] = set()
        scored: list[tuple[int, CuratedEntry]] = []
        for entry in entries:
            if entry.url in seen:
                continue
            seen.add(entry.url)
            score = score_entry(entry, hints)
            if score > 0:
                scored.append((score, entry))
        scored.sort(key=lambda x: x[0], reverse=True)

        items = [self._to_candidate(score, entry) for score, entry in scored[: self.limit]]
        logger.info(f"Curated lists returned {len(items)} of {len(entries)} entries")
        return items

    def _to_candidate(self, score: int, entry: CuratedEntry) -> CandidateItem:
        normalized = min(round(score / CURATED_SCORE_CEILING * 100), 100)
        return CandidateItem(
            url=entry.url,
            title=entry.name,
            description=entry.description,
            tags=[entry.section],
            source_name=self.name,
            raw_score=float(normalized),
            creator=entry.list_owner if entry.official else None,
        )
