from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SignalSource(str, Enum):
    CONVERSATION = "conversation"
    SOCIAL_PROFILE = "social_profile"
    STRUCTURED = "structured"


class ActivityRecord(BaseModel):
    """One structured interaction, e.g. a contract call or a repository action."""

    model_config = ConfigDict(frozen=True)

    entity: str = Field(description="Identifier of the thing interacted with (contract, repo, project)")
    action: str | None = Field(default=None, description="Method or verb, e.g. 'vote', 'swap', 'star'")
    tags: list[str] = Field(default_factory=list, description="Free-form markers such as 'beta' or 'mature'")


class StructuredSignals(BaseModel):
    model_config = ConfigDict(frozen=True)

    records: list[ActivityRecord] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.records


class SocialProfile(BaseModel):
    bio: str = ""
    posts: list[str] = Field(default_factory=list)
    following: list[str] = Field(default_factory=list)


class EvidenceInput(BaseModel):
    """
    Raw evidence handed over by external collectors.

    Either `conversation_text` (a transcript with role-prefixed lines) or `messages`
    (already split turns) carries the conversation.
    """

    conversation_text: str | None = None
    messages: list[str] = Field(default_factory=list)
    social: SocialProfile | None = None
    structured: StructuredSignals | None = None


class SignalSegment(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: SignalSource
    text: str
    weight: float = 1.0


class SignalCorpus(BaseModel):
    """
    Merged, tagged evidence for one request. Built by SignalCorpusBuilder, never mutated.
    """

    model_config = ConfigDict(frozen=True)

    segments: tuple[SignalSegment, ...]
    message_count: int
    structured: StructuredSignals | None = None
    post_count: int = 0
    following_count: int = 0

    def has_source(self, source: SignalSource) -> bool:
        return any(seg.source == source for seg in self.segments)

    def segments_for(self, source: SignalSource) -> list[SignalSegment]:
        return [seg for seg in self.segments if seg.source == source]

    @property
    def full_text(self) -> str:
        return "\n".join(seg.text for seg in self.segments)
