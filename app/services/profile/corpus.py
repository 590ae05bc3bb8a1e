import re

from loguru import logger

from app.core.constants import CONVERSATION_ROLES
from app.core.exceptions import InsufficientSignalError
from app.core.settings import ScoringSettings
from app.models.corpus import EvidenceInput, SignalCorpus, SignalSegment, SignalSource, StructuredSignals

_ROLES = "|".join(CONVERSATION_ROLES)
# Split *before* a line that opens with a role prefix
_TURN_BOUNDARY = re.compile(rf"\n(?=\s*(?:{_ROLES})\s*:)", re.IGNORECASE)
_ROLE_PREFIX = re.compile(rf"^\s*(?:{_ROLES})\s*:\s*", re.IGNORECASE)


def split_messages(conversation_text: str) -> list[str]:
    """Split a transcript into turns at role-prefixed line boundaries."""
    if not conversation_text:
        return []
    chunks = _TURN_BOUNDARY.split(conversation_text)
    return [chunk.strip() for chunk in chunks if chunk.strip()]


def strip_role(message: str) -> str:
    return _ROLE_PREFIX.sub("", message).strip()


class SignalCorpusBuilder:
    """
    Merges conversation, social and structured evidence into one SignalCorpus.

    Pure: no I/O. Raises InsufficientSignalError instead of returning a thin corpus,
    so callers can ask the user for more input.
    """

    def __init__(self, scoring: ScoringSettings | None = None):
        self.scoring = scoring or ScoringSettings()

    def build(self, evidence: EvidenceInput) -> SignalCorpus:
        weights = self.scoring.segment_weights
        segments: list[SignalSegment] = []

        messages = self._collect_messages(evidence)
        for message in messages:
            text = strip_role(message)
            if text:
                segments.append(SignalSegment(source=SignalSource.CONVERSATION, text=text, weight=weights.conversation))

        post_count = 0
        following_count = 0
        if evidence.social:
            social_texts = [evidence.social.bio, *evidence.social.posts]
            for text in social_texts:
                if text and text.strip():
                    segments.append(
                        SignalSegment(source=SignalSource.SOCIAL_PROFILE, text=text.strip(), weight=weights.social_profile)
                    )
            post_count = sum(1 for post in evidence.social.posts if post and post.strip())
            following_count = len(evidence.social.following)

        structured = evidence.structured if evidence.structured and not evidence.structured.is_empty else None
        if structured:
            segments.append(
                SignalSegment(
                    source=SignalSource.STRUCTURED,
                    text=self._render_structured(structured),
                    weight=weights.structured,
                )
            )

        message_count = len(messages)
        if message_count < self.scoring.min_messages or not segments:
            logger.info(
                f"Rejecting evidence: {message_count} messages (minimum {self.scoring.min_messages}), "
                f"{len(segments)} segments"
            )
            raise InsufficientSignalError(observed=message_count, required=self.scoring.min_messages)

        logger.debug(
            f"Built corpus: {message_count} messages, {len(segments)} segments, "
            f"sources={sorted(s.value for s in {seg.source for seg in segments})}"
        )
        return SignalCorpus(
            segments=tuple(segments),
            message_count=message_count,
            structured=structured,
            post_count=post_count,
            following_count=following_count,
        )

    @staticmethod
    def _collect_messages(evidence: EvidenceInput) -> list[str]:
        if evidence.messages:
            return [m.strip() for m in evidence.messages if m and m.strip()]
        return split_messages(evidence.conversation_text or "")

    @staticmethod
    def _render_structured(structured: StructuredSignals) -> str:
        parts = []
        for record in structured.records:
            parts.append(" ".join(filter(None, [record.entity, record.action, *record.tags])))
        return "\n".join(parts)
