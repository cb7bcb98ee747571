from __future__ import annotations

import logging
import random
from typing import Sequence

from .fallbacks import SPONSOR_FALLBACK_REPLIES
from .prompts import SPONSOR_PERSONA_PROMPT
from .schemas import SponsorReplyOutput
from .structured import StructuredResponseGenerator

logger = logging.getLogger(__name__)


class SponsorChatResponder:
    """Single-turn sponsor persona. Replies that fail the contract are replaced from a fixed pool."""

    def __init__(
        self,
        generator: StructuredResponseGenerator | None = None,
        *,
        persona_prompt: str = SPONSOR_PERSONA_PROMPT,
        fallback_pool: Sequence[SponsorReplyOutput] = SPONSOR_FALLBACK_REPLIES,
        rng: random.Random | None = None,
    ) -> None:
        if not fallback_pool:
            raise ValueError("fallback_pool must not be empty")
        self._generator = generator or StructuredResponseGenerator()
        self._persona_prompt = persona_prompt
        self._fallback_pool = tuple(fallback_pool)
        self._rng = rng or random.Random()

    def fallback_reply(self) -> SponsorReplyOutput:
        return self._rng.choice(self._fallback_pool).model_copy(deep=True)

    def generate_reply(self, user_message: str) -> SponsorReplyOutput:
        result = self._generator.generate(
            feature="sponsor_chat",
            system_prompt=self._persona_prompt,
            user_content=user_message,
            schema=SponsorReplyOutput,
            fallback=self.fallback_reply,
        )
        if result.used_fallback:
            return result.value
        # A reply without text or with an unknown category is not usable as-is.
        invalid = {"message", "supportType"}.intersection(result.defaulted)
        if invalid or not result.value.message.strip():
            logger.warning("[ai:sponsor_chat] fallback reason=invalid_fields fields=%s", ",".join(sorted(invalid)) or "message")
            return self.fallback_reply()
        return result.value
