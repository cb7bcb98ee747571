from __future__ import annotations

import logging
from typing import Sequence

from core.models import Message

from .client import OpenAIResponsesClient
from .context import history_lines
from .fallbacks import ENHANCEMENT_FALLBACK_SUGGESTION, PROGRESS_FALLBACK_TEXT
from .model_router import route_model
from .prompts import (
    ENHANCEMENT_SYSTEM_PROMPT,
    PROGRESS_SYSTEM_PROMPT,
    enhancement_user_prompt,
    progress_user_prompt,
)
from .schemas import EnhancementOutput
from .structured import StructuredResponseGenerator, StructuredResult

logger = logging.getLogger(__name__)


def enhance_message(
    content: str,
    *,
    user_role: str,
    history: Sequence[Message],
    generator: StructuredResponseGenerator | None = None,
) -> StructuredResult:
    """Ask for an enhanced wording, a suggestion and insights; on failure echo ``content`` back."""
    generator = generator or StructuredResponseGenerator()
    return generator.generate(
        feature="message_enhancement",
        system_prompt=ENHANCEMENT_SYSTEM_PROMPT,
        user_content=enhancement_user_prompt(user_role, content, history_lines(history)),
        schema=EnhancementOutput,
        fallback=lambda: EnhancementOutput(
            enhanced_message=content,
            suggestion=ENHANCEMENT_FALLBACK_SUGGESTION,
            insights=[],
        ),
    )


def analyze_progress(entries: Sequence[str], *, client: OpenAIResponsesClient | None = None) -> str:
    """Summarize progress-log entries (oldest first) as supportive free text."""
    if not entries:
        return PROGRESS_FALLBACK_TEXT
    route = route_model("progress_analysis")
    response = (client or OpenAIResponsesClient()).complete_text(
        model=route.model,
        system_prompt=PROGRESS_SYSTEM_PROMPT,
        user_prompt=progress_user_prompt(list(entries)),
        temperature=route.temperature,
    )
    if not response.ok:
        logger.warning(
            "[ai:progress_analysis] fallback reason=%s model=%s error=%s",
            response.source,
            response.model,
            (response.error_message or "")[:300],
        )
        return PROGRESS_FALLBACK_TEXT
    return response.text
