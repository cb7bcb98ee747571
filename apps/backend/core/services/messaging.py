from __future__ import annotations

import logging

from django.contrib.auth.models import User

from core.exceptions import MessageDeliveryError
from core.models import Message
from core.services.ai import StructuredResponseGenerator, enhance_message
from core.services.ai.context import history_snapshot
from core.storage import DatabaseStorage, storage as default_storage

logger = logging.getLogger(__name__)

HISTORY_WINDOW = 3


def _role_of(user: User | None) -> str:
    profile = getattr(user, "member_profile", None) if user is not None else None
    return profile.role if profile else "unknown"


class MessagingService:
    """Stores relationship messages, optionally attaching an AI suggestion.

    The user's own words are always what gets stored. Enhancement can only add
    ``ai_suggestion`` and an audit row; it can never block the message itself.
    """

    def __init__(self, storage: DatabaseStorage | None = None, generator: StructuredResponseGenerator | None = None) -> None:
        self._storage = storage or default_storage
        self._generator = generator

    def send_message(self, relationship_id: int, sender_id: int, content: str, use_ai: bool = True) -> Message:
        ai_enhanced, ai_suggestion = False, None
        if use_ai:
            ai_enhanced, ai_suggestion = self._enhance(relationship_id, sender_id, content)
        try:
            return self._storage.create_message(
                relationship_id=relationship_id,
                sender_id=sender_id,
                content=content,
                ai_enhanced=ai_enhanced,
                ai_suggestion=ai_suggestion,
            )
        except Exception as exc:
            logger.exception("[messaging] persist failed relationship=%s sender=%s", relationship_id, sender_id)
            raise MessageDeliveryError() from exc

    def _enhance(self, relationship_id: int, sender_id: int, content: str) -> tuple[bool, str | None]:
        try:
            sender = self._storage.get_user(sender_id)
            history = self._storage.get_recent_messages(relationship_id, HISTORY_WINDOW)
            result = enhance_message(
                content,
                user_role=_role_of(sender),
                history=history,
                generator=self._generator or StructuredResponseGenerator(),
            )
            enhanced = result.value.enhanced_message
            if result.used_fallback or not enhanced or enhanced == content:
                return False, None

            self._storage.create_ai_interaction(
                user_id=sender_id,
                prompt=content,
                response=result.value.model_dump_json(by_alias=True),
                context=history_snapshot(history),
                model=result.model,
                tokens_input=result.tokens_input,
                tokens_output=result.tokens_output,
            )
            return True, result.value.suggestion or None
        except Exception:
            # Without its audit row a message must not be flagged as enhanced.
            logger.exception("[messaging] enhancement skipped relationship=%s sender=%s", relationship_id, sender_id)
            return False, None
