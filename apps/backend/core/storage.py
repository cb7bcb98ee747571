"""
Storage collaborator: plain CRUD over the ORM, no business rules.

Services receive a storage object instead of touching models directly so the
messaging pipeline can be exercised against a stub in tests.
"""

from __future__ import annotations

from typing import Any

from django.contrib.auth.models import User
from django.db import transaction

from .models import AIInteraction, MemberProfile, Message, ProgressEntry


class DatabaseStorage:
    # Users

    def get_user(self, user_id: int) -> User | None:
        return User.objects.select_related("member_profile").filter(id=user_id).first()

    def get_user_by_username(self, username: str) -> User | None:
        return User.objects.select_related("member_profile").filter(username=username).first()

    @transaction.atomic
    def create_user(self, *, username: str, email: str, password: str, role: str, **profile_fields: Any) -> User:
        user = User.objects.create_user(username=username, email=email, password=password)
        MemberProfile.objects.create(user=user, role=role, **profile_fields)
        return self.get_user(user.id)

    def ensure_superuser(self, *, username: str, email: str, password: str) -> User:
        existing = self.get_user_by_username(username)
        if existing is not None:
            return existing
        return User.objects.create_superuser(username=username, email=email, password=password)

    def update_user(self, user_id: int, **profile_fields: Any) -> User:
        updated = MemberProfile.objects.filter(user_id=user_id).update(**profile_fields)
        if not updated:
            raise MemberProfile.DoesNotExist(f"User not found: {user_id}")
        return self.get_user(user_id)

    # Messages

    def get_messages(self, relationship_id: int) -> list[Message]:
        return list(Message.objects.filter(relationship_id=relationship_id).order_by("created_at", "id"))

    def get_recent_messages(self, relationship_id: int, limit: int) -> list[Message]:
        return list(Message.objects.filter(relationship_id=relationship_id).order_by("-created_at", "-id")[:limit])

    def create_message(
        self,
        *,
        relationship_id: int,
        sender_id: int,
        content: str,
        ai_enhanced: bool = False,
        ai_suggestion: str | None = None,
    ) -> Message:
        return Message.objects.create(
            relationship_id=relationship_id,
            sender_id=sender_id,
            content=content,
            ai_enhanced=ai_enhanced,
            ai_suggestion=ai_suggestion,
        )

    # Progress

    def get_progress_entries(self, user_id: int) -> list[ProgressEntry]:
        return list(ProgressEntry.objects.filter(user_id=user_id).order_by("date", "id"))

    def create_progress_entry(self, *, user_id: int, **fields: Any) -> ProgressEntry:
        return ProgressEntry.objects.create(user_id=user_id, **fields)

    def update_progress_insights(self, entry_id: int, insights: str) -> None:
        ProgressEntry.objects.filter(id=entry_id).update(ai_insights=insights)

    # AI audit

    def create_ai_interaction(
        self,
        *,
        user_id: int,
        prompt: str,
        response: str,
        context: dict[str, Any],
        message_id: int | None = None,
        mode: str = "message_enhancement",
        model: str = "",
        source: str = "openai",
        tokens_input: int | None = None,
        tokens_output: int | None = None,
    ) -> AIInteraction:
        return AIInteraction.objects.create(
            user_id=user_id,
            message_id=message_id,
            mode=mode,
            model=model,
            source=source,
            prompt=prompt,
            response=response,
            context=context,
            tokens_input=tokens_input,
            tokens_output=tokens_output,
        )


storage = DatabaseStorage()
