from __future__ import annotations

from typing import Any, Iterable

from core.models import Message, ProgressEntry


def history_lines(messages: Iterable[Message]) -> list[str]:
    return [f"{m.sender_id}: {m.content}" for m in messages]


def history_snapshot(messages: Iterable[Message]) -> dict[str, Any]:
    return {"messageHistory": [{"id": m.id, "content": m.content} for m in messages]}


def progress_entry_line(entry: ProgressEntry) -> str:
    parts = [f"{entry.date.date().isoformat()} mood={entry.mood}/10"]
    if entry.gratitude_list:
        parts.append("grateful for: " + ", ".join(str(item) for item in entry.gratitude_list))
    if entry.challenges_faced:
        parts.append(f"challenges: {entry.challenges_faced}")
    if entry.coping_strategies:
        parts.append(f"coping: {entry.coping_strategies}")
    if entry.next_steps:
        parts.append(f"next steps: {entry.next_steps}")
    return "; ".join(parts)
