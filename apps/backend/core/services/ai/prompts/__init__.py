from .system_policy import ENHANCEMENT_SYSTEM_PROMPT, PROGRESS_SYSTEM_PROMPT, SPONSOR_PERSONA_PROMPT


def enhancement_user_prompt(user_role: str, message: str, history_lines: list[str]) -> str:
    return f"User role: {user_role}\nMessage: {message}\nRecent context: " + "\n".join(history_lines)


def progress_user_prompt(entry_lines: list[str]) -> str:
    return "Recent progress entries:\n" + "\n".join(entry_lines)


__all__ = [
    "ENHANCEMENT_SYSTEM_PROMPT",
    "PROGRESS_SYSTEM_PROMPT",
    "SPONSOR_PERSONA_PROMPT",
    "enhancement_user_prompt",
    "progress_user_prompt",
]
