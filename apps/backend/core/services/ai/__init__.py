from .engine import analyze_progress, enhance_message
from .sponsor_chat import SponsorChatResponder
from .structured import StructuredResponseGenerator, StructuredResult

__all__ = [
    "analyze_progress",
    "enhance_message",
    "SponsorChatResponder",
    "StructuredResponseGenerator",
    "StructuredResult",
]
