from __future__ import annotations

from .schemas import SponsorReplyOutput

ENHANCEMENT_FALLBACK_SUGGESTION = "Unable to provide AI suggestions at this time."
PROGRESS_FALLBACK_TEXT = "Unable to analyze progress at this time."

SPONSOR_FALLBACK_REPLIES: tuple[SponsorReplyOutput, ...] = (
    SponsorReplyOutput(
        message=(
            "When I'm struggling, I often turn to page 86 in the Big Book. It suggests starting our day by asking "
            "God to direct our thinking. Would you like to explore what the Big Book says about handling difficult moments?"
        ),
        support_type="program",
        suggested_resources=["Big Book p.86-87", "Morning Meditation", "Daily Inventory"],
    ),
    SponsorReplyOutput(
        message=(
            "Many sponsors suggest reading the 3rd Step Prayer from the 12 & 12 when we're feeling overwhelmed. "
            "It's helped me find peace in difficult times. Would you like to look at that prayer together?"
        ),
        support_type="program",
        suggested_resources=["3rd Step Prayer", "12 & 12", "Surrender Practice"],
    ),
    SponsorReplyOutput(
        message=(
            "The Big Book's chapter on acceptance (pages 417-419) has been a lifesaver for me. Sometimes when I'm "
            "angry or frustrated, reading about acceptance helps me find peace. Would you like to explore what the "
            "book says about acceptance?"
        ),
        support_type="program",
        suggested_resources=["Acceptance Reading", "Big Book p.417", "Daily Reflection"],
    ),
)
