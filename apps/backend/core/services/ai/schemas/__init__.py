from .definitions import SUPPORT_TYPES, EnhancementOutput, SponsorReplyOutput, SupportType

__all__ = [
    "EnhancementOutput",
    "SponsorReplyOutput",
    "SupportType",
    "SUPPORT_TYPES",
]
