from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SupportType = Literal["encouragement", "practical", "program", "emergency"]
SUPPORT_TYPES: tuple[str, ...] = ("encouragement", "practical", "program", "emergency")


class EnhancementOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    enhanced_message: str = Field(default="", alias="enhancedMessage")
    suggestion: str = ""
    insights: list[str] = Field(default_factory=list)


class SponsorReplyOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    message: str = ""
    support_type: SupportType = Field(default="encouragement", alias="supportType")
    suggested_resources: list[str] = Field(default_factory=list, alias="suggestedResources")
