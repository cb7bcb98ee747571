from __future__ import annotations

import os
from dataclasses import dataclass

from django.conf import settings


@dataclass(frozen=True)
class RouteDecision:
    model: str
    temperature: float


_TEMPERATURES = {
    "message_enhancement": 0.2,
    "sponsor_chat": 0.7,
    "progress_analysis": 0.4,
}


def route_model(feature: str) -> RouteDecision:
    override = os.getenv(f"OPENAI_MODEL_{feature.upper()}", "").strip()
    return RouteDecision(
        model=override or settings.OPENAI_MODEL,
        temperature=_TEMPERATURES.get(feature, 0.3),
    )
