"""
Structured-response generation with a fixed output contract.

A call goes to the provider once. Whatever comes back, the caller receives an
instance of the requested pydantic schema:

- provider failure, missing key or empty output  -> the caller's fallback
- text that is not a single JSON object           -> the caller's fallback
- a JSON object with absent or mistyped fields    -> valid fields kept, the
  rest reset to the schema default ("partial")

Field checks are strict and per field, so ``"insights": "x"`` resets only
``insights`` and never the whole response.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Callable

from pydantic import BaseModel, TypeAdapter, ValidationError

from .client import AIResult, OpenAIResponsesClient
from .model_router import route_model

logger = logging.getLogger(__name__)

STATUS_SUCCESS = "success"
STATUS_PARTIAL = "partial"
STATUS_FALLBACK = "fallback"


@dataclass
class StructuredResult:
    value: BaseModel
    status: str
    reason: str = ""
    raw_text: str = ""
    defaulted: tuple[str, ...] = field(default_factory=tuple)
    model: str = ""
    tokens_input: int | None = None
    tokens_output: int | None = None

    @property
    def used_fallback(self) -> bool:
        return self.status == STATUS_FALLBACK


@lru_cache(maxsize=None)
def _adapter(annotation: Any) -> TypeAdapter:
    return TypeAdapter(annotation)


def fill_fields(schema: type[BaseModel], payload: dict[str, Any]) -> tuple[BaseModel, tuple[str, ...]]:
    """Build ``schema`` from ``payload`` keeping each valid field and defaulting the rest.

    Returns the instance and the wire names (aliases) of the defaulted fields.
    """
    values: dict[str, Any] = {}
    defaulted: list[str] = []
    for name, info in schema.model_fields.items():
        key = info.alias or name
        if key in payload:
            try:
                values[name] = _adapter(info.annotation).validate_python(payload[key], strict=True)
                continue
            except ValidationError:
                pass
        values[name] = info.get_default(call_default_factory=True)
        defaulted.append(key)
    return schema.model_validate(values), tuple(defaulted)


class StructuredResponseGenerator:
    def __init__(self, client: OpenAIResponsesClient | None = None) -> None:
        self._client = client or OpenAIResponsesClient()

    def _fallback(
        self,
        *,
        feature: str,
        reason: str,
        fallback: Callable[[], BaseModel],
        response: AIResult,
    ) -> StructuredResult:
        logger.warning(
            "[ai:%s] fallback reason=%s model=%s error=%s",
            feature,
            reason,
            response.model,
            (response.error_message or "")[:300],
        )
        return StructuredResult(
            value=fallback(),
            status=STATUS_FALLBACK,
            reason=reason,
            raw_text=response.text,
            model=response.model,
            tokens_input=response.tokens_input,
            tokens_output=response.tokens_output,
        )

    def generate(
        self,
        *,
        feature: str,
        system_prompt: str,
        user_content: str,
        schema: type[BaseModel],
        fallback: Callable[[], BaseModel],
    ) -> StructuredResult:
        route = route_model(feature)
        response = self._client.complete_json(
            model=route.model,
            system_prompt=system_prompt,
            user_prompt=user_content,
            temperature=route.temperature,
        )
        if not response.ok:
            return self._fallback(feature=feature, reason=response.source, fallback=fallback, response=response)

        try:
            payload = json.loads(response.text)
        except (ValueError, RecursionError):
            return self._fallback(feature=feature, reason="invalid_json", fallback=fallback, response=response)
        if not isinstance(payload, dict):
            return self._fallback(feature=feature, reason="not_an_object", fallback=fallback, response=response)

        value, defaulted = fill_fields(schema, payload)
        if defaulted:
            logger.info("[ai:%s] partial response defaulted=%s model=%s", feature, ",".join(defaulted), response.model)
        return StructuredResult(
            value=value,
            status=STATUS_PARTIAL if defaulted else STATUS_SUCCESS,
            raw_text=response.text,
            defaulted=defaulted,
            model=response.model,
            tokens_input=response.tokens_input,
            tokens_output=response.tokens_output,
        )
