from __future__ import annotations

from dataclasses import dataclass

from django.conf import settings
from openai import OpenAI


@dataclass
class AIResult:
    text: str
    model: str
    source: str
    status: str
    tokens_input: int | None = None
    tokens_output: int | None = None
    error_message: str = ""

    @property
    def ok(self) -> bool:
        return self.status == "success"


class OpenAIResponsesClient:
    """One request, one response. Never raises and never retries; failures come back as an ``AIResult``."""

    def __init__(self, api_key: str | None = None, *, timeout: float | None = None) -> None:
        self._key = (settings.OPENAI_API_KEY if api_key is None else api_key or "").strip()
        self._timeout = settings.OPENAI_TIMEOUT_SECONDS if timeout is None else timeout
        self._client = OpenAI(api_key=self._key, timeout=self._timeout, max_retries=0) if self._key else None

    @staticmethod
    def _supports_temperature(model: str) -> bool:
        # gpt-5 family can reject temperature depending on account/model version.
        return not model.startswith("gpt-5")

    def _complete(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
        json_mode: bool,
    ) -> AIResult:
        if not self._client:
            return AIResult(text="", model=model, source="no_api_key", status="fallback")
        payload = {
            "model": model,
            "instructions": system_prompt,
            "input": user_prompt,
        }
        if json_mode:
            payload["text"] = {"format": {"type": "json_object"}}
        if self._supports_temperature(model):
            payload["temperature"] = temperature
        try:
            resp = self._client.responses.create(**payload)
        except Exception as exc:
            return AIResult(text="", model=model, source="provider_error", status="failed", error_message=str(exc))

        text = (getattr(resp, "output_text", None) or "").strip()
        usage = getattr(resp, "usage", None)
        tokens_input = getattr(usage, "input_tokens", None) if usage else None
        tokens_output = getattr(usage, "output_tokens", None) if usage else None
        if not text:
            return AIResult(
                text="",
                model=model,
                source="empty_response",
                status="failed",
                tokens_input=tokens_input,
                tokens_output=tokens_output,
                error_message="provider returned no output text",
            )
        return AIResult(
            text=text,
            model=model,
            source="openai",
            status="success",
            tokens_input=tokens_input,
            tokens_output=tokens_output,
        )

    def complete_text(self, *, model: str, system_prompt: str, user_prompt: str, temperature: float = 0.4) -> AIResult:
        return self._complete(
            model=model,
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            temperature=temperature,
            json_mode=False,
        )

    def complete_json(self, *, model: str, system_prompt: str, user_prompt: str, temperature: float = 0.2) -> AIResult:
        """Ask for a single JSON object. The text is returned unparsed; callers own the contract."""
        return self._complete(
            model=model,
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            temperature=temperature,
            json_mode=True,
        )
