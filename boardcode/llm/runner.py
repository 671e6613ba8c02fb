"""Client for the external code generation service (OpenAI-compatible chat API)."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Callable, Optional, Sequence
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from ..config import LLMConfig


class GenerationError(RuntimeError):
    """Raised when the generation service fails or returns nothing."""


@dataclass
class GenerationRequest:
    """Represents a single generation call."""

    prompt: str
    system: Optional[str]
    model: str
    temperature: Optional[float]
    max_tokens: Optional[int]
    base_url: str
    api_key: Optional[str]
    request_timeout: Optional[float]


class GenerationClient:
    """Sends prompts to the configured chat completions endpoint."""

    DEFAULT_MODEL = "gpt-4o-mini"
    DEFAULT_BASE_URL = "https://api.openai.com/v1"
    ENV_MODEL_KEYS = ("BOARDCODE_LLM_MODEL", "OPENAI_MODEL")
    ENV_BASE_URL_KEYS = ("BOARDCODE_LLM_BASE_URL", "OPENAI_BASE_URL")
    ENV_API_KEY_KEYS = ("BOARDCODE_LLM_API_KEY", "OPENAI_API_KEY")

    def __init__(
        self,
        model: str | None = None,
        *,
        base_url: str | None = None,
        temperature: Optional[float] = 0.2,
        max_tokens: Optional[int] = None,
        api_key: str | None = None,
        request_timeout: Optional[float] = 120.0,
        transport: Callable[[GenerationRequest], str] | None = None,
    ) -> None:
        self.model = model or self._first_env_value(self.ENV_MODEL_KEYS) or self.DEFAULT_MODEL
        resolved_url = base_url or self._first_env_value(self.ENV_BASE_URL_KEYS) or self.DEFAULT_BASE_URL
        self.base_url = resolved_url.rstrip("/")
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.api_key = api_key or self._first_env_value(self.ENV_API_KEY_KEYS)
        self.request_timeout = request_timeout
        self._transport = transport or self._http_transport

    @classmethod
    def from_config(
        cls,
        config: LLMConfig | None,
        *,
        transport: Callable[[GenerationRequest], str] | None = None,
    ) -> "GenerationClient":
        if config is None:
            return cls(transport=transport)
        return cls(
            config.model,
            base_url=config.base_url,
            temperature=config.temperature if config.temperature is not None else 0.2,
            max_tokens=config.max_tokens,
            api_key=config.api_key,
            request_timeout=config.request_timeout or 120.0,
            transport=transport,
        )

    def generate(self, prompt: str, *, system: str | None = None) -> str:
        """Send the prompt and return the generated document text."""
        request = GenerationRequest(
            prompt=prompt,
            system=system,
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            base_url=self.base_url,
            api_key=self.api_key,
            request_timeout=self.request_timeout,
        )
        text = self._transport(request)
        if not text or not text.strip():
            raise GenerationError("No content generated.")
        return text

    @staticmethod
    def _http_transport(request: GenerationRequest) -> str:
        endpoint = f"{request.base_url}/chat/completions"
        payload: dict[str, object] = {
            "model": request.model,
            "messages": GenerationClient._build_messages(request.system, request.prompt),
        }
        if request.temperature is not None:
            payload["temperature"] = request.temperature
        if request.max_tokens is not None:
            payload["max_tokens"] = request.max_tokens

        data = json.dumps(payload).encode("utf-8")
        headers = {"Content-Type": "application/json"}
        if request.api_key:
            headers["Authorization"] = f"Bearer {request.api_key}"

        http_request = Request(endpoint, data=data, headers=headers, method="POST")
        timeout = request.request_timeout or 120.0

        try:
            with urlopen(http_request, timeout=timeout) as response:  # type: ignore[arg-type]
                raw = response.read()
        except HTTPError as exc:  # pragma: no cover - depends on runtime
            detail = exc.read().decode("utf-8", errors="ignore") if hasattr(exc, "read") else ""
            message = detail.strip() or exc.reason
            raise GenerationError(
                f"Generation service failed with status {exc.code}: {message}"
            ) from exc
        except URLError as exc:  # pragma: no cover - depends on runtime
            raise GenerationError(f"Generation service unreachable: {exc.reason}") from exc

        try:
            response_payload = json.loads(raw.decode("utf-8"))
        except json.JSONDecodeError as exc:
            raise GenerationError("Generation service returned invalid JSON") from exc

        return GenerationClient._extract_content(response_payload)

    @staticmethod
    def _build_messages(system: str | None, prompt: str) -> list[dict[str, str]]:
        messages: list[dict[str, str]] = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})
        return messages

    @staticmethod
    def _extract_content(payload: dict[str, object]) -> str:
        choices = payload.get("choices")
        if not isinstance(choices, list) or not choices:
            return ""
        first = choices[0]
        if not isinstance(first, dict):
            return ""
        message = first.get("message")
        if isinstance(message, dict):
            content = message.get("content")
            if isinstance(content, str):
                return content
        text = first.get("text")
        if isinstance(text, str):
            return text
        return ""

    @staticmethod
    def _first_env_value(keys: Sequence[str]) -> str | None:
        for key in keys:
            value = os.getenv(key)
            if value:
                return value
        return None
