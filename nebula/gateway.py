"""AI enhancement gateway backed by the Gemini text-generation API.

``EnhancementGateway`` turns a note's content and an ``AIAction`` into a
single ``generateContent`` call. It validates input and credentials before any
network I/O and maps every failure of the call itself to
``GenerationFailedError``. Title generation is best-effort and never raises.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Protocol

import httpx

from .config import Settings
from .errors import CredentialMissingError, GenerationFailedError, InputEmptyError
from .metrics import AI_DURATION, AI_REQUESTS
from .models import AIAction
from .prompts import build_prompt, build_title_prompt

logger = logging.getLogger(__name__)

EMPTY_RESULT_FALLBACK = "Data corrupted. No response generated."
TITLE_FALLBACK = "Untitled Log"
_TITLE_ACTION = "TITLE"


class TextGenerator(Protocol):
    """External text-generation service."""

    async def generate(self, model: str, prompt: str) -> str: ...


def _extract_text(data: dict[str, Any]) -> str:
    """Concatenate the text parts of the first candidate in a Gemini response."""
    candidates = data.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(p.get("text", "") for p in parts if isinstance(p, dict))


def _error_detail(response: httpx.Response) -> str:
    """Pull ``error.message`` out of an error response, else its raw text."""
    try:
        data = response.json()
    except ValueError:
        return response.text.strip()[:200]
    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    if isinstance(error, str):
        return error
    return response.text.strip()[:200]


class GeminiClient:
    """Minimal async client for the Gemini ``generateContent`` endpoint."""

    def __init__(self, api_key: str, base_url: str, timeout: float) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def generate(self, model: str, prompt: str) -> str:
        """Send ``prompt`` to ``model`` and return the generated text.

        Raises:
            httpx.HTTPError: on transport failures or non-2xx responses.
        """
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            resp = await client.post(
                f"{self._base_url}/models/{model}:generateContent",
                headers={"x-goog-api-key": self._api_key},
                json={"contents": [{"parts": [{"text": prompt}]}]},
            )
            resp.raise_for_status()
            return _extract_text(resp.json())


class EnhancementGateway:
    """Stateless mapping of (content, action, title) to generated text."""

    def __init__(self, settings: Settings, generator: TextGenerator | None = None) -> None:
        self.settings = settings
        self._generator = generator

    def _client(self) -> TextGenerator:
        """Return the text generator, failing fast when no key is configured."""
        if not self.settings.ai_enabled:
            logger.warning("API key is not set — neural link offline")
            raise CredentialMissingError()
        if self._generator is None:
            self._generator = GeminiClient(
                api_key=self.settings.api_key or "",
                base_url=self.settings.gemini_base_url,
                timeout=self.settings.ai_timeout,
            )
        return self._generator

    async def _call(self, label: str, prompt: str) -> str:
        """Issue exactly one bounded generation request."""
        generator = self._client()
        timeout = self.settings.ai_timeout
        start = time.perf_counter()
        try:
            return await asyncio.wait_for(
                generator.generate(self.settings.gemini_model, prompt),
                timeout=timeout,
            )
        except (TimeoutError, httpx.TimeoutException) as exc:
            logger.error("Generation timed out after %.0fs", timeout)
            raise GenerationFailedError(
                f"Neural uplink failed: request timed out after {timeout:g}s"
            ) from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            detail = _error_detail(exc.response)
            logger.error("Generation service returned %d: %s", status, detail)
            message = f"Neural uplink failed: service returned {status}"
            raise GenerationFailedError(
                f"{message} ({detail})" if detail else message
            ) from exc
        except httpx.ConnectError as exc:
            logger.error("Cannot connect to generation service: %s", exc)
            raise GenerationFailedError(f"Neural uplink failed: {exc}") from exc
        except Exception as exc:
            logger.error("Generation request failed: %s", exc)
            raise GenerationFailedError(
                f"Neural uplink failed: {str(exc) or type(exc).__name__}"
            ) from exc
        finally:
            AI_DURATION.labels(action=label).observe(time.perf_counter() - start)

    async def enhance(self, content: str, action: AIAction, title: str | None = None) -> str:
        """Transform ``content`` according to ``action``.

        Raises:
            InputEmptyError: if ``content`` is blank.
            CredentialMissingError: if no API key is configured.
            GenerationFailedError: if the service call fails or times out.
        """
        action = AIAction(action)
        if not content or not content.strip():
            AI_REQUESTS.labels(action=action.value, status="rejected").inc()
            raise InputEmptyError()

        logger.info(
            "Enhance invoked — action=%s, content_length=%d", action.value, len(content)
        )
        try:
            text = await self._call(action.value, build_prompt(action, content, title))
        except CredentialMissingError:
            AI_REQUESTS.labels(action=action.value, status="offline").inc()
            raise
        except GenerationFailedError:
            AI_REQUESTS.labels(action=action.value, status="failed").inc()
            raise

        if not text or not text.strip():
            AI_REQUESTS.labels(action=action.value, status="empty").inc()
            return EMPTY_RESULT_FALLBACK
        AI_REQUESTS.labels(action=action.value, status="success").inc()
        return text

    async def generate_title(self, content: str) -> str:
        """Suggest a short title for ``content``; never raises."""
        if not content or not content.strip():
            return TITLE_FALLBACK
        try:
            text = await self._call(_TITLE_ACTION, build_title_prompt(content))
        except (CredentialMissingError, GenerationFailedError) as exc:
            logger.info("Title generation unavailable: %s", exc)
            AI_REQUESTS.labels(action=_TITLE_ACTION, status="failed").inc()
            return TITLE_FALLBACK

        title = (text or "").strip().replace('"', "").replace("'", "").strip()
        AI_REQUESTS.labels(action=_TITLE_ACTION, status="success" if title else "empty").inc()
        return title or TITLE_FALLBACK
