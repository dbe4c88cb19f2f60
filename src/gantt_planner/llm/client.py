# src/gantt_planner/llm/client.py

from __future__ import annotations

import logging
import os
import time
from typing import Any, Dict, Iterable, List, Optional

import httpx
import openai
from openai import OpenAI

from ..core.ports import ChatMessage

logger = logging.getLogger(__name__)

_BAD_MODELS: dict[str, float] = {}  # model -> retry_at (monotonic)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    s = raw.strip()
    if not s:
        return default
    try:
        return float(s)
    except ValueError:
        return default


def _timeouts_from_env() -> dict[str, float]:
    """
    Timeouts are configurable via env so a slow model cannot hold the
    "generating" flag forever.

    Defaults:
    - connect timeout: 5s
    - read timeout: 90s (schedules are long JSON documents)
    - first token timeout: 60s
    """
    first_token = _env_float("PLANNER_LLM_FIRST_TOKEN_TIMEOUT_SECONDS", 60.0)
    read_timeout = _env_float("PLANNER_LLM_READ_TIMEOUT_SECONDS", 90.0)
    connect_timeout = _env_float("PLANNER_LLM_CONNECT_TIMEOUT_SECONDS", 5.0)

    read_timeout = max(read_timeout, first_token)

    return {
        "first_token": first_token,
        "read": read_timeout,
        "connect": connect_timeout,
    }


def _is_auth_error(exc: Exception) -> bool:
    if isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return True
    return exc.__class__.__name__ in {"UnauthorizedError"}


def _is_rate_limit_error(exc: Exception) -> bool:
    if isinstance(exc, openai.RateLimitError):
        return True
    return exc.__class__.__name__ in {"TooManyRequestsError"}


def _is_connection_error(exc: Exception) -> bool:
    if isinstance(exc, (openai.APIConnectionError, httpx.TimeoutException)):
        return True
    return isinstance(exc, TimeoutError)


def _is_not_found_error(exc: Exception) -> bool:
    return isinstance(exc, openai.NotFoundError)


def _make_timeout(connect_s: float, read_s: float) -> httpx.Timeout:
    return httpx.Timeout(connect=connect_s, read=read_s, write=10.0, pool=connect_s)


def friendly_llm_error_message(err: Exception) -> str:
    msg = str(err).strip() or "LLM error."
    if "LLM API key is not set" in msg:
        return "LLM is not configured (missing API key). Set PLANNER_OPENROUTER_API_KEY in .env."
    if "LLM model list is empty" in msg:
        return "LLM is not configured (no models). Set PLANNER_LLM_MODELS in .env."
    if "LLM base URL is not set" in msg:
        return "LLM is not configured (missing base URL). Set PLANNER_OPENROUTER_BASE_URL in .env."
    return msg


def _close_stream(stream: Any) -> None:
    close = getattr(stream, "close", None)
    if callable(close):
        try:
            close()
        except Exception:
            logger.debug("LLM: stream close failed", exc_info=True)


class OpenRouterLLMClient:
    """
    OpenAI-compatible streaming client with ordered model fallback.

    - Tries models in the order from settings.llm_models.
    - No first content token within the first-token timeout -> next model.
    - 404 (model not available) -> mark the model bad for an hour, next model.
    - Rate limit / network issues -> next model.
    - Auth issues -> fail fast.
    """

    def __init__(self, settings: Any) -> None:
        api_key = getattr(settings, "openrouter_api_key", None)
        base_url = getattr(settings, "openrouter_base_url", "") or ""

        if not api_key or not str(api_key).strip():
            raise RuntimeError("LLM API key is not set. Set PLANNER_OPENROUTER_API_KEY in your .env.")
        if not base_url.strip():
            raise RuntimeError("LLM base URL is not set. Set PLANNER_OPENROUTER_BASE_URL in your .env.")

        self._models: List[str] = [m.strip() for m in (getattr(settings, "llm_models", []) or []) if m.strip()]
        self._headers: Dict[str, str] = dict(getattr(settings, "extra_headers", {}) or {})
        self._temperature = float(getattr(settings, "llm_temperature", 0.4))

        self._timeouts = _timeouts_from_env()
        self._timeout = _make_timeout(self._timeouts["connect"], self._timeouts["read"])

        # Automatic retries are disabled to allow quick fallback across models.
        self._client = OpenAI(
            base_url=str(base_url),
            api_key=str(api_key),
            timeout=self._timeout,
            max_retries=0,
        )

    def _create_stream(
        self,
        *,
        model: str,
        messages: list[ChatMessage],
        response_format: dict[str, Any] | None,
    ) -> Any:
        kwargs: dict[str, Any] = {
            "model": model,
            "stream": True,
            "messages": messages,
            "temperature": self._temperature,
            "extra_headers": self._headers or None,
            "timeout": self._timeout,
        }
        if response_format is not None:
            kwargs["response_format"] = response_format
        return self._client.chat.completions.create(**kwargs)

    def stream_chat(
        self,
        messages: list[ChatMessage],
        system_prompt: str,
        *,
        response_format: dict[str, Any] | None = None,
    ) -> Iterable[str]:
        if not self._models:
            raise RuntimeError("LLM model list is empty. Set PLANNER_LLM_MODELS in your .env.")

        first_token_timeout = float(self._timeouts["first_token"])
        last_error: Optional[Exception] = None
        now = time.monotonic()

        for model in self._models:
            retry_at = _BAD_MODELS.get(model)
            if retry_at is not None and retry_at > now:
                continue

            logger.info(
                "LLM: trying model=%s (first_token_timeout=%.1fs, read_timeout=%.1fs)",
                model,
                first_token_timeout,
                float(self._timeouts["read"]),
            )
            t0 = time.monotonic()
            deadline = t0 + first_token_timeout

            stream = None
            used_any = False
            timed_out = False

            try:
                stream = self._create_stream(
                    model=model,
                    messages=[{"role": "system", "content": system_prompt}, *messages],
                    response_format=response_format,
                )

                for chunk in stream:
                    if not used_any and time.monotonic() > deadline:
                        last_error = TimeoutError(f"First token timeout on model: {model}")
                        timed_out = True
                        logger.info("LLM: first token timeout on model=%s -> trying next", model)
                        break

                    content = None
                    if chunk.choices:
                        delta = getattr(chunk.choices[0], "delta", None)
                        content = getattr(delta, "content", None) if delta is not None else None

                    if content:
                        if not used_any:
                            logger.info("LLM: first token from model=%s (%.2fs)", model, time.monotonic() - t0)
                        used_any = True
                        yield content

                if used_any:
                    logger.debug("LLM: completed with model=%s", model)
                    return

                if not timed_out:
                    last_error = RuntimeError(f"Model returned no content: {model}")

            except Exception as e:
                last_error = e

                # Content already went to the caller; another model would append a second reply.
                if used_any:
                    raise RuntimeError(f"LLM stream broke mid-reply on model={model}") from e

                if _is_auth_error(e):
                    raise RuntimeError(
                        "LLM authentication failed. Check your API key (PLANNER_OPENROUTER_API_KEY)."
                    ) from e

                if _is_not_found_error(e):
                    _BAD_MODELS[model] = time.monotonic() + 3600.0  # 1 hour
                    logger.info("LLM: model not available (404): %s", model)
                    continue

                if _is_rate_limit_error(e):
                    logger.info("LLM: rate-limited on model=%s, trying next", model)
                    continue

                if _is_connection_error(e):
                    logger.info("LLM: network/timeout error on model=%s, trying next", model)
                    continue

                logger.info("LLM: error on model=%s (%s), trying next", model, e.__class__.__name__)
                continue

            finally:
                if stream is not None:
                    _close_stream(stream)

        if last_error is not None:
            if _is_rate_limit_error(last_error):
                raise RuntimeError("LLM is rate-limited. Try again later.") from last_error
            if _is_connection_error(last_error):
                raise RuntimeError("LLM network/timeout error. Try again later or change models.") from last_error
            raise RuntimeError("All LLM models failed.") from last_error

        raise RuntimeError("All LLM models failed.")
