"""Remote-first summary: ask the LLM endpoint, fall back to the local summarizer."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from .config import Settings, get_settings
from .datatypes import SummaryResult
from .preprocessing import normalize_whitespace
from .summarize import summarize

LOG = logging.getLogger(__name__)


class RemoteSummaryError(RuntimeError):
    """Raised when the summary endpoint answers with an error or an empty summary."""


def _error_message(resp: httpx.Response) -> str:
    try:
        data = resp.json()
    except ValueError:
        data = {}
    if not isinstance(data, dict):
        data = {}
    message = data.get("error") or f"Request failed ({resp.status_code})"
    details = data.get("details")
    if details:
        message = f"{message}\n{details}"
    return message


def summarize_remote(
    text: str,
    provider: Optional[str] = None,
    settings: Optional[Settings] = None,
    client: Optional[httpx.Client] = None,
) -> str:
    """POST ``{text, provider}`` to the summary endpoint and return the trimmed summary.

    Transport failures (including timeouts) surface as ``httpx.HTTPError``.
    """
    settings = settings or get_settings()
    payload = {"text": text, "provider": provider or settings.provider}

    owns_client = client is None
    client = client or httpx.Client(timeout=settings.timeout_seconds)
    try:
        resp = client.post(settings.api_url, json=payload, timeout=settings.timeout_seconds)
    finally:
        if owns_client:
            client.close()

    if resp.is_error:
        raise RemoteSummaryError(_error_message(resp))

    try:
        data = resp.json()
    except ValueError:
        data = {}
    summary = data.get("summary") if isinstance(data, dict) else None
    summary = summary.strip() if isinstance(summary, str) else ""
    if not summary:
        raise RemoteSummaryError("Empty summary returned.")
    return summary


def summarize_with_fallback(
    text: str,
    provider: Optional[str] = None,
    settings: Optional[Settings] = None,
    client: Optional[httpx.Client] = None,
) -> SummaryResult:
    cleaned = normalize_whitespace(text) if isinstance(text, str) else ""
    if not cleaned:
        return SummaryResult(summary="", source="none")

    settings = settings or get_settings()
    provider = provider or settings.provider
    try:
        summary = summarize_remote(cleaned, provider=provider, settings=settings, client=client)
    except (RemoteSummaryError, httpx.HTTPError, httpx.InvalidURL) as exc:
        LOG.warning("remote summary failed, using local fallback: %s", exc, extra={"provider": provider})
        return SummaryResult(summary=summarize(cleaned), source="local", error=str(exc) or type(exc).__name__)

    LOG.info("remote summary received", extra={"provider": provider, "source": "remote"})
    return SummaryResult(summary=summary, source="remote")
