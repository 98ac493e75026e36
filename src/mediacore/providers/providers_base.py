"""Shared plumbing for provider drivers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from ..exceptions import ConfigurationError, ParseError, UpstreamError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ProviderDriver:
    """Base for drivers calling an OpenAI-compatible HTTP API."""

    api_key: str | None
    timeout_seconds: float = 60.0
    log: logging.Logger = field(default_factory=lambda: logger)

    def _require_credential(self) -> str:
        if not self.api_key:
            raise ConfigurationError()
        return self.api_key

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._require_credential()}"}

    async def _post(self, url: str, **kwargs: Any) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
            return await client.post(url, **kwargs)


def ensure_success(response: httpx.Response, *, provider: str) -> None:
    """Raise :class:`UpstreamError` for any non-2xx response."""

    if 200 <= response.status_code < 300:
        return
    raise UpstreamError(provider, response.status_code, response.text)


def parse_json(response: httpx.Response, *, provider: str) -> dict[str, Any]:
    try:
        data = response.json()
    except ValueError as exc:
        raise ParseError(f"{provider} response is not valid JSON") from exc
    if not isinstance(data, dict):
        raise ParseError(f"{provider} response has unexpected shape")
    return data


def describe_error(exc: BaseException) -> str:
    return str(exc) or exc.__class__.__name__


__all__ = ["ProviderDriver", "describe_error", "ensure_success", "parse_json"]
