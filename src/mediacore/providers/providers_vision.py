"""Vision driver describing images through a chat-completion endpoint."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any

import httpx

from ..exceptions import MediaError, ParseError
from ..media.media_models import AnalysisResult
from ..media.mime import resolve_mime_type
from .providers_base import ProviderDriver, describe_error, ensure_success, parse_json

PROVIDER_NAME = "Vision"

_FOOD_INSTRUCTIONS = """Se for comida ou bebida, identifique:
- Que tipo de alimento/bebida é
- Ingredientes visíveis
- Aparência e apresentação
- Se parece ser de um cardápio ou menu

Se for um menu ou cardápio, extraia:
- Nomes dos pratos/bebidas
- Preços (se visíveis)
- Descrições dos itens
- Categorias dos alimentos

Responda em português brasileiro de forma amigável e informativa."""


def build_analysis_prompt(caption: str = "") -> str:
    """Return the instruction sent alongside the image."""

    prompt = "Analise esta imagem detalhadamente. "
    if caption:
        prompt += f'O usuário enviou com a legenda: "{caption}". '
    return prompt + _FOOD_INSTRUCTIONS


@dataclass(slots=True)
class VisionAnalysisDriver(ProviderDriver):
    """Send one image plus instruction and return the first completion."""

    api_url: str = "https://api.openai.com/v1/chat/completions"
    model: str = "gpt-4o"
    max_tokens: int = 500
    temperature: float = 0.7
    detail: str = "high"

    async def analyze(
        self, data: bytes, caption: str = "", filename: str = "image.jpg"
    ) -> AnalysisResult:
        caption = caption or ""
        self.log.info(
            "media.analyze.start",
            extra={
                "image_filename": filename,
                "size_bytes": len(data),
                "has_caption": bool(caption),
            },
        )
        try:
            result = await self._analyze(data, caption, filename)
        except MediaError as exc:
            self.log.warning(
                "media.analyze.failed",
                extra={"image_filename": filename, "error": str(exc)},
            )
            return AnalysisResult.failed(str(exc), caption=caption)
        except httpx.HTTPError as exc:
            self.log.warning(
                "media.analyze.http_error",
                extra={"image_filename": filename, "error": describe_error(exc)},
            )
            return AnalysisResult.failed(
                f"{PROVIDER_NAME} HTTP error: {describe_error(exc)}", caption=caption
            )
        except Exception as exc:
            self.log.exception("media.analyze.unexpected")
            return AnalysisResult.failed(describe_error(exc), caption=caption)

        self.log.info(
            "media.analyze.success",
            extra={"image_filename": filename, "analysis_length": len(result.analysis or "")},
        )
        return result

    async def _analyze(self, data: bytes, caption: str, filename: str) -> AnalysisResult:
        headers = self._auth_headers()
        body = self._build_body(data, caption, filename)
        response = await self._post(self.api_url, headers=headers, json=body)
        ensure_success(response, provider=PROVIDER_NAME)

        payload = parse_json(response, provider=PROVIDER_NAME)
        analysis = _first_completion_text(payload)
        if not analysis:
            raise ParseError(f"No analysis returned from {PROVIDER_NAME} API")
        usage = payload.get("usage")
        return AnalysisResult.ok(
            analysis,
            caption=caption,
            usage_tokens=usage if isinstance(usage, dict) else None,
        )

    def _build_body(self, data: bytes, caption: str, filename: str) -> dict[str, Any]:
        encoded = base64.b64encode(data).decode("ascii")
        mime_type = resolve_mime_type(filename)
        return {
            "model": self.model,
            "messages": [
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": build_analysis_prompt(caption)},
                        {
                            "type": "image_url",
                            "image_url": {
                                "url": f"data:{mime_type};base64,{encoded}",
                                "detail": self.detail,
                            },
                        },
                    ],
                }
            ],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }


def _first_completion_text(payload: dict[str, Any]) -> str | None:
    choices = payload.get("choices") or []
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0] if isinstance(choices[0], dict) else {}
    message = first.get("message") or {}
    content = message.get("content") if isinstance(message, dict) else None
    if isinstance(content, str) and content.strip():
        return content
    return None


__all__ = ["VisionAnalysisDriver", "build_analysis_prompt"]
