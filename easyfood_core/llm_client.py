from __future__ import annotations

from typing import Any, Dict, Optional

import httpx
from openai import AsyncOpenAI

from .config import Settings
from .errors import RecipeError


def get_client(settings: Settings, http_client: Optional[httpx.AsyncClient] = None) -> AsyncOpenAI:
    """
    Crea el cliente async apuntando a la API compatible con OpenAI de OpenRouter.

    Los reintentos automáticos del SDK quedan desactivados: cada request
    entrante produce exactamente una llamada saliente.
    """
    if not settings.openrouter_api_key:
        raise RecipeError.missing_credential()
    return AsyncOpenAI(
        api_key=settings.openrouter_api_key,
        base_url=settings.openrouter_base_url,
        max_retries=0,
        default_headers={
            "HTTP-Referer": settings.http_referer,
            "X-Title": settings.app_title,
        },
        http_client=http_client,
    )


async def create_chat_completion(client: AsyncOpenAI, model: str, prompt: str) -> Any:
    """
    Envía el prompt como único mensaje de usuario y devuelve el body JSON crudo.

    Se usa `with_raw_response` para inspeccionar la forma real del body en
    lugar de confiar en el parseo permisivo del SDK.
    """
    raw = await client.chat.completions.with_raw_response.create(
        model=model,
        messages=[{"role": "user", "content": prompt}],
    )
    try:
        return raw.http_response.json()
    except ValueError:
        raise RecipeError.malformed_upstream_response(detalle=raw.http_response.text or None)


def extract_first_choice(payload: Any) -> str:
    """
    Devuelve `choices[0].message.content` o lanza `MALFORMED_UPSTREAM_RESPONSE`.
    """
    choices = payload.get("choices") if isinstance(payload, dict) else None
    if not isinstance(choices, list) or not choices:
        raise RecipeError.malformed_upstream_response(detalle=payload)

    first: Dict[str, Any] = choices[0] if isinstance(choices[0], dict) else {}
    message = first.get("message")
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str):
        raise RecipeError.malformed_upstream_response(detalle=payload)
    return content
