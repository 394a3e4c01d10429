"""
easyfood_core.recipe_generator
==============================

Adaptador entre el cliente HTTP y el proveedor de chat completions.

Flujo de `RecipeGenerator.generate_recipe`:

1) Validar que lleguen ingredientes (valor truthy).
2) Verificar la API key (se re-chequea en cada llamada).
3) Construir el prompt fijo con los ingredientes tal cual.
4) Hacer UNA llamada a `/chat/completions`.
5) Devolver el contenido de la primera opción, o un `RecipeError` clasificado.

No hay reintentos, cache ni estado compartido entre requests salvo la
configuración inmutable y el cliente HTTP.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx
from openai import AsyncOpenAI

from .config import Settings
from .errors import RecipeError, classify_upstream_error
from .llm_client import create_chat_completion, extract_first_choice, get_client
from .prompts import build_recipe_prompt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecipeResult:
    receta: str
    model: str


class RecipeGenerator:
    """
    Genera recetas a partir de un texto libre de ingredientes.

    La credencial llega en `settings` al construir la instancia; el cliente
    del SDK se crea recién en la primera llamada válida (sin API key el SDK
    no puede instanciarse).
    """

    def __init__(self, settings: Settings, http_client: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self._http_client = http_client
        self._client: Optional[AsyncOpenAI] = None

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = get_client(self.settings, http_client=self._http_client)
        return self._client

    async def generate_recipe(self, ingredientes: Any) -> RecipeResult:
        if not ingredientes:
            raise RecipeError.missing_input()

        if not self.settings.has_api_key:
            logger.error("❌ Solicitud de receta rechazada: OPENROUTER_API_KEY no configurada")
            raise RecipeError.missing_credential()

        prompt = build_recipe_prompt(str(ingredientes))
        model = self.settings.openrouter_model

        try:
            client = self._get_client()
            payload = await create_chat_completion(client, model, prompt)
            receta = extract_first_choice(payload)
        except RecipeError as error:
            logger.error(f"Respuesta inválida de OpenRouter ({error.kind.value}): {error.detalle}")
            raise
        except Exception as exc:
            error = classify_upstream_error(exc)
            logger.error(
                f"Error al obtener receta de OpenRouter ({error.kind.value}): "
                f"{error.detalle if error.detalle is not None else exc}"
            )
            raise error from exc

        logger.info(f"🍳 Receta generada con {model} ({len(receta)} caracteres)")
        return RecipeResult(receta=receta, model=model)

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
