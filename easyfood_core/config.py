# easyfood_core/config.py
from dataclasses import dataclass
from functools import lru_cache
import os

from dotenv import load_dotenv

"""
easyfood_core.config
====================

Gestión centralizada de configuración del backend de recetas.

Este módulo define:
- La estructura de configuración (`Settings`)
- El mecanismo para cargar variables desde entorno (.env)
- Un acceso único y cacheado a la configuración (`get_settings`)

Convenciones
------------
- Las variables de entorno se cargan desde un archivo `.env` si existe.
- Los defaults están pensados para desarrollo local.
- En producción (Render, Docker, etc.) los valores vienen del entorno real.

Notas importantes
-----------------
- `load_dotenv()` se ejecuta al importar el módulo.
- Si la API key de OpenRouter no está presente, NO se falla acá:
  el error se devuelve en cada request que intenta usarla.
"""

# Cargar variables de entorno desde .env (si existe)
load_dotenv()

DEFAULT_MODEL = "google/gemma-2b-it"
DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_PORT = 3000


@dataclass(frozen=True)
class Settings:
    """
    Contenedor tipado e inmutable de configuración.

    Attributes
    ----------
    openrouter_api_key:
        Credencial (bearer token) de OpenRouter. Vacía si no está configurada.
    openrouter_model:
        Identificador del modelo usado para generar las recetas.
    openrouter_base_url:
        URL base de la API compatible con OpenAI.
    http_referer / app_title:
        Headers de identificación que recomienda OpenRouter.
    host / port:
        Dirección donde escucha el servidor HTTP.
    cors_origins:
        Orígenes permitidos para CORS ("*" permite todos).
    """

    openrouter_api_key: str = ""
    openrouter_model: str = DEFAULT_MODEL
    openrouter_base_url: str = DEFAULT_BASE_URL

    # Identificación ante OpenRouter
    http_referer: str = "http://localhost"
    app_title: str = "EasyFoodAI"

    # Servidor
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    cors_origins: tuple = ("*",)
    log_level: str = "INFO"
    environment: str = "local"

    @property
    def has_api_key(self) -> bool:
        return bool(self.openrouter_api_key)


def _parse_port(raw: str | None) -> int:
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"PORT debe ser un número entero, se recibió: {raw!r}")


def _parse_origins(raw: str | None) -> tuple:
    if not raw:
        return ("*",)
    origins = tuple(origin.strip() for origin in raw.split(",") if origin.strip())
    return origins or ("*",)


@lru_cache
def get_settings() -> Settings:
    """
    Devuelve una instancia única y cacheada de `Settings`.

    Variables de entorno utilizadas
    -------------------------------
    - OPENROUTER_API_KEY
    - OPENROUTER_MODEL (default: "google/gemma-2b-it")
    - OPENROUTER_BASE_URL (default: "https://openrouter.ai/api/v1")
    - OPENROUTER_HTTP_REFERER (default: "http://localhost")
    - OPENROUTER_APP_TITLE (default: "EasyFoodAI")
    - HOST (default: "0.0.0.0"), PORT (default: 3000)
    - CORS_ORIGINS (default: "*")
    - LOG_LEVEL (default: "INFO"), ENVIRONMENT (default: "local")

    En tests conviene construir `Settings(...)` directamente en lugar de
    tocar el entorno; si se modifica el entorno, llamar a
    `get_settings.cache_clear()`.
    """
    return Settings(
        openrouter_api_key=os.getenv("OPENROUTER_API_KEY", ""),
        openrouter_model=os.getenv("OPENROUTER_MODEL", DEFAULT_MODEL),
        openrouter_base_url=os.getenv("OPENROUTER_BASE_URL", DEFAULT_BASE_URL),
        http_referer=os.getenv("OPENROUTER_HTTP_REFERER", "http://localhost"),
        app_title=os.getenv("OPENROUTER_APP_TITLE", "EasyFoodAI"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_parse_port(os.getenv("PORT")),
        cors_origins=_parse_origins(os.getenv("CORS_ORIGINS")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        environment=os.getenv("ENVIRONMENT", "local"),
    )
