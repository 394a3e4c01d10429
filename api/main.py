"""
API HTTP principal del backend de recetas EasyFood.

Esta aplicación FastAPI expone endpoints REST que usan el core interno
(easyfood_core.recipe_generator) para generar recetas con OpenRouter.

Uso:
    uvicorn api.main:app --reload --port 3000
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from easyfood_core.config import Settings, get_settings
from easyfood_core.recipe_generator import RecipeGenerator

from .routes import recetas

VERSION = "0.1.0"

# Configurar logging según ambiente
_settings = get_settings()
logging.basicConfig(
    level=getattr(logging, _settings.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _log_credential_status(settings: Settings) -> None:
    if settings.has_api_key:
        logger.info("✅ API KEY de OpenRouter cargada correctamente.")
    else:
        logger.error("❌ ERROR: La variable de entorno OPENROUTER_API_KEY no está configurada.")
        logger.error(
            "Asegúrate de tenerla configurada en el entorno del servidor "
            "(Environment Variables) o en tu archivo .env local."
        )


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"Request inválido en {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={
            "error": "Solicitud inválida: se espera un JSON con el campo 'ingredientes' (texto).",
        },
    )


def create_app(
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """
    Construye la aplicación con la configuración indicada.

    Args:
        settings: Configuración a usar (default: `get_settings()`)
        http_client: Cliente httpx para el SDK (tests: transporte simulado)

    Returns:
        FastAPI lista para servir
    """
    settings = settings or get_settings()
    logger.info(f"🚀 Iniciando API en ambiente: {settings.environment}")
    _log_credential_status(settings)

    generator = RecipeGenerator(settings, http_client=http_client)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await generator.aclose()

    app = FastAPI(
        title="EasyFood API",
        description="API para generar recetas a partir de ingredientes con IA",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.recipe_generator = generator

    # CORS: la app móvil y clientes web consumen la API directamente
    cors_origins = list(settings.cors_origins)
    logger.info(f"🌐 CORS origins configurados: {cors_origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials="*" not in cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    # Registrar rutas
    app.include_router(recetas.router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        """Health check simple (útil para probar desde el navegador)."""
        return "¡El servidor de recetas EasyFood está funcionando! Envía una solicitud POST a /api/receta."

    @app.get("/health")
    async def health():
        """Health check detallado."""
        return {
            "status": "ok",
            "service": "easyfood-api",
            "version": VERSION,
        }

    return app


app = create_app(_settings)
