"""
Endpoint para generar recetas a partir de ingredientes.

Este endpoint maneja:
- POST /api/receta: Genera una receta con el proveedor de chat completions
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from easyfood_core.errors import RecipeError
from easyfood_core.recipe_generator import RecipeGenerator

from ..dependencies import get_recipe_generator
from ..models.requests import ErrorResponse, RecetaRequest, RecetaResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["recetas"])


@router.post(
    "/receta",
    response_model=RecetaResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generar_receta(
    request: RecetaRequest,
    generator: RecipeGenerator = Depends(get_recipe_generator),
):
    """
    Genera una receta clara y fácil de preparar con los ingredientes recibidos.

    Args:
        request: Body JSON `{ "ingredientes": "huevo, tomate" }`

    Returns:
        RecetaResponse con el texto de la receta

    Raises:
        400: Si faltan ingredientes
        500: Si falta la API key o falla la llamada al proveedor
    """
    try:
        result = await generator.generate_recipe(request.ingredientes)
    except RecipeError as e:
        if e.status_code >= 500:
            logger.warning(f"⚠️  /api/receta respondió {e.status_code}: {e.message}")
        return JSONResponse(status_code=e.status_code, content=e.to_payload())

    return RecetaResponse(receta=result.receta)
