"""
Modelos de request/response para la API.

Estos modelos definen la estructura esperada de los requests HTTP,
validando tipos antes de pasarlos al core.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class RecetaRequest(BaseModel):
    """
    Request para generar una receta.

    `ingredientes` es texto libre; sólo se exige que no esté vacío
    (eso lo valida el core, no este modelo).
    """

    ingredientes: Optional[str] = Field(
        default=None,
        description="Ingredientes disponibles, ej: 'huevo, tomate'",
    )


class RecetaResponse(BaseModel):
    """Receta generada, tal cual la devolvió el modelo."""

    receta: str = Field(..., description="Texto de la receta generada")


class ErrorResponse(BaseModel):
    """
    Error devuelto por la API (400 o 500).

    El subtipo de error sólo se distingue por el texto de `error`.
    """

    error: str = Field(..., description="Mensaje legible del error")
    detalle: Optional[Any] = Field(
        default=None,
        description="Payload crudo del proveedor, si hubo respuesta de error",
    )
