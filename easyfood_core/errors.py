"""
Taxonomía de errores del generador de recetas.

Cada falla posible se representa con un `ErrorKind`. La tabla
`STATUS_BY_KIND` es total sobre el enum: todo error tiene un código HTTP
y un mensaje legible, sin inspecciones condicionales dispersas en la ruta.

El cliente HTTP sólo distingue 400 (solicitud incompleta) de 500
(cualquier otra falla); el subtipo queda reflejado en el texto del mensaje.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

import openai

PROVIDER_NAME = "OpenRouter"


class ErrorKind(str, Enum):
    MISSING_INPUT = "missing_input"
    MISSING_CREDENTIAL = "missing_credential"
    UPSTREAM_AUTH = "upstream_auth"
    UPSTREAM_API = "upstream_api"
    UPSTREAM_HTTP = "upstream_http"
    NETWORK = "network"
    REQUEST_CONSTRUCTION = "request_construction"
    MALFORMED_UPSTREAM_RESPONSE = "malformed_upstream_response"


STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.MISSING_INPUT: 400,
    ErrorKind.MISSING_CREDENTIAL: 500,
    ErrorKind.UPSTREAM_AUTH: 500,
    ErrorKind.UPSTREAM_API: 500,
    ErrorKind.UPSTREAM_HTTP: 500,
    ErrorKind.NETWORK: 500,
    ErrorKind.REQUEST_CONSTRUCTION: 500,
    ErrorKind.MALFORMED_UPSTREAM_RESPONSE: 500,
}


class RecipeError(Exception):
    """
    Error terminal de una solicitud de receta.

    Attributes
    ----------
    kind:
        Variante de la taxonomía.
    message:
        Mensaje legible que se devuelve al cliente en el campo `error`.
    detalle:
        Payload crudo del proveedor (JSON o texto), si lo hubo.
    """

    def __init__(self, kind: ErrorKind, message: str, detalle: Any = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.detalle = detalle

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.message}
        if self.detalle is not None:
            payload["detalle"] = self.detalle
        return payload

    # Constructores por variante

    @classmethod
    def missing_input(cls) -> "RecipeError":
        return cls(ErrorKind.MISSING_INPUT, "Faltan ingredientes en la solicitud.")

    @classmethod
    def missing_credential(cls) -> "RecipeError":
        return cls(
            ErrorKind.MISSING_CREDENTIAL,
            "Error interno del servidor: API Key no disponible.",
        )

    @classmethod
    def upstream_auth(cls, detalle: Any = None) -> "RecipeError":
        return cls(
            ErrorKind.UPSTREAM_AUTH,
            f"Error de autenticación con la API de {PROVIDER_NAME}. Verifica tu API Key y saldo.",
            detalle,
        )

    @classmethod
    def upstream_api(cls, upstream_message: str, detalle: Any = None) -> "RecipeError":
        return cls(
            ErrorKind.UPSTREAM_API,
            f"Error de la API de {PROVIDER_NAME}: {upstream_message}",
            detalle,
        )

    @classmethod
    def upstream_http(cls, status_code: int, detalle: Any = None) -> "RecipeError":
        return cls(
            ErrorKind.UPSTREAM_HTTP,
            f"Error del servidor de {PROVIDER_NAME}: Código {status_code}.",
            detalle,
        )

    @classmethod
    def network(cls) -> "RecipeError":
        return cls(
            ErrorKind.NETWORK,
            f"No se pudo conectar con el servidor de {PROVIDER_NAME}. "
            "Revisa la conectividad de tu backend.",
        )

    @classmethod
    def request_construction(cls, reason: str) -> "RecipeError":
        return cls(ErrorKind.REQUEST_CONSTRUCTION, f"Error en la solicitud: {reason}")

    @classmethod
    def malformed_upstream_response(cls, detalle: Any = None) -> "RecipeError":
        return cls(
            ErrorKind.MALFORMED_UPSTREAM_RESPONSE,
            f"La respuesta de {PROVIDER_NAME} no contiene una receta válida.",
            detalle,
        )


def _read_error_body(exc: openai.APIStatusError) -> Any:
    """Devuelve el body de la respuesta de error como JSON, texto o None."""
    response = exc.response
    try:
        return response.json()
    except ValueError:
        text = response.text
        return text or None


def _extract_error_message(body: Any) -> Optional[str]:
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if not isinstance(error, dict):
        return None
    message = error.get("message")
    if not message:
        return None
    return str(message)


def classify_upstream_error(exc: BaseException) -> RecipeError:
    """
    Traduce una excepción ocurrida al llamar al proveedor a un `RecipeError`.

    Orden de clasificación:
    1) Respuesta 401 → autenticación / saldo.
    2) Respuesta no-2xx con `error.message` en el body → error de la API.
    3) Respuesta no-2xx sin body interpretable → error HTTP con el código.
    4) Sin respuesta (conexión, timeout) → error de red.
    5) Cualquier otra cosa → error armando la solicitud.
    """
    if isinstance(exc, RecipeError):
        return exc

    if isinstance(exc, openai.APIStatusError):
        body = _read_error_body(exc)
        if exc.status_code == 401:
            return RecipeError.upstream_auth(detalle=body)
        upstream_message = _extract_error_message(body)
        if upstream_message:
            return RecipeError.upstream_api(upstream_message, detalle=body)
        return RecipeError.upstream_http(exc.status_code, detalle=body)

    # APITimeoutError es subclase de APIConnectionError
    if isinstance(exc, openai.APIConnectionError):
        return RecipeError.network()

    return RecipeError.request_construction(str(exc) or type(exc).__name__)
