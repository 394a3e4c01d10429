"""
Tests del endpoint POST /api/receta contra un proveedor simulado.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from easyfood_core.config import Settings


def test_receta_devuelve_contenido_de_la_primera_opcion(client, upstream):
    upstream.respond(
        200,
        json={"choices": [{"message": {"content": "Receta de tomate con huevo..."}}]},
    )

    response = client.post("/api/receta", json={"ingredientes": "huevo, tomate"})

    assert response.status_code == 200
    assert response.json() == {"receta": "Receta de tomate con huevo..."}
    assert len(upstream.requests) == 1


def test_receta_envia_un_solo_mensaje_con_el_prompt(client, upstream):
    client.post("/api/receta", json={"ingredientes": "arroz, pollo"})

    request = upstream.requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://openrouter.ai/api/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer sk-or-test"
    assert request.headers["HTTP-Referer"] == "http://localhost"
    assert request.headers["X-Title"] == "EasyFoodAI"
    assert request.headers["Content-Type"].startswith("application/json")

    body = upstream.last_json()
    assert body["model"] == "google/gemma-2b-it"
    assert len(body["messages"]) == 1
    assert body["messages"][0]["role"] == "user"
    assert "Tengo los siguientes ingredientes en casa: arroz, pollo." in body["messages"][0]["content"]


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"ingredientes": ""},
        {"ingredientes": None},
        {"ingredientes": False},
        {"ingredientes": 0},
    ],
)
def test_sin_ingredientes_responde_400_sin_llamar_al_proveedor(client, upstream, payload):
    response = client.post("/api/receta", json=payload)

    assert response.status_code == 400
    assert "error" in response.json()
    assert upstream.requests == []


def test_body_vacio_responde_400(client, upstream):
    response = client.post("/api/receta")

    assert response.status_code == 400
    assert "error" in response.json()
    assert upstream.requests == []


def test_sin_ingredientes_mensaje(client):
    response = client.post("/api/receta", json={"ingredientes": ""})

    assert response.json() == {"error": "Faltan ingredientes en la solicitud."}


def test_sin_api_key_responde_500(http_client, upstream):
    app = create_app(Settings(openrouter_api_key=""), http_client=http_client)
    client = TestClient(app)

    response = client.post("/api/receta", json={"ingredientes": "huevo"})

    assert response.status_code == 500
    assert response.json() == {"error": "Error interno del servidor: API Key no disponible."}
    assert upstream.requests == []


def test_error_401_indica_autenticacion_y_saldo(client, upstream):
    upstream.respond(401, json={"error": {"message": "No auth credentials found", "code": 401}})

    response = client.post("/api/receta", json={"ingredientes": "huevo"})

    assert response.status_code == 500
    error = response.json()["error"]
    assert "autenticación" in error
    assert "saldo" in error


def test_error_estructurado_incluye_mensaje_del_proveedor(client, upstream):
    upstream.respond(
        400,
        json={"error": {"message": "google/gemma-2b-it is not a valid model ID", "code": 400}},
    )

    response = client.post("/api/receta", json={"ingredientes": "huevo"})

    assert response.status_code == 500
    data = response.json()
    assert data["error"] == "Error de la API de OpenRouter: google/gemma-2b-it is not a valid model ID"
    assert data["detalle"]["error"]["code"] == 400


def test_error_http_sin_body_interpretable(client, upstream):
    upstream.respond(502, text="Bad Gateway")

    response = client.post("/api/receta", json={"ingredientes": "huevo"})

    assert response.status_code == 500
    data = response.json()
    assert data["error"] == "Error del servidor de OpenRouter: Código 502."
    assert data["detalle"] == "Bad Gateway"


def test_error_de_red_responde_500_con_mensaje_de_conectividad(client, upstream):
    upstream.fail_with(lambda request: httpx.ConnectError("Connection refused", request=request))

    response = client.post("/api/receta", json={"ingredientes": "huevo"})

    assert response.status_code == 500
    assert "No se pudo conectar" in response.json()["error"]
    assert "detalle" not in response.json()


def test_sin_reintentos_ante_errores_recuperables(client, upstream):
    upstream.respond(503, json={"error": {"message": "Service Unavailable"}})

    client.post("/api/receta", json={"ingredientes": "huevo"})

    assert len(upstream.requests) == 1


def test_respuesta_sin_opciones_es_respuesta_invalida(client, upstream):
    upstream.respond(200, json={"choices": []})

    response = client.post("/api/receta", json={"ingredientes": "huevo"})

    assert response.status_code == 500
    assert response.json()["error"] == "La respuesta de OpenRouter no contiene una receta válida."


def test_respuesta_no_json_es_respuesta_invalida(client, upstream):
    upstream.respond(200, text="<html>mantenimiento</html>")

    response = client.post("/api/receta", json={"ingredientes": "huevo"})

    assert response.status_code == 500
    assert "no contiene una receta válida" in response.json()["error"]


def test_root_responde_texto_plano(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert "/api/receta" in response.text


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
