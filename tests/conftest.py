import json

import httpx
import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from easyfood_core.config import Settings


class FakeOpenRouter:
    """Proveedor simulado: registra los requests y responde con `handler`."""

    def __init__(self):
        self.requests = []
        self.handler = lambda request: httpx.Response(
            200,
            json={"choices": [{"message": {"role": "assistant", "content": "Receta de prueba"}}]},
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def respond(self, status_code=200, **kwargs):
        self.handler = lambda request: httpx.Response(status_code, **kwargs)

    def fail_with(self, exc_factory):
        def handler(request):
            raise exc_factory(request)

        self.handler = handler

    def last_json(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def settings():
    return Settings(openrouter_api_key="sk-or-test")


@pytest.fixture
def upstream():
    return FakeOpenRouter()


@pytest.fixture
def http_client(upstream):
    return httpx.AsyncClient(transport=httpx.MockTransport(upstream))


@pytest.fixture
def client(settings, http_client):
    app = create_app(settings, http_client=http_client)
    return TestClient(app)
