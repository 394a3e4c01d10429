"""
Dependencias de FastAPI.

El generador de recetas se crea una sola vez en `create_app` (con la
configuración inyectada) y se guarda en `app.state`; las rutas lo obtienen
a través de `get_recipe_generator`.
"""

from fastapi import Request

from easyfood_core.recipe_generator import RecipeGenerator


def get_recipe_generator(request: Request) -> RecipeGenerator:
    """
    Devuelve el `RecipeGenerator` asociado a la aplicación.

    En tests se puede reemplazar con `app.dependency_overrides`.
    """
    return request.app.state.recipe_generator
