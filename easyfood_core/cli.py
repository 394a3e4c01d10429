"""
easyfood_core.cli
=================

Punto de entrada mínimo para generar una receta desde la terminal, sin
levantar el servidor HTTP. Útil como smoke test manual de la API key y
del modelo configurado.

Uso:
    python -m easyfood_core.cli "huevo, tomate, cebolla"
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import List, Optional

from .config import get_settings
from .errors import RecipeError
from .recipe_generator import RecipeGenerator


async def _run(ingredientes: str) -> str:
    generator = RecipeGenerator(get_settings())
    try:
        result = await generator.generate_recipe(ingredientes)
    finally:
        await generator.aclose()
    return result.receta


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Genera una receta a partir de ingredientes.")
    parser.add_argument("ingredientes", help='Ingredientes disponibles, ej: "huevo, tomate"')
    args = parser.parse_args(argv)

    try:
        receta = asyncio.run(_run(args.ingredientes))
    except RecipeError as e:
        print(f"❌ {e.message}", file=sys.stderr)
        return 1

    print(receta)
    return 0


if __name__ == "__main__":
    sys.exit(main())
