#!/usr/bin/env python3
"""
Script helper para ejecutar la API FastAPI.
Ejecuta desde la raíz del proyecto para asegurar que Python encuentre el módulo 'api'.

El puerto sale de la variable de entorno PORT (Render la define) o 3000 en local.
"""

import sys
from pathlib import Path

# Asegurar que el directorio raíz esté en el PYTHONPATH
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


def main() -> None:
    from easyfood_core.config import get_settings

    try:
        import uvicorn
    except ImportError as e:
        print(f"❌ Error: No se pudo importar uvicorn. ¿Activaste el venv?")
        print(f"   Ejecuta: source .venv/bin/activate")
        print(f"   Error: {e}")
        sys.exit(1)

    settings = get_settings()
    print(f"🚀 Iniciando servidor de EasyFood en el puerto {settings.port}")
    print("Listo para recibir solicitudes POST en /api/receta")
    try:
        uvicorn.run("api.main:app", host=settings.host, port=settings.port)
    except Exception as e:
        print(f"❌ Error al iniciar el servidor: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
