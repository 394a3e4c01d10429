# easyfood_core/prompts.py

"""
Prompt fijo para la generación de recetas a partir de ingredientes.
"""

RECIPE_PROMPT_ES = """
Tengo los siguientes ingredientes en casa: {ingredientes}.
Por favor, dame una receta clara y fácil de preparar usando estos ingredientes.
Incluye una lista de pasos para cocinar, tiempo estimado y consejos útiles.
Por favor, escribe sin errores ortográficos ni gramaticales.
"""


def build_recipe_prompt(ingredientes: str) -> str:
    """
    Inserta el texto de ingredientes tal cual lo envió el cliente
    (sin escapar ni truncar).
    """
    return RECIPE_PROMPT_ES.replace("{ingredientes}", ingredientes)
