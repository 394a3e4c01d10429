"""
Core del backend de recetas EasyFood.

Este paquete contiene la lógica independiente de la capa HTTP:
- Configuración (Settings)
- Prompt de recetas
- Cliente del proveedor de chat completions (OpenRouter)
- Taxonomía de errores y generador de recetas
"""
