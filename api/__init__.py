"""
API HTTP del backend de recetas EasyFood.

Esta capa expone endpoints REST que usan el core interno
(easyfood_core.recipe_generator) para generar recetas.

La API está diseñada para ser consumida por:
- La app móvil (React Native)
- Clientes externos y scripts de prueba
"""
