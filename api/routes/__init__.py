"""Rutas de la API."""

from . import recetas

__all__ = ["recetas"]
