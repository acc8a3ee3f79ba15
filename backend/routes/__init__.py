# routes/__init__.py
# Este archivo hace que Python reconozca 'routes' como un paquete

"""
Paquete de rutas para la API de Tennis Match Logger

Contiene:
- route_table.py: Tabla (método, patrón) -> handler
- health.py: Health check
- matches.py: Rutas de partidos (provisionales)
- players.py: Rutas de jugadores (provisionales)
"""

from .route_table import RouteTable, RouteConflictError, RouteMatch
from .health import HealthRoutes
from .matches import MatchRoutes
from .players import PlayerRoutes

__all__ = [
    'RouteTable',
    'RouteConflictError',
    'RouteMatch',
    'HealthRoutes',
    'MatchRoutes',
    'PlayerRoutes',
]
