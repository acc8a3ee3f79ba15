"""
🗺️ Route Table - Tabla estática (método, patrón) -> handler

Los patrones se escriben como en la documentación de la API
(``/v1/matches/:id``) y se traducen a reglas de Werkzeug
(``/v1/matches/<id>``). La tabla se llena una vez al arrancar.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, List, Optional, Tuple
from urllib.parse import urlsplit

from flask import Blueprint, Flask
from werkzeug.exceptions import MethodNotAllowed, NotFound
from werkzeug.routing import RequestRedirect

logger = logging.getLogger(__name__)

HTTP_METHODS = ('GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS')


class RouteConflictError(Exception):
    """El mismo (método, patrón) se registró dos veces."""


@dataclass(frozen=True)
class RouteEntry:
    method: str
    pattern: str
    handler: Callable
    rule: str

    @property
    def endpoint(self) -> str:
        """Nombre único por (método, patrón); Flask no admite puntos en endpoints."""
        return f"{self.method} {self.pattern}".replace('.', '%2E')


@dataclass(frozen=True)
class RouteMatch:
    """
    Resultado de resolve().

    Para un OPTIONS sin handler propio, ``handler`` es None y ``allowed``
    lista los métodos de la ruta (Flask responde 200 con ``Allow``).
    """
    handler: Optional[Callable]
    params: Dict[str, str] = field(default_factory=dict)
    allowed: FrozenSet[str] = frozenset()


def to_rule(pattern: str) -> str:
    """
    Convertir un patrón ``/a/:param`` a la sintaxis de Werkzeug ``/a/<param>``.

    Solo se admite un parámetro con nombre por patrón.
    """
    if not pattern.startswith('/'):
        raise ValueError(f"El patrón debe empezar con '/': {pattern!r}")

    segments = pattern.split('/')
    params = [s for s in segments if s.startswith(':')]
    if len(params) > 1:
        raise ValueError(f"Solo se admite un parámetro por patrón: {pattern!r}")

    converted = []
    for segment in segments:
        if segment.startswith(':'):
            name = segment[1:]
            if not name.isidentifier():
                raise ValueError(f"Nombre de parámetro inválido en {pattern!r}")
            converted.append(f"<{name}>")
        else:
            converted.append(segment)
    return '/'.join(converted)


class RouteTable:
    """
    Registro de rutas de la API.

    - register(): añade una entrada; un duplicado es un error fatal de arranque
    - install(): vuelca la tabla en una aplicación Flask (como Blueprint)
    - resolve(): busca el handler para (método, ruta) en la app instalada
    """

    def __init__(self, name: str = 'api'):
        self.name = name
        self._entries: List[RouteEntry] = []
        self._keys = set()
        self._app: Optional[Flask] = None

    def register(self, method: str, pattern: str, handler: Callable) -> RouteEntry:
        method = method.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"Método HTTP no soportado: {method}")
        if self._app is not None:
            raise RuntimeError("La tabla ya fue instalada; no se admiten más rutas")

        key = (method, pattern)
        if key in self._keys:
            raise RouteConflictError(f"Ruta duplicada: {method} {pattern}")

        entry = RouteEntry(method=method, pattern=pattern, handler=handler, rule=to_rule(pattern))
        self._keys.add(key)
        self._entries.append(entry)
        return entry

    def get(self, pattern: str, handler: Callable) -> RouteEntry:
        return self.register('GET', pattern, handler)

    def post(self, pattern: str, handler: Callable) -> RouteEntry:
        return self.register('POST', pattern, handler)

    def put(self, pattern: str, handler: Callable) -> RouteEntry:
        return self.register('PUT', pattern, handler)

    @property
    def entries(self) -> Tuple[RouteEntry, ...]:
        return tuple(self._entries)

    def install(self, app: Flask) -> Blueprint:
        """
        Registrar todas las entradas en ``app`` dentro de un Blueprint.

        Solo responden los métodos registrados. Werkzeug añade HEAD a cada
        regla GET; aquí se quita, así que un HEAD sin registrar es 405.
        OPTIONS sobre una ruta conocida lo contesta Flask con 200 y ``Allow``
        (lo necesitan las peticiones preflight de CORS).
        """
        blueprint = Blueprint(self.name, __name__)

        for entry in self._entries:
            blueprint.add_url_rule(
                entry.rule,
                endpoint=entry.endpoint,
                view_func=entry.handler,
                methods=[entry.method],
            )

        app.register_blueprint(blueprint)

        by_endpoint = {self._qualified(entry): entry for entry in self._entries}
        for rule in app.url_map.iter_rules():
            entry = by_endpoint.get(rule.endpoint)
            if entry is not None and entry.method != 'HEAD':
                rule.methods.discard('HEAD')

        self._app = app
        logger.info(f"✅ {len(self._entries)} rutas registradas en el blueprint '{self.name}'")
        return blueprint

    def resolve(self, method: str, path: str) -> RouteMatch:
        """
        Buscar el handler de (método, ruta).

        Una ruta no canónica (``//v1//health``) se resuelve como su forma
        canónica, la misma a la que Flask redirige al cliente con un 308.

        Raises:
            NotFound: ningún patrón coincide con la ruta
            MethodNotAllowed: la ruta coincide pero no para ese método
        """
        if self._app is None:
            raise RuntimeError("La tabla no está instalada en ninguna aplicación")

        method = method.upper()
        adapter = self._app.url_map.bind('localhost')
        try:
            rule, params = adapter.match(path, method, return_rule=True)
        except RequestRedirect as e:
            return self.resolve(method, urlsplit(e.new_url).path)

        registered = {entry.method for entry in self._entries if self._qualified(entry) == rule.endpoint}
        if method == 'OPTIONS' and 'OPTIONS' not in registered:
            return RouteMatch(handler=None, params=params, allowed=frozenset(adapter.allowed_methods(path)))
        return RouteMatch(handler=self._app.view_functions[rule.endpoint], params=params)

    def _qualified(self, entry: RouteEntry) -> str:
        return f"{self.name}.{entry.endpoint}"

    def __iter__(self):
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = [
    'RouteTable',
    'RouteEntry',
    'RouteMatch',
    'RouteConflictError',
    'NotFound',
    'MethodNotAllowed',
    'to_rule',
]
