"""
🔗 Chain - Composición ordenada de middleware WSGI

Un middleware es una función ``(wsgi_app) -> wsgi_app``. La cadena se
construye una sola vez al arrancar y se aplica de fuera hacia dentro:

    Chain(a, b).then(router)  ==  a(b(router))
"""

import logging
from typing import Callable, Iterable, List

logger = logging.getLogger(__name__)

WSGIApp = Callable
Middleware = Callable[[WSGIApp], WSGIApp]


class Chain:
    """Lista inmutable de middleware, el primero es la capa más externa."""

    def __init__(self, *middleware: Middleware):
        self._middleware: List[Middleware] = list(middleware)

    def append(self, *middleware: Middleware) -> 'Chain':
        """Nueva cadena con ``middleware`` añadidos al final (capas internas)."""
        return Chain(*self._middleware, *middleware)

    def extend(self, other: 'Chain') -> 'Chain':
        """Nueva cadena: esta seguida de ``other``."""
        return self.append(*other)

    def then(self, app: WSGIApp) -> WSGIApp:
        """
        Envolver ``app`` con toda la cadena.

        Args:
            app: Aplicación WSGI final (el despacho de rutas)

        Returns:
            La aplicación WSGI compuesta, punto de entrada único del servidor
        """
        if app is None:
            raise ValueError("La cadena necesita una aplicación WSGI final")

        wrapped = app
        for middleware in reversed(self._middleware):
            wrapped = middleware(wrapped)

        logger.debug(f"Cadena aplicada: {[getattr(m, '__name__', repr(m)) for m in self._middleware]}")
        return wrapped

    def __iter__(self) -> Iterable[Middleware]:
        return iter(self._middleware)

    def __len__(self) -> int:
        return len(self._middleware)
