"""
🧱 Middleware Package - Capas WSGI que envuelven el despacho de rutas
Orden fijo: recuperación de fallos (exterior) -> log de peticiones -> router
"""

from .chain import Chain
from .recovery import recover_panic
from .request_logging import log_request, request_line

__all__ = [
    'Chain',
    'recover_panic',
    'log_request',
    'request_line',
]
