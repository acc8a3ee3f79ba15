# routes/responses.py - Respuestas de texto plano comunes a todas las rutas

from flask import Response

TEXT_MIMETYPE = 'text/plain'


def text_response(message: str, status: int = 200, headers=None) -> Response:
    """Respuesta ``text/plain; charset=utf-8`` terminada en salto de línea."""
    return Response(f"{message}\n", status=status, mimetype=TEXT_MIMETYPE, headers=headers)
