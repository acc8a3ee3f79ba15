"""
📋 Request Logging - Una línea de log por petición

Formato: ``<remote-addr> - <protocol> <method> <request-URI>``
Se escribe antes de delegar, así que toda petición queda registrada aunque
el handler falle. Es telemetría best-effort: nunca altera la respuesta.
"""

from urllib.parse import quote


def remote_addr(environ) -> str:
    """Dirección del cliente como ``host:puerto`` (si el servidor da el puerto)."""
    host = environ.get('REMOTE_ADDR', '')
    port = environ.get('REMOTE_PORT')
    return f"{host}:{port}" if port else host


def request_uri(environ) -> str:
    """
    URI de la petición tal como la envió el cliente (ruta + query string).

    El servidor de Werkzeug expone ``REQUEST_URI``; si falta, se reconstruye
    desde ``SCRIPT_NAME``, ``PATH_INFO`` y ``QUERY_STRING``.
    """
    uri = environ.get('REQUEST_URI') or environ.get('RAW_URI')
    if uri:
        return uri

    path = quote(environ.get('SCRIPT_NAME', '') + environ.get('PATH_INFO', ''), safe="/:@!$&'()*+,;=")
    query = environ.get('QUERY_STRING', '')
    return f"{path or '/'}?{query}" if query else (path or '/')


def request_line(environ) -> str:
    return "{} - {} {} {}".format(
        remote_addr(environ),
        environ.get('SERVER_PROTOCOL', ''),
        environ.get('REQUEST_METHOD', ''),
        request_uri(environ),
    )


def log_request(application):
    """
    Fábrica del middleware de log de peticiones.

    Args:
        application: Contexto de la aplicación (se usa su logger)

    Returns:
        Middleware ``(wsgi_app) -> wsgi_app``
    """
    logger = application.logger

    def middleware(next_app):
        def log(environ, start_response):
            try:
                logger.info(request_line(environ))
            except Exception:
                pass  # telemetría best-effort: el log nunca hace fallar la petición

            return next_app(environ, start_response)

        log.__name__ = 'log_request'
        return log

    middleware.__name__ = 'log_request'
    return middleware
