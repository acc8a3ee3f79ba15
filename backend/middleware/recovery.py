"""
🛟 Recovery - Contención de fallos de última instancia

Capa más externa de la cadena. Cualquier excepción no controlada que salga
del log de peticiones o de un handler se convierte aquí, y solo aquí, en un
500 con ``Connection: close``. La excepción no se propaga al servidor.

El cuerpo de la respuesta también se itera bajo guardia: si un handler que
genera el cuerpo por partes falla antes de llamar a start_response se
responde 500; si falla después, las cabeceras ya salieron y solo se corta
el cuerpo (el fallo queda en el log).
"""

ERROR_BODY = b"Internal Server Error\n"
ERROR_STATUS = '500 Internal Server Error'


def _error_headers():
    return [
        ('Content-Type', 'text/plain; charset=utf-8'),
        ('X-Content-Type-Options', 'nosniff'),
        ('Content-Length', str(len(ERROR_BODY))),
        ('Connection', 'close'),
    ]


def _log_fault(logger, e):
    logger.error(f"❌ Fallo no controlado: {type(e).__name__}: {e}", exc_info=True)


def recover_panic(application):
    """
    Fábrica del middleware de recuperación.

    Args:
        application: Contexto de la aplicación (se usa su logger)

    Returns:
        Middleware ``(wsgi_app) -> wsgi_app``
    """
    logger = application.logger

    def middleware(next_app):
        def recover(environ, start_response):
            started = []

            def tracking_start_response(status, headers, exc_info=None):
                started.append(status)
                return start_response(status, headers, exc_info)

            try:
                body = next_app(environ, tracking_start_response)
            except Exception as e:
                _log_fault(logger, e)
                start_response(ERROR_STATUS, _error_headers())
                return [ERROR_BODY]

            return _guarded_body(body, started, start_response, logger)

        recover.__name__ = 'recover_panic'
        return recover

    middleware.__name__ = 'recover_panic'
    return middleware


def _guarded_body(body, started, start_response, logger):
    try:
        for chunk in body:
            yield chunk
    except Exception as e:
        _log_fault(logger, e)
        if not started:
            start_response(ERROR_STATUS, _error_headers())
            yield ERROR_BODY
    finally:
        close = getattr(body, 'close', None)
        if close is not None:
            close()
