# app.py - Punto de entrada de Tennis Match Logger API
# Cadena: recover_panic -> log_request -> tabla de rutas (Flask) -> handler

import sys
import logging
from dataclasses import dataclass

from flask import Flask
from flask_cors import CORS
from werkzeug.exceptions import MethodNotAllowed, NotFound
from werkzeug.serving import make_server

from config import Config
from middleware import Chain, log_request, recover_panic
from routes import HealthRoutes, MatchRoutes, PlayerRoutes, RouteTable
from routes.responses import text_response
from utils.logger import build_logger

EXTENSION_KEY = 'tennis_logger'


# 1. CONTEXTO DE LA APLICACIÓN
@dataclass(frozen=True)
class Application:
    """
    Dependencias compartidas por handlers y middleware.

    Se crea una vez antes de escuchar y no se modifica después; todas las
    peticiones concurrentes leen la misma instancia.
    """
    logger: logging.Logger
    config: Config = Config()


# 2. TABLA DE RUTAS
def build_route_table(application):
    """Tabla con todas las rutas de la API v1 (y la raíz)."""
    table = RouteTable('api')

    HealthRoutes(application).register(table)
    MatchRoutes(application).register(table)
    PlayerRoutes(application).register(table)

    return table


# 3. CADENA DE MIDDLEWARE
def middleware_chain(application):
    """Orden fijo: recuperación de fallos por fuera de todo, luego el log."""
    return Chain(recover_panic(application), log_request(application))


# 4. ERRORES DE ENRUTAMIENTO
def register_error_handlers(app):
    """404 y 405 en texto plano; no son fallos, no pasan por recover_panic."""

    @app.errorhandler(NotFound)
    def not_found(e):
        return text_response("404 page not found", 404)

    @app.errorhandler(MethodNotAllowed)
    def method_not_allowed(e):
        allowed = ', '.join(sorted(e.valid_methods or []))
        return text_response("Method Not Allowed", 405, headers={'Allow': allowed})


# 5. CREAR Y CONFIGURAR LA APLICACIÓN FLASK
def create_app(application, route_table=None):
    """
    Construir la aplicación Flask con la cadena de middleware instalada.

    Args:
        application: Contexto compartido (logger + configuración)
        route_table: Tabla alternativa; por defecto build_route_table()

    Returns:
        Flask: Aplicación cuyo ``wsgi_app`` es la cadena compuesta
    """
    app = Flask(__name__)
    # Las excepciones deben llegar hasta recover_panic, no al 500 de Flask
    app.config['PROPAGATE_EXCEPTIONS'] = True
    CORS(app)  # Habilita CORS para permitir peticiones desde un frontend

    table = route_table if route_table is not None else build_route_table(application)
    table.install(app)
    register_error_handlers(app)

    app.wsgi_app = middleware_chain(application).then(app.wsgi_app)
    app.extensions[EXTENSION_KEY] = {'application': application, 'route_table': table}
    return app


# 6. SERVIDOR HTTP
def build_server(app, host, port):
    """Servidor WSGI de Werkzeug, un hilo por petición."""
    return make_server(host, port, app, threaded=True)


# 7. FUNCIÓN PRINCIPAL
def main(argv=None):
    """Función principal para iniciar el servidor."""
    config = Config.from_args(argv)
    logger = build_logger(level=config.log_level, log_file=config.log_file)
    application = Application(logger=logger, config=config)

    # El log de acceso de Werkzeug duplicaría la línea de log_request
    logging.getLogger('werkzeug').setLevel(logging.WARNING)

    app = create_app(application)

    logger.info(f"Starting tennis match logger server on {config.address}")
    try:
        server = build_server(app, config.host, config.port)
    except SystemExit:
        # Werkzeug ya imprimió el motivo (p. ej. puerto en uso) y sale con 1
        logger.critical(f"❌ No se pudo abrir {config.address}")
        raise
    except OSError as e:
        logger.critical(f"❌ No se pudo abrir {config.address}: {e}")
        sys.exit(1)

    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("🛑 Servidor detenido")
    finally:
        server.server_close()
    return 0


# 8. BLOQUE DE EJECUCIÓN
if __name__ == '__main__':
    sys.exit(main())
