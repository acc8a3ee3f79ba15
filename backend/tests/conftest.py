"""
🧪 Fixtures compartidas para los tests de la API
"""

import io
import threading

import pytest

from app import Application, build_route_table, build_server, create_app
from config import Config
from utils.logger import build_logger

TEST_LOGGER_NAME = 'tennis_logger_test'


@pytest.fixture
def log_stream():
    """Flujo en memoria donde escribe el logger de la aplicación."""
    return io.StringIO()


@pytest.fixture
def application(log_stream):
    """Contexto de aplicación con logger capturado."""
    logger = build_logger(name=TEST_LOGGER_NAME, stream=log_stream)
    return Application(logger=logger, config=Config(host='127.0.0.1', port=0))


@pytest.fixture
def log_lines(log_stream):
    """Devuelve las líneas escritas hasta el momento."""
    def read():
        return [line for line in log_stream.getvalue().splitlines() if line]
    return read


@pytest.fixture
def faulty_table(application):
    """Tabla real + una ruta cuyo handler siempre falla."""
    table = build_route_table(application)

    def boom():
        raise RuntimeError("boom")

    table.get('/v1/boom', boom)
    return table


@pytest.fixture
def app(application, faulty_table):
    return create_app(application, faulty_table)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def live_server(app):
    """Servidor real en un puerto efímero; devuelve la URL base."""
    server = build_server(app, '127.0.0.1', 0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    yield f"http://127.0.0.1:{server.server_port}"

    server.shutdown()
    server.server_close()
    thread.join(timeout=5)
