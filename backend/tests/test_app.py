"""
🧪 Tests de integración: cadena completa sobre la aplicación Flask
"""

import re

import pytest

from app import EXTENSION_KEY, create_app, main

LOG_LINE = re.compile(
    r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2},\d{3} - INFO - (?P<addr>\S+) - (?P<proto>HTTP/\d\.\d) "
    r"(?P<method>[A-Z]+) (?P<uri>\S+)$"
)


def request_lines(lines, method, path):
    return [line for line in lines if f" {method} {path}" in line]


class TestCreateApp:
    """Tests para create_app."""

    def test_application_is_shared(self, app, application):
        """Test: El contexto es la misma instancia que recibe la cadena."""
        assert app.extensions[EXTENSION_KEY]['application'] is application

    def test_default_route_table(self, application):
        app = create_app(application)
        table = app.extensions[EXTENSION_KEY]['route_table']

        assert len(table) == 8
        assert app.test_client().get('/v1/health').status_code == 200

    def test_exceptions_propagate_to_recovery(self, app):
        assert app.config['PROPAGATE_EXCEPTIONS'] is True


class TestFaultRecovery:
    """Un fallo en un handler se convierte en 500 y el servidor sigue."""

    def test_fault_returns_500(self, client):
        response = client.get('/v1/boom')

        assert response.status_code == 500
        assert response.get_data(as_text=True) == "Internal Server Error\n"
        assert response.headers['Connection'] == 'close'
        assert response.headers['X-Content-Type-Options'] == 'nosniff'

    def test_service_continues_after_fault(self, client):
        assert client.get('/v1/boom').status_code == 500
        response = client.get('/v1/health')

        assert response.status_code == 200
        assert response.get_data(as_text=True) == "Tennis Match Logger API is running\n"

    def test_fault_is_logged_as_error(self, client, log_lines):
        client.get('/v1/boom')

        errors = [line for line in log_lines() if ' - ERROR - ' in line]
        assert len(errors) == 1
        assert 'RuntimeError: boom' in errors[0]


class TestRequestLogging:
    """Una línea de log por petición, con o sin éxito."""

    def test_log_line_format(self, client, log_lines):
        client.get('/v1/matches/42?full=1')

        match = LOG_LINE.match(log_lines()[-1])
        assert match is not None
        assert match.group('addr') == '127.0.0.1'
        assert match.group('proto') == 'HTTP/1.1'
        assert match.group('method') == 'GET'
        assert match.group('uri') == '/v1/matches/42?full=1'

    @pytest.mark.parametrize('method,path', [
        ('GET', '/v1/health'),
        ('POST', '/v1/matches'),
        ('PUT', '/v1/matches/abc'),
        ('GET', '/v1/boom'),
        ('GET', '/no/such/route'),
        ('DELETE', '/v1/players'),
    ])
    def test_exactly_one_line_per_request(self, client, log_lines, method, path):
        """Test: Éxito, fallo, 404 y 405 producen una sola línea cada uno."""
        client.open(path, method=method)

        assert len(request_lines(log_lines(), method, path)) == 1

    def test_lines_in_request_order(self, client, log_lines):
        for path in ('/', '/v1/players', '/v1/matches/7'):
            client.get(path)

        uris = [LOG_LINE.match(line).group('uri') for line in log_lines()]
        assert uris == ['/', '/v1/players', '/v1/matches/7']


class TestMain:
    """Tests para el arranque del servidor."""

    def test_port_in_use_is_fatal(self, capsys):
        """Test: Puerto ocupado termina el proceso con código distinto de cero."""
        import socket

        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as busy:
            busy.bind(('127.0.0.1', 0))
            busy.listen(1)
            port = busy.getsockname()[1]

            with pytest.raises(SystemExit) as exc_info:
                main(['--host', '127.0.0.1', '--port', str(port)])

        assert exc_info.value.code not in (0, None)
        out = capsys.readouterr().out
        assert f"Starting tennis match logger server on 127.0.0.1:{port}" in out
        assert 'CRITICAL' in out

    def test_invalid_port_argument(self):
        with pytest.raises(SystemExit) as exc_info:
            main(['--port', 'abc'])

        assert exc_info.value.code == 2
