# routes/health.py - Health check de la API
# Responde en "/" y en "/v1/health"

from .responses import text_response

HEALTH_MESSAGE = "Tennis Match Logger API is running"


class HealthRoutes:
    """Handlers de estado del servicio."""

    def __init__(self, application):
        self.application = application

    def health_check(self):
        """
        GET /
        GET /v1/health
        Confirmar que el servidor está vivo
        """
        return text_response(HEALTH_MESSAGE)

    def register(self, table):
        table.get('/', self.health_check)
        table.get('/v1/health', self.health_check)
