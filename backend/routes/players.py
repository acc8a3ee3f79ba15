# routes/players.py - Rutas de API para jugadores
# Handlers provisionales: la persistencia de jugadores aún no existe

from .responses import text_response


class PlayerRoutes:
    """Handlers de /v1/players."""

    def __init__(self, application):
        self.application = application

    # 📊 RUTA: OBTENER TODOS LOS JUGADORES
    def get_players(self):
        """GET /v1/players"""
        return text_response("Get players - to be implemented")

    # ➕ RUTA: AGREGAR JUGADOR
    def create_player(self):
        """POST /v1/players"""
        return text_response("Create player - to be implemented")

    def register(self, table):
        table.get('/v1/players', self.get_players)
        table.post('/v1/players', self.create_player)
