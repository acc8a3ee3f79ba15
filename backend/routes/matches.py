# routes/matches.py - Rutas de API para partidos de tenis
# Handlers provisionales: la persistencia de partidos aún no existe

from .responses import text_response


class MatchRoutes:
    """
    Handlers de /v1/matches.

    Cada handler devuelve 200 con un texto fijo. Cuando exista la capa de
    persistencia se reemplaza el cuerpo de cada método, sin tocar la tabla
    de rutas ni la cadena de middleware.
    """

    def __init__(self, application):
        self.application = application

    # 📊 RUTA: OBTENER TODOS LOS PARTIDOS
    def get_matches(self):
        """GET /v1/matches"""
        return text_response("Get matches - to be implemented")

    # ➕ RUTA: CREAR PARTIDO
    def create_match(self):
        """POST /v1/matches"""
        return text_response("Create match - to be implemented")

    # 🔍 RUTA: OBTENER PARTIDO POR ID
    def get_match(self, id):
        """
        GET /v1/matches/:id
        El identificador llega como texto, sin validar (ej: 42, final-2024)
        """
        return text_response("Get match - to be implemented")

    # 🔄 RUTA: ACTUALIZAR PARTIDO
    def update_match(self, id):
        """PUT /v1/matches/:id"""
        return text_response("Update match - to be implemented")

    def register(self, table):
        table.get('/v1/matches', self.get_matches)
        table.post('/v1/matches', self.create_match)
        table.get('/v1/matches/:id', self.get_match)
        table.put('/v1/matches/:id', self.update_match)
