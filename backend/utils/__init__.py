# utils/__init__.py
# Este archivo hace que Python reconozca 'utils' como un paquete

"""
Utilidades compartidas de Tennis Match Logger

Contiene:
- logger.py: Construcción del logger del proceso
"""
