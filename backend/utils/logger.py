"""
📝 Logger - Sink de líneas de log del proceso
Un único logger con marca de tiempo, compartido por middleware y handlers
"""

import sys
import logging
from typing import Optional, TextIO

LOGGER_NAME = 'tennis_logger'
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def build_logger(name: str = LOGGER_NAME,
                 level: str = 'INFO',
                 stream: Optional[TextIO] = None,
                 log_file: Optional[str] = None) -> logging.Logger:
    """
    Crear (o reconfigurar) el logger del proceso.

    Args:
        name: Nombre del logger
        level: Nivel mínimo ('DEBUG', 'INFO', ...)
        stream: Flujo de salida (default: sys.stdout)
        log_file: Si se indica, se escribe en este archivo en lugar del flujo

    Returns:
        logging.Logger: Logger listo, sin propagación al root
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    # Reemplazar handlers previos para no duplicar líneas
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file:
        handler = logging.FileHandler(log_file, encoding='utf-8')
    else:
        handler = logging.StreamHandler(stream if stream is not None else sys.stdout)

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
