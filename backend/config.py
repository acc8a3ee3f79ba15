# config.py - Configuración del servidor de Tennis Match Logger
# Valores por defecto = constantes originales (puerto 8080, log a stdout)

import os
import argparse
import logging
from dataclasses import dataclass, replace
from typing import List, Optional

# 📍 VALORES POR DEFECTO
DEFAULT_HOST = '0.0.0.0'
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = 'INFO'

# Variables de entorno reconocidas
ENV_HOST = 'TENNIS_LOGGER_HOST'
ENV_PORT = 'TENNIS_LOGGER_PORT'
ENV_LOG_LEVEL = 'TENNIS_LOGGER_LOG_LEVEL'
ENV_LOG_FILE = 'TENNIS_LOGGER_LOG_FILE'


def parse_port(value) -> int:
    """Convierte y valida un puerto TCP (0 = puerto efímero)."""
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Puerto inválido: {value!r}")

    if port < 0 or port > 65535:
        raise ValueError(f"Puerto fuera de rango (0-65535): {port}")
    return port


def parse_log_level(value: str) -> str:
    level = str(value).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Nivel de log inválido: {value!r}")
    return level


@dataclass(frozen=True)
class Config:
    """
    Configuración inmutable del proceso.

    Prioridad: argumentos CLI > variables de entorno > valores por defecto.
    """
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None  # None = salida estándar

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"

    @classmethod
    def from_env(cls, environ=None) -> 'Config':
        """Construir la configuración a partir de variables de entorno."""
        environ = os.environ if environ is None else environ

        return cls(
            host=environ.get(ENV_HOST, DEFAULT_HOST),
            port=parse_port(environ.get(ENV_PORT, DEFAULT_PORT)),
            log_level=parse_log_level(environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)),
            log_file=environ.get(ENV_LOG_FILE) or None,
        )

    @classmethod
    def from_args(cls, argv: Optional[List[str]] = None, environ=None) -> 'Config':
        """
        Construir la configuración desde la línea de comandos.

        Los argumentos omitidos conservan el valor del entorno (o el
        valor por defecto). Un valor inválido termina el proceso vía argparse.
        """
        base = cls.from_env(environ)

        parser = argparse.ArgumentParser(description='Tennis Match Logger API')
        parser.add_argument('--host', type=str, help=f"Interfaz de escucha (default: {base.host})")
        parser.add_argument('--port', type=_argparse_port, help=f"Puerto TCP (default: {base.port})")
        parser.add_argument('--log-level', type=_argparse_log_level, help=f"Nivel de log (default: {base.log_level})")
        parser.add_argument('--log-file', type=str, help="Archivo de log (default: salida estándar)")
        args = parser.parse_args(argv)

        overrides = {
            key: value
            for key, value in vars(args).items()
            if value is not None
        }
        return replace(base, **overrides)


def _argparse_port(value):
    try:
        return parse_port(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _argparse_log_level(value):
    try:
        return parse_log_level(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))
