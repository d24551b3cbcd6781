"""Configuración del logging estándar para todo el proceso."""

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level: str = "INFO") -> int:
    """Aplica `basicConfig` con el nivel pedido y devuelve su valor numérico.

    Un nombre de nivel desconocido cae a INFO en lugar de fallar.
    """
    log_level_numeric = getattr(logging, level.upper(), None)
    if not isinstance(log_level_numeric, int):
        log_level_numeric = logging.INFO
    logging.basicConfig(level=log_level_numeric, format=LOG_FORMAT)
    logging.getLogger().setLevel(log_level_numeric)
    return log_level_numeric
