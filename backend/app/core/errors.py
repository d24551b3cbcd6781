"""Jerarquía de errores de la API.

Cada excepción lleva el código HTTP con el que se responde al cliente. Los
handlers registrados en `app.main` las convierten en `{"error": mensaje}`.
"""

from __future__ import annotations

from fastapi import status


class JobsApiError(Exception):
    """Error base; si llega sin capturar se responde como 500."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(JobsApiError):
    """Falta el id en la ruta o el cuerpo no se puede decodificar."""

    status_code = status.HTTP_400_BAD_REQUEST


class JobNotFoundError(JobsApiError):
    """No hay ningún job con el id pedido."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Job not found") -> None:
        super().__init__(message)


class InternalError(JobsApiError):
    """Fallo inesperado del backend de almacenamiento."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
