"""Contrato abstracto del almacenamiento de Jobs.

La capa de servicio sólo conoce esta interfaz, así que el repositorio en
memoria se puede cambiar por uno persistente sin tocar a quien lo usa.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from app.models.job import Job


class JobRepository(ABC):
    """
    Interfaz de almacenamiento de jobs.

    Las implementaciones deben tolerar peticiones concurrentes y lanzar
    `JobNotFoundError` cuando no hay ningún job con el id pedido.
    """

    @abstractmethod
    def get(self, job_id: str) -> Job:
        """Devuelve una copia del job con ese id o lanza `JobNotFoundError`."""

    @abstractmethod
    def get_all(self) -> List[Job]:
        """Copias de todos los jobs en orden de inserción (lista vacía si no hay)."""

    @abstractmethod
    def create(self, job: Job) -> Job:
        """
        Guarda un job nuevo con un id recién asignado.

        El id que traiga `job` se ignora. Devuelve una copia del job guardado,
        ya con su id.
        """

    @abstractmethod
    def update(self, job_id: str, job: Job) -> Job:
        """
        Sustituye el payload de un job existente, conservando id y posición.

        El id de `job` se fuerza a `job_id`. Lanza `JobNotFoundError` si no
        existe ningún job con ese id.
        """

    @abstractmethod
    def delete(self, job_id: str) -> None:
        """Borra el job con ese id o lanza `JobNotFoundError`."""
