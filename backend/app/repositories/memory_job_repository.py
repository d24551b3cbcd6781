"""Repositorio de Jobs en memoria.

Los jobs viven en una lista en orden de inserción. Los ids salen de un
contador que nunca retrocede, así que no se repiten aunque haya borrados.
Todo se pierde al reiniciar el proceso.
"""

from __future__ import annotations

import itertools
from threading import Lock
from typing import List

from app.core.errors import JobNotFoundError
from app.models.job import Job
from .job_repository import JobRepository


class InMemoryJobRepository(JobRepository):
    """
    Almacén en memoria protegido por un único lock.

    Todas las operaciones, lecturas incluidas, se hacen con el lock tomado.
    Los jobs guardados nunca se comparten: entradas y salidas son copias.
    """

    def __init__(self) -> None:
        self._jobs: List[Job] = []
        self._ids = itertools.count()
        self._lock = Lock()

    def get(self, job_id: str) -> Job:
        with self._lock:
            for job in self._jobs:
                if job.id == job_id:
                    return job.model_copy(deep=True)
        raise JobNotFoundError()

    def get_all(self) -> List[Job]:
        with self._lock:
            return [job.model_copy(deep=True) for job in self._jobs]

    def create(self, job: Job) -> Job:
        with self._lock:
            stored = job.with_id(str(next(self._ids)))
            self._jobs.append(stored)
            return stored.model_copy(deep=True)

    def update(self, job_id: str, job: Job) -> Job:
        with self._lock:
            for i, current in enumerate(self._jobs):
                if current.id == job_id:
                    stored = job.with_id(job_id)
                    self._jobs[i] = stored
                    return stored.model_copy(deep=True)
        raise JobNotFoundError()

    def delete(self, job_id: str) -> None:
        with self._lock:
            for i, job in enumerate(self._jobs):
                if job.id == job_id:
                    del self._jobs[i]
                    return
        raise JobNotFoundError()

    def count(self) -> int:
        """Número de jobs guardados."""
        with self._lock:
            return len(self._jobs)

    def clear(self) -> None:
        """Vacía el almacén (útil en tests). El contador de ids no se reinicia."""
        with self._lock:
            self._jobs.clear()
