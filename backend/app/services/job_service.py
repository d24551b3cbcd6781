"""Servicio de Jobs: capa fina entre los routers y el repositorio.

No transforma ni valida nada; cada método reenvía la llamada al
`JobRepository` inyectado. Así los routers no dependen de ningún
almacenamiento concreto y el repositorio se puede sustituir por una BD.
"""

from __future__ import annotations

import logging
from typing import List

from app.models.job import Job
from app.repositories.job_repository import JobRepository

logger = logging.getLogger(__name__)


class JobService:
    """Gestión de jobs delegada en un repositorio abstracto."""

    def __init__(self, repository: JobRepository) -> None:
        self._repository = repository

    def get(self, job_id: str) -> Job:
        return self._repository.get(job_id)

    def get_all(self) -> List[Job]:
        return self._repository.get_all()

    def create(self, job: Job) -> Job:
        created = self._repository.create(job)
        logger.info("Created job %s", created.id)
        return created

    def update(self, job_id: str, job: Job) -> Job:
        updated = self._repository.update(job_id, job)
        logger.info("Updated job %s", job_id)
        return updated

    def delete(self, job_id: str) -> None:
        self._repository.delete(job_id)
        logger.info("Deleted job %s", job_id)
