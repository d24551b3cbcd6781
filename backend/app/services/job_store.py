"""Almacén global de Jobs en memoria.

En este MVP no hay base de datos, así que exponemos una instancia única de
`JobService` (sobre un `InMemoryJobRepository`) que vive mientras el proceso
está en marcha. Los routers la reciben mediante `get_job_service`, que los
tests pueden sustituir con `app.dependency_overrides`.
"""

from app.repositories.memory_job_repository import InMemoryJobRepository
from app.services.job_service import JobService

# Instancia global única para toda la app (MVP en memoria)
job_repository = InMemoryJobRepository()
job_service = JobService(job_repository)


def get_job_service() -> JobService:
    """Dependencia de FastAPI que entrega el servicio compartido."""
    return job_service
