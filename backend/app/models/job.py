"""Definición del modelo de datos de un Job.

Un job es un registro con un `id` asignado por el almacenamiento y un
payload JSON arbitrario. Los campos extra no se validan: se guardan tal cual
y se devuelven en el mismo orden en que llegaron.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class Job(BaseModel):
    """Registro gestionado por la API."""

    # Lo asigna el repositorio; cualquier valor del cliente se ignora al crear
    id: str = ""

    model_config = ConfigDict(extra="allow")

    @field_validator("id", mode="before")
    @classmethod
    def _null_id_is_absent(cls, value: Any) -> Any:
        # `"id": null` se trata igual que no mandar el campo
        return "" if value is None else value

    def with_id(self, job_id: str) -> Job:
        """Copia profunda del job con el id sustituido."""
        job = self.model_copy(deep=True)
        job.id = job_id
        return job
