from __future__ import annotations

import json

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import ValidationError

from app.core.errors import BadRequestError, InternalError, JobsApiError
from app.models.job import Job
from app.services.job_service import JobService
from app.services.job_store import get_job_service

router = APIRouter(tags=["jobs"])


def require_job_id(job_id: str) -> str:
    """
    Valida el id de la ruta. Un id vacío (o sólo espacios) es un 400.
    """
    if not job_id.strip():
        raise BadRequestError("no id given")
    return job_id


async def read_job_body(request: Request) -> Job:
    """
    Decodifica el cuerpo como un Job sin mirar la cabecera Content-Type.

    Un `null` equivale a un payload vacío. Cuerpo vacío, JSON roto o JSON que
    no describe un Job son un 400.
    """
    raw = await request.body()
    try:
        data = json.loads(raw)
        return Job.model_validate({} if data is None else data)
    except (ValueError, ValidationError) as e:
        raise BadRequestError("invalid request body") from e


@router.post("/", summary="Create a job")
async def create_job(
    request: Request,
    job: Job = Depends(read_job_body),
    service: JobService = Depends(get_job_service),
) -> Response:
    try:
        created = service.create(job)
    except JobsApiError:
        raise
    except Exception as e:
        raise BadRequestError(str(e)) from e

    # El cuerpo va vacío; el id asignado viaja en la cabecera Location
    location = str(request.url_for("get_job", job_id=created.id))
    return Response(status_code=status.HTTP_200_OK, headers={"Location": location})


@router.get("/", summary="List all jobs in creation order")
async def list_jobs(service: JobService = Depends(get_job_service)) -> list:
    try:
        jobs = service.get_all()
    except JobsApiError:
        raise
    except Exception as e:
        raise InternalError(str(e)) from e

    return [job.model_dump() for job in jobs]


@router.get("/{job_id}", summary="Get a job")
async def get_job(
    job_id: str = Depends(require_job_id),
    service: JobService = Depends(get_job_service),
) -> dict:
    return service.get(job_id).model_dump()


@router.put("/{job_id}", summary="Replace the payload of a job")
async def update_job(
    job_id: str = Depends(require_job_id),
    job: Job = Depends(read_job_body),
    service: JobService = Depends(get_job_service),
) -> Response:
    service.update(job_id, job)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{job_id}", summary="Delete a job")
async def delete_job(
    job_id: str = Depends(require_job_id),
    service: JobService = Depends(get_job_service),
) -> Response:
    service.delete(job_id)
    return Response(status_code=status.HTTP_200_OK)
