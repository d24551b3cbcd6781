import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.repositories.memory_job_repository import InMemoryJobRepository
from app.services.job_service import JobService
from app.services.job_store import get_job_service


@pytest.fixture
def repository():
    return InMemoryJobRepository()


@pytest.fixture
def service(repository):
    return JobService(repository)


@pytest.fixture
def client(service):
    app.dependency_overrides[get_job_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_job_service, None)
