import pytest
from fastapi.testclient import TestClient

from app.api.v1.jobs import require_job_id
from app.core.errors import BadRequestError
from app.main import app
from app.repositories.memory_job_repository import InMemoryJobRepository
from app.services.job_service import JobService
from app.services.job_store import get_job_service


def test_create_list_delete_scenario(client):
    assert client.post("/", json={"name": "a"}).status_code == 200
    assert client.post("/", json={"name": "b"}).status_code == 200

    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == [{"id": "0", "name": "a"}, {"id": "1", "name": "b"}]

    response = client.delete("/0")
    assert response.status_code == 200
    assert response.content == b""

    response = client.get("/0")
    assert response.status_code == 404
    assert response.json() == {"error": "Job not found"}

    assert client.get("/").json() == [{"id": "1", "name": "b"}]


def test_create_returns_empty_body_and_location(client):
    response = client.post("/", json={"id": "client-id", "name": "a"})

    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["location"] == "http://testserver/0"
    assert client.get("/0").json() == {"id": "0", "name": "a"}


def test_create_empty_payload(client):
    assert client.post("/", json={}).status_code == 200
    assert client.get("/0").json() == {"id": "0"}


def test_list_empty(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == []
    assert response.headers["content-type"] == "application/json"


def test_get_job(client):
    client.post("/", json={"name": "a", "payload": {"retries": 3, "tags": ["x"]}})

    response = client.get("/0")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.json() == {"id": "0", "name": "a", "payload": {"retries": 3, "tags": ["x"]}}


@pytest.mark.parametrize(
    "body",
    [b"{not json", b"", b"[1, 2]", b'"job"', b'{"id": 5}'],
)
def test_create_rejects_undecodable_body(client, body):
    response = client.post("/", content=body, headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json() == {"error": "invalid request body"}
    assert client.get("/").json() == []


@pytest.mark.parametrize(
    "headers",
    [
        {"Content-Type": "text/plain"},
        {"Content-Type": "application/x-www-form-urlencoded"},
        {},
    ],
)
def test_create_decodes_json_whatever_the_content_type(client, headers):
    response = client.post("/", content=b'{"name": "a"}', headers=headers)

    assert response.status_code == 200
    assert client.get("/0").json() == {"id": "0", "name": "a"}


@pytest.mark.parametrize(
    "headers",
    [{"Content-Type": "text/plain"}, {}],
)
def test_update_decodes_json_whatever_the_content_type(client, headers):
    client.post("/", json={"name": "a"})

    response = client.put("/0", content=b'{"name": "b"}', headers=headers)

    assert response.status_code == 200
    assert client.get("/0").json() == {"id": "0", "name": "b"}


def test_create_null_id_is_ignored(client):
    response = client.post("/", json={"id": None, "name": "a"})

    assert response.status_code == 200
    assert client.get("/0").json() == {"id": "0", "name": "a"}


def test_create_null_body_is_empty_job(client):
    response = client.post("/", content=b"null", headers={"Content-Type": "application/json"})

    assert response.status_code == 200
    assert client.get("/0").json() == {"id": "0"}

def test_update_job(client):
    client.post("/", json={"name": "a"})
    client.post("/", json={"name": "b"})

    response = client.put("/1", json={"id": "9", "name": "bb", "done": True})

    assert response.status_code == 200
    assert response.content == b""
    assert client.get("/").json() == [
        {"id": "0", "name": "a"},
        {"id": "1", "name": "bb", "done": True},
    ]


def test_update_missing_job_is_404(client):
    client.post("/", json={"name": "a"})

    response = client.put("/3", json={"name": "x"})

    assert response.status_code == 404
    assert response.json() == {"error": "Job not found"}


def test_update_rejects_undecodable_body(client):
    client.post("/", json={"name": "a"})

    response = client.put("/0", content=b"{oops", headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json() == {"error": "invalid request body"}
    assert client.get("/0").json() == {"id": "0", "name": "a"}


def test_delete_missing_job_is_404(client):
    response = client.delete("/0")

    assert response.status_code == 404
    assert response.json() == {"error": "Job not found"}


@pytest.mark.parametrize("method", ["get", "delete"])
def test_blank_id_is_400(client, method):
    response = getattr(client, method)("/%20")

    assert response.status_code == 400
    assert response.json() == {"error": "no id given"}


def test_blank_id_on_update_is_400(client):
    response = client.put("/%20", json={"name": "a"})

    assert response.status_code == 400
    assert response.json() == {"error": "no id given"}


def test_require_job_id():
    assert require_job_id("0") == "0"
    with pytest.raises(BadRequestError) as excinfo:
        require_job_id("")
    assert excinfo.value.message == "no id given"
    assert excinfo.value.status_code == 400


class BrokenRepository(InMemoryJobRepository):
    def get_all(self):
        raise RuntimeError("storage unavailable")

    def create(self, job):
        raise ValueError("job rejected")

    def get(self, job_id):
        raise KeyError(job_id)


@pytest.fixture
def broken_client():
    service = JobService(BrokenRepository())
    app.dependency_overrides[get_job_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_job_service, None)


def test_list_backend_failure_is_500(broken_client):
    response = broken_client.get("/")

    assert response.status_code == 500
    assert response.json() == {"error": "storage unavailable"}


def test_create_backend_rejection_is_400(broken_client):
    response = broken_client.post("/", json={"name": "a"})

    assert response.status_code == 400
    assert response.json() == {"error": "job rejected"}


def test_docs_are_disabled_by_default(client):
    # /docs cae en GET /{id} y no existe ningún job con ese id
    assert client.get("/docs").status_code == 404
    assert client.get("/openapi.json").status_code == 404


def test_unexpected_error_is_json_500():
    service = JobService(BrokenRepository())
    app.dependency_overrides[get_job_service] = lambda: service
    try:
        response = TestClient(app, raise_server_exceptions=False).get("/0")
    finally:
        app.dependency_overrides.pop(get_job_service, None)

    assert response.status_code == 500
    assert response.headers["content-type"] == "application/json"
    assert response.json() == {"error": "'0'"}
