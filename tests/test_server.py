import pytest

from super_services.server import create_app, healthz

SERVICES = ["admin", "audit", "auth", "billing", "gateway", "notification", "search", "user"]


@pytest.mark.parametrize("name", SERVICES)
def test_healthz_endpoint(name):
    app = create_app(name)
    assert app.config["SERVICE_NAME"] == name
    response = app.test_client().get("/healthz")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_healthz_rejects_post():
    response = create_app("auth").test_client().post("/healthz")
    assert response.status_code == 405


def test_unknown_route_is_not_found():
    response = create_app("auth").test_client().get("/missing")
    assert response.status_code == 404


def test_healthz_function_directly():
    app = create_app("gateway")
    with app.test_request_context("/healthz"):
        body, status = healthz()
        assert status == 200
        assert body.get_json() == {"status": "ok"}