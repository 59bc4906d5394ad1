import pytest
from fastapi.testclient import TestClient

ADMIN_SECRET = "test-admin-secret"


@pytest.fixture()
def client(monkeypatch):
    """The storefront app, without its startup phase (tests seed their own data)."""
    monkeypatch.setenv("ADMIN_SECRET", ADMIN_SECRET)

    from app import app

    return TestClient(app)


@pytest.fixture()
def admin_headers():
    return {"X-Admin-Secret": ADMIN_SECRET}


@pytest.fixture()
def order_body():
    return {
        "items": [{"id": 1, "name": "A2 Gir Cow Ghee", "quantity": 2, "price": 450}],
        "total": 900,
        "user": {
            "firstname": "Krishna",
            "lastname": "Das",
            "email": "krishna@example.com",
            "phone": "9876543210",
            "address1": "12 Temple Road",
            "city": "Vrindavan",
            "state": "UP",
            "zip": "281121",
        },
    }
