from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import select

from invoicedash.database.db import get_db
from invoicedash.main import create_app
from invoicedash.models import Invoice

TEST_PASSWORD = "123456"


@pytest.fixture
def app(session_factory):
    app = create_app()

    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


def _invoice_ids(session):
    session.expire_all()
    return list(session.scalars(select(Invoice.id)))


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_create_redirects_and_invalidates_listing(app, client, session, customer):
    cache = app.state.page_cache

    response = client.post(
        "/dashboard/invoices/create",
        data={"customerId": customer.id, "amount": "42.50", "status": "pending"},
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/dashboard/invoices"
    assert cache.generation("/dashboard/invoices") == 1
    assert len(_invoice_ids(session)) == 1


def test_create_with_bad_fields_returns_form_state(app, client, session):
    cache = app.state.page_cache

    response = client.post(
        "/dashboard/invoices/create",
        data={"amount": "-1", "status": "pending"},
        follow_redirects=False,
    )

    assert response.status_code == 422
    assert response.json() == {
        "errors": {
            "customerId": ["Please select a customer."],
            "amount": ["Please enter an amount greater than $0."],
        },
        "message": "Missing Fields. Failed to Create Invoice.",
    }
    assert cache.generation("/dashboard/invoices") == 0
    assert _invoice_ids(session) == []


def test_edit_redirects_to_listing(client, session, customer):
    client.post(
        "/dashboard/invoices/create",
        data={"customerId": customer.id, "amount": "10", "status": "pending"},
        follow_redirects=False,
    )
    (invoice_id,) = _invoice_ids(session)

    response = client.post(
        f"/dashboard/invoices/{invoice_id}/edit",
        data={"customerId": customer.id, "amount": "12.34", "status": "paid"},
        follow_redirects=False,
    )

    assert response.status_code == 303
    session.expire_all()
    assert session.get(Invoice, invoice_id).amount == 1234


def test_delete_returns_message_without_redirect(app, client, session, customer):
    client.post(
        "/dashboard/invoices/create",
        data={"customerId": customer.id, "amount": "10", "status": "pending"},
        follow_redirects=False,
    )
    (invoice_id,) = _invoice_ids(session)
    before = app.state.page_cache.generation("/dashboard/invoices")

    response = client.post(f"/dashboard/invoices/{invoice_id}/delete", follow_redirects=False)

    assert response.status_code == 200
    assert response.json() == {"message": "Deleted Invoice."}
    assert "location" not in response.headers
    assert app.state.page_cache.generation("/dashboard/invoices") == before + 1
    assert _invoice_ids(session) == []


def test_login_success_redirects_to_dashboard(client, user):
    response = client.post(
        "/login",
        data={"email": user.email, "password": TEST_PASSWORD},
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/dashboard"


def test_login_with_wrong_password_is_rejected(client, user):
    response = client.post(
        "/login",
        data={"email": user.email, "password": "not-the-password"},
        follow_redirects=False,
    )

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid credentials."}


def test_create_with_oversized_amount_is_a_field_error(client, session, customer):
    response = client.post(
        "/dashboard/invoices/create",
        data={"customerId": customer.id, "amount": "1e30", "status": "paid"},
        follow_redirects=False,
    )

    assert response.status_code == 422
    assert response.json()["errors"] == {"amount": ["Please enter an amount greater than $0."]}
    assert _invoice_ids(session) == []
