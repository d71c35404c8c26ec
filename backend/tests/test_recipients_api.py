import pytest

from models import Domain, Recipient


def test_user_can_get_all_recipients(client, make_recipient, other_user):
    make_recipient()
    make_recipient(email_verified_at=None)
    make_recipient(owner=other_user)

    response = client.get("/api/v1/recipients")

    assert response.status_code == 200
    assert len(response.json()["data"]) == 2


def test_user_can_get_individual_recipient(client, make_recipient):
    recipient = make_recipient()

    response = client.get(f"/api/v1/recipients/{recipient.id}")

    assert response.status_code == 200
    assert response.json()["data"]["email"] == recipient.email


def test_user_cannot_get_another_users_recipient(client, make_recipient, other_user):
    recipient = make_recipient(owner=other_user)

    response = client.get(f"/api/v1/recipients/{recipient.id}")

    assert response.status_code == 404


def test_user_can_create_recipient(client):
    response = client.post("/api/v1/recipients", json={"email": "Me@Example.net"})

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["email"] == "me@example.net"
    assert data["email_verified_at"] is None


def test_user_cannot_create_duplicate_recipient(client, make_recipient):
    make_recipient(email="me@example.net")

    response = client.post("/api/v1/recipients", json={"email": "me@example.net"})

    assert response.status_code == 422
    assert "email" in response.json()["detail"]["errors"]


def test_recipient_email_must_be_valid(client):
    response = client.post("/api/v1/recipients", json={"email": "not-an-email"})

    assert response.status_code == 422
    assert "email" in response.json()["detail"]["errors"]


@pytest.mark.parametrize("email", ["me@-.com", "me@a..com", "me@.example.com", 'a"b<>@x_y.com'])
def test_recipient_with_malformed_address_is_rejected(client, db_session, email):
    response = client.post("/api/v1/recipients", json={"email": email})

    assert response.status_code == 422
    assert response.json()["detail"]["errors"]["email"]
    assert db_session.query(Recipient).count() == 0


def test_recipient_cannot_use_local_domain(client):
    response = client.post("/api/v1/recipients", json={"email": "alias@mailrelay.me"})

    assert response.status_code == 422
    assert "email" in response.json()["detail"]["errors"]


def test_user_can_delete_recipient(client, make_recipient, reload):
    recipient = make_recipient()

    response = client.delete(f"/api/v1/recipients/{recipient.id}")

    assert response.status_code == 204
    assert reload(Recipient, recipient.id) is None


def test_deleting_recipient_clears_domain_default(client, make_recipient, make_domain, reload):
    recipient = make_recipient()
    domain = make_domain(default_recipient_id=recipient.id)

    response = client.delete(f"/api/v1/recipients/{recipient.id}")

    assert response.status_code == 204
    refreshed = reload(Domain, domain.id)
    assert refreshed is not None
    assert refreshed.default_recipient_id is None
