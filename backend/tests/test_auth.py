import pytest

from exceptions import AuthenticationError, ValidationError
from services.auth_service import AuthService, hash_token


@pytest.mark.parametrize("path", ["/api/v1/domains", "/api/v1/recipients"])
def test_requests_without_token_are_rejected(app_client, path):
    response = app_client.get(path)

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_requests_with_unknown_token_are_rejected(app_client, user):
    response = app_client.get("/api/v1/domains", headers={"Authorization": "Bearer not-a-real-token"})

    assert response.status_code == 401


def test_health_needs_no_token(app_client):
    response = app_client.get("/health")

    assert response.status_code == 200
    assert response.json()["database"] == "ok"


def test_only_token_hash_is_stored(db_session):
    user, token = AuthService(db_session).create_user("carol")

    assert user.api_token_hash == hash_token(token)
    assert token not in user.api_token_hash


def test_authenticate_resolves_token(db_session, user_and_token):
    user, token = user_and_token

    assert AuthService(db_session).authenticate(token).id == user.id


def test_authenticate_rejects_missing_token(db_session):
    with pytest.raises(AuthenticationError):
        AuthService(db_session).authenticate(None)


def test_usernames_are_unique(db_session, user):
    with pytest.raises(ValidationError) as exc_info:
        AuthService(db_session).create_user(user.username)

    assert "username" in exc_info.value.invalid_fields


def test_rotated_token_replaces_old_one(db_session, user_and_token):
    user, old_token = user_and_token
    service = AuthService(db_session)

    new_token = service.rotate_token(user.username)

    assert service.authenticate(new_token).id == user.id
    with pytest.raises(AuthenticationError):
        service.authenticate(old_token)
