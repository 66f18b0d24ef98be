"""Tests for registration, login and the /me endpoints."""

from tests.fixtures.user_fixtures import USER_PASSWORD


def _register(client, faker, email=None, password="hunter22"):
    return client.post(
        "/users/register",
        json={
            "email": email or faker.unique.free_email(),
            "password": password,
            "name": faker.name(),
        },
    )


def test_register(anonymous_client, faker):
    email = faker.unique.free_email()
    response = _register(anonymous_client, faker, email=email)
    assert response.status_code == 201
    data = response.json()
    assert data["email"] == email.lower()
    assert "password" not in data
    assert "password_hash" not in data


def test_register_duplicate_email(anonymous_client, faker, setup_user):
    response = _register(anonymous_client, faker, email=setup_user.email.upper())
    assert response.status_code == 409


def test_register_short_password(anonymous_client, faker):
    assert _register(anonymous_client, faker, password="123").status_code == 422


def test_login_and_me(anonymous_client, setup_user):
    response = anonymous_client.post(
        "/users/login", json={"email": setup_user.email, "password": USER_PASSWORD}
    )
    assert response.status_code == 200
    token = response.json()
    assert token["token_type"] == "bearer"

    me = anonymous_client.get(
        "/me", headers={"Authorization": f"Bearer {token['access_token']}"}
    )
    assert me.status_code == 200
    assert me.json()["id"] == str(setup_user.id)


def test_login_wrong_password(anonymous_client, setup_user):
    response = anonymous_client.post(
        "/users/login", json={"email": setup_user.email, "password": "wrong-pass"}
    )
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid credentials"


def test_login_unknown_email(anonymous_client, faker):
    response = anonymous_client.post(
        "/users/login",
        json={"email": faker.unique.free_email(), "password": USER_PASSWORD},
    )
    assert response.status_code == 401


def test_me_requires_token(anonymous_client):
    assert anonymous_client.get("/me").status_code == 401


def test_me_rejects_garbage_token(anonymous_client):
    response = anonymous_client.get("/me", headers={"Authorization": "Bearer nope"})
    assert response.status_code == 401


def test_update_me(client, setup_user):
    response = client.patch("/me", json={"name": "  New Name "})
    assert response.status_code == 200
    assert response.json()["name"] == "New Name"
    assert response.json()["email"] == setup_user.email


def test_update_me_email_taken(client, setup_other_user):
    response = client.patch("/me", json={"email": setup_other_user.email})
    assert response.status_code == 409


def test_update_me_password(client, anonymous_client, setup_user):
    assert client.patch("/me", json={"password": "brand-new"}).status_code == 200
    response = anonymous_client.post(
        "/users/login", json={"email": setup_user.email, "password": "brand-new"}
    )
    assert response.status_code == 200


def test_register_multibyte_password_within_limit(anonymous_client, faker):
    response = _register(anonymous_client, faker, password="é" * 36)
    assert response.status_code == 201


def test_register_multibyte_password_over_limit(anonymous_client, faker):
    response = _register(anonymous_client, faker, password="é" * 40)
    assert response.status_code == 422


def test_register_blank_name(anonymous_client, faker):
    response = anonymous_client.post(
        "/users/register",
        json={
            "email": faker.unique.free_email(),
            "password": "hunter22",
            "name": "   ",
        },
    )
    assert response.status_code == 422


def test_update_me_blank_name(client, setup_user):
    response = client.patch("/me", json={"name": "   "})
    assert response.status_code == 422
    assert client.get("/me").json()["name"] == setup_user.name
