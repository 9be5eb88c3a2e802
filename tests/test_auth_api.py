"""
Pruebas HTTP de inicio de sesión y validación de tokens.
"""
import pytest

from rbac_admin.security.jwt_utils import create_access_token


@pytest.fixture
async def registered_user(seed):
    return await seed.user(username="ana", password="secreto123")


async def _login(client, username="ana", password="secreto123"):
    return await client.post("/api/auth/login", json={"username": username, "password": password})


class TestLogin:

    async def test_login_returns_token_and_user(self, client, registered_user):
        response = await _login(client)

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == registered_user.id
        assert body["username"] == "ana"
        assert body["token"]
        assert body["user"]["personId"] == registered_user.person_id

    async def test_wrong_password_is_401(self, client, registered_user):
        response = await _login(client, password="otra")

        assert response.status_code == 401
        assert response.json() == {"message": "Credenciales inválidas"}

    async def test_unknown_user_is_401(self, client):
        assert (await _login(client, username="nadie")).status_code == 401

    async def test_missing_fields_is_400(self, client):
        response = await client.post("/api/auth/login", json={"username": "ana"})

        assert response.status_code == 400
        assert "message" in response.json()

    async def test_inactive_user_is_401(self, client, registered_user):
        assert (await client.patch(f"/api/user/{registered_user.id}/disable")).status_code == 200

        response = await _login(client)

        assert response.status_code == 401


class TestTokenEndpoints:

    async def test_validate_and_logout_with_token(self, client, registered_user):
        token = (await _login(client)).json()["token"]
        headers = {"Authorization": f"Bearer {token}"}

        validate = await client.get("/api/auth/validate", headers=headers)
        logout = await client.post("/api/auth/logout", headers=headers)

        assert validate.status_code == 200
        assert validate.json()["valid"] is True
        assert validate.json()["username"] == "ana"
        assert logout.status_code == 200
        assert "message" in logout.json()

    async def test_validate_without_token_is_401(self, client):
        response = await client.get("/api/auth/validate")

        assert response.status_code == 401
        assert "message" in response.json()

    async def test_invalid_token_is_401(self, client):
        headers = {"Authorization": "Bearer no-es-un-token"}

        assert (await client.get("/api/auth/validate", headers=headers)).status_code == 401
        assert (await client.post("/api/auth/logout", headers=headers)).status_code == 401

    async def test_token_without_session_type_is_401(self, client):
        token = create_access_token({"sub": "1", "username": "ana"})

        response = await client.get("/api/auth/validate", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401


class TestUserAuthenticate:

    async def test_returns_user_without_token(self, client, registered_user):
        response = await client.post("/api/user/authenticate", json={"username": "ana", "password": "secreto123"})

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == registered_user.id
        assert body["username"] == "ana"
        assert "token" not in body
        assert "password" not in body

    async def test_wrong_password_is_401(self, client, registered_user):
        response = await client.post("/api/user/authenticate", json={"username": "ana", "password": "otra"})

        assert response.status_code == 401
        assert response.json() == {"message": "Nombre de usuario o contraseña incorrectos"}

    async def test_missing_password_is_400(self, client):
        response = await client.post("/api/user/authenticate", json={"username": "ana"})

        assert response.status_code == 400
        assert "message" in response.json()
