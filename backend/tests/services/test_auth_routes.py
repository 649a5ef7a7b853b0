"""Auth Routes — registration and login through the HTTP surface.

Invariants:
    - Duplicate email: first registration 201, second 400 EMAIL_ALREADY_EXISTS
    - Correct login returns a token the Access Gate accepts
    - Unknown email → USER_NOT_FOUND, wrong password → INVALID_CREDENTIALS
    - User view never includes the password hash
"""

from sqlalchemy import select

from crowdfund.models.user import User

CREDENTIALS = {"email": "ada@example.com", "password": "analytical-engine"}


async def _register(client, **overrides):
    body = {"name": "Ada Lovelace", **CREDENTIALS, **overrides}
    return await client.post("/register", json=body)


async def test_register_returns_201_with_user(client):
    res = await _register(client)
    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "User created"
    assert body["user"]["email"] == "ada@example.com"
    assert body["user"]["role"] == "user"
    assert "password" not in body["user"]


async def test_register_stores_hash_not_plaintext(client, test_session_factory):
    await _register(client)
    async with test_session_factory() as db:
        user = (await db.execute(select(User))).scalar_one()
    assert user.password != CREDENTIALS["password"]
    assert user.password.startswith("$2b$")


async def test_register_duplicate_email_rejected(client):
    first = await _register(client)
    second = await _register(client, name="Someone Else")
    assert first.status_code == 201
    assert second.status_code == 400
    assert second.json()["error"]["code"] == "EMAIL_ALREADY_EXISTS"
    assert second.json()["error"]["message"] == "Email already exists"


async def test_register_with_admin_role(client):
    res = await _register(client, role="admin")
    assert res.json()["user"]["role"] == "admin"


async def test_register_missing_fields_is_validation_error(client):
    res = await client.post("/register", json={"email": "ada@example.com"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_login_returns_token_accepted_by_gate(client):
    await _register(client)
    res = await client.post("/login", json=CREDENTIALS)
    assert res.status_code == 200
    token = res.json()["token"]

    created = await client.post(
        "/projects",
        json={"title": "Difference Engine", "description": "Brass", "goal": 100},
        headers={"Authorization": token},
    )
    assert created.status_code == 201


async def test_login_unknown_email(client):
    res = await client.post("/login", json=CREDENTIALS)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "USER_NOT_FOUND"
    assert res.json()["error"]["message"] == "User not found"


async def test_login_wrong_password(client):
    await _register(client)
    res = await client.post(
        "/login", json={**CREDENTIALS, "password": "wrong"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_CREDENTIALS"
    assert res.json()["error"]["message"] == "Invalid credentials"


async def test_login_with_seeded_user(client, seed_user):
    res = await client.post(
        "/login", json={"email": "ada@example.com", "password": "engine"},
    )
    assert res.status_code == 200
    assert res.json()["token"]
