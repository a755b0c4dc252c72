from conftest import register
from models.log import Log


def test_register_returns_token_and_user_id(client):
    resp = client.post("/api/register", json={"username": "sam", "email": "Sam@Example.com", "password": "pw-123456"})
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "User registered"
    assert isinstance(body["userId"], int)
    assert body["token"]


def test_register_requires_password(client):
    resp = client.post("/api/register", json={"username": "sam", "email": "sam@example.com"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Password is required"}


def test_register_duplicate_email_conflicts(client):
    register(client, email="dup@example.com")
    resp = client.post("/api/register", json={"username": "x", "email": "DUP@example.com", "password": "pw"})
    assert resp.status_code == 409
    assert resp.json()["message"] == "Email already in use."


def test_login_and_me(client):
    register(client, email="me@example.com", username="me", password="correct-horse")
    resp = client.post("/api/login", json={"email": "me@example.com", "password": "correct-horse"})
    assert resp.status_code == 200
    token = resp.json()["token"]

    me = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "me@example.com"
    assert me.json()["username"] == "me"


def test_login_bad_password(client):
    register(client, email="me@example.com", password="correct-horse")
    resp = client.post("/api/login", json={"email": "me@example.com", "password": "wrong"})
    assert resp.status_code == 401
    assert resp.json() == {"message": "Invalid credentials"}


def test_missing_token_is_401(client):
    resp = client.get("/api/loads")
    assert resp.status_code == 401
    assert resp.json() == {"message": "No token provided"}


def test_garbage_token_is_401(client):
    resp = client.get("/api/loads", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401
    assert resp.json() == {"message": "Invalid token"}


def test_register_and_login_are_audited(client):
    register(client, email="audit@example.com", password="pw-123456")
    client.post("/api/login", json={"email": "audit@example.com", "password": "nope"})

    db = client.app.state.db.SessionLocal()
    try:
        entries = [(l.action, l.status) for l in db.query(Log).order_by(Log.id).all()]
    finally:
        db.close()
    assert entries == [("REGISTER", "SUCCESS"), ("LOGIN", "FAIL")]
