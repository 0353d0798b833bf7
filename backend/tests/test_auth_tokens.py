from fastapi.testclient import TestClient
from app.main import app
from app.security import create_access_token, decode_token

client = TestClient(app)

def test_requires_auth():
    # no token -> 401s
    assert client.get("/sessions").status_code == 401
    assert client.post("/sessions", json={"notes": "x"}).status_code == 401
    assert client.get("/workouts").status_code == 401

def test_token_expired(make_user):
    user_id, _ = make_user()
    # craft an already-expired token for the same user id
    expired = create_access_token(str(user_id), expires_minutes=-1)
    r = client.get("/workouts", headers={"Authorization": f"Bearer {expired}"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Token expired"

def test_garbage_token():
    r = client.get("/workouts", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Not authenticated"

def test_token_for_unknown_user():
    tok = create_access_token("987654321")
    assert client.get("/workouts", headers={"Authorization": f"Bearer {tok}"}).status_code == 401

def test_non_numeric_subject():
    tok = create_access_token("someone@example.com")
    assert client.get("/workouts", headers={"Authorization": f"Bearer {tok}"}).status_code == 401

def test_token_round_trip_carries_extra_claims():
    payload = decode_token(create_access_token("42", extra={"scope": "tracking"}))
    assert payload["sub"] == "42"
    assert payload["scope"] == "tracking"
    assert payload["exp"] > payload["iat"]
