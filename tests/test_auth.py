from datetime import datetime, timedelta, timezone

import pytest

from jobportal_api.auth import AuthError, issue_token, validate_token
from conftest import SECRET


def test_issue_then_validate_returns_identity():
    token = issue_token({"email": "a@x.io", "name": "A"}, SECRET)
    assert validate_token(token, SECRET) == {"email": "a@x.io", "name": "A"}


def test_validate_rejects_missing_token():
    with pytest.raises(AuthError):
        validate_token(None, SECRET)
    with pytest.raises(AuthError):
        validate_token("", SECRET)


def test_validate_rejects_wrong_secret():
    token = issue_token({"email": "a@x.io"}, SECRET)
    with pytest.raises(AuthError):
        validate_token(token, "another-secret-that-is-also-long-enough")


def test_validate_rejects_expired_token():
    two_hours_ago = datetime.now(timezone.utc) - timedelta(hours=2)
    token = issue_token({"email": "a@x.io"}, SECRET, ttl_seconds=3600, now=two_hours_ago)
    with pytest.raises(AuthError, match="expired"):
        validate_token(token, SECRET)


def test_validate_rejects_garbage():
    with pytest.raises(AuthError):
        validate_token("not.a.jwt", SECRET)


def test_login_sets_httponly_cookie(client):
    resp = client.post("/jwt", json={"email": "me@x.io"})
    assert resp.status_code == 200
    assert resp.json() == {"success": True}

    set_cookie = resp.headers["set-cookie"]
    assert set_cookie.startswith("token=")
    assert "HttpOnly" in set_cookie
    assert "Max-Age=3600" in set_cookie
    assert "Secure" not in set_cookie

    identity = validate_token(resp.cookies["token"], SECRET)
    assert identity["email"] == "me@x.io"


def test_login_requires_email(client):
    assert client.post("/jwt", json={"name": "nobody"}).status_code == 422


def test_login_token_opens_my_applications(client):
    token = client.post("/jwt", json={"email": "me@x.io"}).cookies["token"]
    resp = client.get(
        "/job-applications", params={"email": "me@x.io"}, headers={"Cookie": f"token={token}"}
    )
    assert resp.status_code == 200
    assert resp.json() == []
