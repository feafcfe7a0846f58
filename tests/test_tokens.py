import datetime as dt

import jwt
import pytest

from diet_tracker.errors import Forbidden, TokenExpired, TokenInvalid
from diet_tracker.utils.auth import create_token, decode_token


def _encode(payload, secret="test-secret"):
    return jwt.encode(payload, secret, algorithm="HS256")


def test_round_trip_claims(app):
    with app.app_context():
        token = create_token(42, "alice@x.com")
        assert decode_token(token) == {"user_id": 42, "email": "alice@x.com"}


def test_token_expires_after_24_hours(app):
    with app.app_context():
        token = create_token(1, "a@x.com")
        payload = jwt.decode(token, "test-secret", algorithms=["HS256"])
    assert payload["exp"] - payload["iat"] == 24 * 60 * 60


def test_expired_token_rejected(app):
    past = int((dt.datetime.now(dt.timezone.utc) - dt.timedelta(hours=25)).timestamp())
    token = _encode({"sub": "1", "email": "a@x.com", "iat": past, "exp": past + 3600})
    with app.app_context():
        with pytest.raises(TokenExpired):
            decode_token(token)


@pytest.mark.parametrize("token", [
    "not-a-token",
    "a.b.c",
    "",
])
def test_malformed_token_rejected(app, token):
    with app.app_context():
        with pytest.raises(TokenInvalid):
            decode_token(token)


def test_wrong_signature_rejected(app):
    exp = int((dt.datetime.now(dt.timezone.utc) + dt.timedelta(hours=1)).timestamp())
    token = _encode({"sub": "1", "email": "a@x.com", "exp": exp}, secret="other-secret")
    with app.app_context():
        with pytest.raises(TokenInvalid):
            decode_token(token)


@pytest.mark.parametrize("payload", [
    {"email": "a@x.com"},                  # no sub
    {"sub": "abc", "email": "a@x.com"},    # non numeric sub
    {"sub": "1"},                          # no email
])
def test_missing_or_bad_claims_rejected(app, payload):
    payload = dict(payload, exp=int((dt.datetime.now(dt.timezone.utc) + dt.timedelta(hours=1)).timestamp()))
    with app.app_context():
        with pytest.raises(TokenInvalid):
            decode_token(_encode(payload))


def test_token_errors_are_forbidden():
    assert issubclass(TokenExpired, Forbidden)
    assert issubclass(TokenInvalid, Forbidden)
    assert TokenExpired.status == TokenInvalid.status == 403
