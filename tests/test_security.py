from datetime import timedelta

from jose import jwt

from app.core.config import settings
from app.core.security import SessionPayload, create_session_token, verify_session_token


def test_round_trip():
    token = create_session_token(SessionPayload(user_id="user-1", email="a@example.com", name="A"))

    assert verify_session_token(token) == SessionPayload(user_id="user-1", email="a@example.com", name="A")


def test_expired_token_is_rejected():
    token = create_session_token(
        SessionPayload(user_id="user-1", email="a@example.com", name="A"),
        expires_delta=timedelta(seconds=-10)
    )

    assert verify_session_token(token) is None


def test_wrong_audience_is_rejected():
    token = jwt.encode(
        {"userId": "user-1", "aud": "someone-else", "iss": settings.jwt_issuer},
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm
    )

    assert verify_session_token(token) is None


def test_foreign_signature_is_rejected():
    token = jwt.encode(
        {"userId": "user-1", "aud": settings.jwt_audience, "iss": settings.jwt_issuer},
        "not-the-secret",
        algorithm=settings.jwt_algorithm
    )

    assert verify_session_token(token) is None


def test_garbage_is_rejected():
    assert verify_session_token("not-a-token") is None
