from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, jwt

from app.core.config import settings


@dataclass(frozen=True)
class SessionPayload:
    """Identity carried by a session token"""
    user_id: str
    email: str
    name: str


def create_session_token(payload: SessionPayload, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed session token"""
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(days=settings.session_max_age_days))

    to_encode: Dict[str, Any] = {
        "sub": payload.user_id,
        "userId": payload.user_id,
        "email": payload.email,
        "name": payload.name,
        "iat": now,
        "exp": expire,
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_session_token(token: str) -> Optional[SessionPayload]:
    """Validate a session token; None when it is invalid or expired"""
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
        )
    except JWTError:
        return None

    user_id = payload.get("userId") or payload.get("sub")
    if not user_id:
        return None

    return SessionPayload(
        user_id=user_id,
        email=payload.get("email", ""),
        name=payload.get("name", ""),
    )

