"""Bearer token helpers — mint JWTs the app will accept (or deliberately reject).

Usage:
    headers = bearer(user.id)
    token = make_token(user.id, expires_in=timedelta(seconds=-1))  # expired
"""

from datetime import datetime, timedelta, timezone

import jwt

from app.config import get_settings


def make_token(
    subject,
    expires_in: timedelta = timedelta(minutes=5),
    secret: str | None = None,
    **claims,
) -> str:
    settings = get_settings()
    payload = {
        "sub": str(subject),
        "exp": datetime.now(timezone.utc) + expires_in,
        **claims,
    }
    return jwt.encode(
        payload, secret or settings.jwt_secret, algorithm=settings.jwt_algorithm,
    )


def bearer(subject) -> dict:
    return {"Authorization": f"Bearer {make_token(subject)}"}
