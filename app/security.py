import logging

import jwt
from fastapi import Request

from app.exceptions.custom import AuthenticationError
from app.schemas.user import CurrentUser

logger = logging.getLogger(__name__)

AUTH_COOKIE = "auth_token"
ALGORITHM = "HS256"


def extract_token(request: Request) -> str | None:
    """Cookie first, then ``Authorization: Bearer``."""
    token = request.cookies.get(AUTH_COOKIE)
    if token:
        return token
    header = request.headers.get("authorization", "")
    if header.startswith("Bearer "):
        return header.split(" ", 1)[1].strip() or None
    return None


def decode_token(token: str, secret: str) -> CurrentUser:
    try:
        claims = jwt.decode(token, secret, algorithms=[ALGORITHM])
    except jwt.PyJWTError as exc:
        logger.info("Rejected auth token: %s", exc)
        raise AuthenticationError("Invalid token") from exc

    user_id = claims.get("userId")
    if not user_id:
        raise AuthenticationError("Invalid token")
    return CurrentUser(
        userId=str(user_id),
        role=claims.get("role") or "user",
        email=claims.get("email"),
    )
