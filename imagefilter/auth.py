"""
Bearer token check for protected routes.

Expects ``Authorization: Bearer <token>``: exactly two single-space separated
segments, the second being a JWT signed with the configured secret.
"""
from fastapi import Request
from jose import JWTError, jwt

from imagefilter.config import Settings
from imagefilter.errors import AuthMalformedError, AuthMissingError, AuthVerificationError


def extract_token(authorization: str | None) -> str:
    if not authorization:
        raise AuthMissingError()
    token_bearer = authorization.split(" ")
    if len(token_bearer) != 2:
        raise AuthMalformedError()
    return token_bearer[1]


def verify_token(token: str, settings: Settings) -> dict:
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=settings.jwt_algorithms)
    except JWTError as e:
        print(f"[auth] Token verification failed: {e}")
        raise AuthVerificationError() from e


async def require_auth(request: Request) -> None:
    settings: Settings = request.app.state.settings
    token = extract_token(request.headers.get("authorization"))
    verify_token(token, settings)
