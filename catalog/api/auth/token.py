# catalog/api/auth/token.py
"""
Bearer token helpers.

- sign_token({"username", "id"}) -> signed JWT
- verify_token(token) -> {"username", "id"} or raises InvalidToken

No exp claim is set unless TOKEN_TTL_SECONDS is positive, so by default a token
stays valid for as long as the signing secret does.
"""
from __future__ import annotations
import time
from typing import Any, Dict, Optional

from jose import jwt, JWTError, ExpiredSignatureError

from catalog.api import settings
from catalog.api.errors import InvalidToken
from catalog.api.utils.logger import write_log, token_snippet


def _now() -> int:
    return int(time.time())


def sign_token(identity: Dict[str, Any], secret: Optional[str] = None, ttl: Optional[int] = None) -> str:
    payload = {"username": identity["username"], "id": str(identity["id"])}
    ttl = settings.TOKEN_TTL_SECONDS if ttl is None else ttl
    if ttl and ttl > 0:
        now = _now()
        payload["iat"] = now
        payload["exp"] = now + int(ttl)

    token = jwt.encode(payload, secret or settings.JWT_SECRET, algorithm=settings.ALGORITHM)
    write_log({"event": "token_issued", "username": payload["username"], "expires": payload.get("exp")}, stream="auth")
    return token


def verify_token(token: str, secret: Optional[str] = None) -> Dict[str, Any]:
    if not token:
        raise InvalidToken("missing token")
    try:
        payload = jwt.decode(token, secret or settings.JWT_SECRET, algorithms=[settings.ALGORITHM])
    except ExpiredSignatureError:
        write_log({"event": "token_expired", "token_snippet": token_snippet(token)}, stream="auth")
        raise InvalidToken("token expired")
    except JWTError as e:
        write_log({"event": "token_decode_failed", "error": str(e), "token_snippet": token_snippet(token)}, stream="auth")
        raise InvalidToken()

    if not isinstance(payload, dict) or not payload.get("id") or not payload.get("username"):
        write_log({"event": "token_payload_malformed", "token_snippet": token_snippet(token)}, stream="auth")
        raise InvalidToken("malformed token payload")
    return {"username": payload["username"], "id": payload["id"]}
