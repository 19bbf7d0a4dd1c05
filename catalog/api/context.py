# catalog/api/context.py
from typing import Any, Dict, Optional

from catalog.api.auth.token import verify_token
from catalog.api.errors import InvalidToken
from catalog.api.utils.logger import write_log

BEARER_PREFIX = "bearer "


def extract_bearer_token(auth_header: Optional[str]) -> Optional[str]:
    if not auth_header or not auth_header.lower().startswith(BEARER_PREFIX):
        return None
    return auth_header[len(BEARER_PREFIX):].strip() or None


def build_context(auth_header: Optional[str], repository, notifier=None, request=None) -> Dict[str, Any]:
    """
    Per-request context. A missing, malformed or unverifiable bearer token yields an
    anonymous context; only resolvers that require a user turn that into an error.
    """
    context = {
        "request": request,
        "repository": repository,
        "notifier": notifier,
        "current_user": None,
    }

    token = extract_bearer_token(auth_header)
    if not token:
        return context

    try:
        identity = verify_token(token)
    except InvalidToken as e:
        write_log({"event": "context_invalid_token", "reason": e.message}, stream="auth")
        return context

    user = repository.find_user_by_id(identity["id"])
    context["current_user"] = user
    write_log({"event": "context_user_loaded", "username": identity["username"], "found": user is not None}, stream="auth")
    return context
