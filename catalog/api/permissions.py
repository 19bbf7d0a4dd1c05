from datetime import datetime, timezone

from catalog.api.errors import NotAuthenticated
from catalog.api.utils.logger import write_log


def current_user(info):
    ctx = getattr(info, "context", {}) or {}
    return ctx.get("current_user")


def require_authenticated(info, operation: str):
    user = current_user(info)
    if user is None:
        write_log({"event": "access_denied", "operation": operation, "reason": "no current user"}, stream="auth")
        log_mutation(None, operation, "denied", "unauthenticated")
        raise NotAuthenticated()
    return user


def log_mutation(username, mutation_name: str, status: str, reason: str = None):
    entry = {
        "event": "mutation_audit",
        "mutation": mutation_name,
        "username": username,
        "status": status,
        "reason": reason,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
    write_log(entry, stream="audit")
