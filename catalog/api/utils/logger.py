# catalog/api/utils/logger.py
import json
from datetime import datetime, timezone


# Basic structured logging function
def write_log(entry: dict, stream: str = "default"):
    entry = dict(entry)
    entry.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
    entry.setdefault("stream", stream)
    print(json.dumps(entry, ensure_ascii=False, default=str))


def token_snippet(token: str) -> str:
    # never log a full bearer token
    return (token or "")[:12]
