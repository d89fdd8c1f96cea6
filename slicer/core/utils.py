from __future__ import annotations
from pathlib import Path
from typing import List

def list_files(root: Path) -> List[str]:
    """Base names of every file below root, walked in sorted path order."""
    return [p.name for p in sorted(root.rglob("*")) if p.is_file()]

def redact_key(url: str, keep: int = 6) -> str:
    """Shorten a trailing key=<value> so log lines don't carry whole secrets."""
    head, sep, key = url.rpartition("key=")
    if not sep or len(key) <= keep:
        return url
    return f"{head}{sep}{key[:keep]}…"

def read_prefix(r, limit: int) -> str:
    """At most `limit` bytes of a streamed response body, decoded leniently."""
    buf = b""
    for chunk in r.iter_content(chunk_size=min(limit, 8192)):
        buf += chunk
        if len(buf) >= limit:
            break
    return buf[:limit].decode(r.encoding or "utf-8", errors="replace")
