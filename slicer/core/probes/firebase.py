from __future__ import annotations
import logging
from typing import Optional

import requests

from ..http import SESSION
from ..models import ProbeResult, SecretCandidate, Verdict
from ..utils import read_prefix

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10
EVIDENCE_BYTES = 200

def firebase_probe_url(db_url: str) -> str:
    return f"{db_url}/.json"

def probe_firebase(
    candidate: SecretCandidate,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> ProbeResult:
    """
    Read the database root through the REST API. Rules that deny public reads
    answer 401; anything that reads back is open to the world.

    An open root is the whole database, so the body is streamed and only the
    first EVIDENCE_BYTES are read before the connection is released.
    """
    s = session or SESSION
    url = firebase_probe_url(candidate.value)
    if not candidate.value:
        return ProbeResult(candidate, url, Verdict.SKIPPED)

    logger.debug("GET %s", url)
    try:
        with s.get(url, timeout=timeout, stream=True) as r:
            status = r.status_code
            evidence = read_prefix(r, EVIDENCE_BYTES) if status < 400 else None
    except requests.RequestException as e:
        logger.warning("Firebase probe failed for %s: %s", url, e)
        return ProbeResult(candidate, url, Verdict.UNREACHABLE, evidence=str(e))

    if status == 401:
        return ProbeResult(candidate, url, Verdict.PROTECTED, status)
    if status < 400:
        return ProbeResult(candidate, url, Verdict.EXPOSED, status, evidence)
    # 404 (no such db), 423 (deactivated) ...: nothing readable
    return ProbeResult(candidate, url, Verdict.PROTECTED, status)
