from __future__ import annotations
import logging
from typing import Optional

import requests

from ..http import SESSION
from ..utils import read_prefix, redact_key
from ..models import ProbeResult, SecretCandidate, Verdict

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10
NOT_AUTHORIZED = "API project is not authorized"
# error payloads are small JSON; a static map tile is not worth downloading
BODY_LIMIT = 64 * 1024

def probe_google_key(
    candidate: SecretCandidate,
    endpoint: str,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> ProbeResult:
    """Call one Google API with the key appended to the endpoint template."""
    key = candidate.value
    url = f"{endpoint}{key}"
    if not key:
        return ProbeResult(candidate, url, Verdict.SKIPPED)

    s = session or SESSION
    logger.debug("GET %s", redact_key(url))
    try:
        with s.get(url, timeout=timeout, stream=True) as r:
            status = r.status_code
            body = read_prefix(r, BODY_LIMIT)
    except requests.RequestException as e:
        logger.warning("Google API probe failed for %s: %s", endpoint, e)
        return ProbeResult(candidate, url, Verdict.UNREACHABLE, evidence=str(e))

    # Either signal alone means the key is restricted for this API
    if status == 403 or NOT_AUTHORIZED in body:
        return ProbeResult(candidate, url, Verdict.PROTECTED, status)
    return ProbeResult(candidate, url, Verdict.EXPOSED, status, body[:200])
