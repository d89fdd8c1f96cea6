from __future__ import annotations
import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import requests

from ..http import SESSION
from ..models import ProbeResult, SecretCandidate, SecretCategory
from .firebase import DEFAULT_TIMEOUT, probe_firebase
from .google import probe_google_key

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 4

@dataclass(frozen=True)
class Probe:
    """One request: a candidate, plus the endpoint template for Google keys."""
    candidate: SecretCandidate
    endpoint: Optional[str] = None

    def run(self, session: requests.Session, timeout: float) -> ProbeResult:
        if self.candidate.category is SecretCategory.FIREBASE_DB_URL:
            return probe_firebase(self.candidate, session=session, timeout=timeout)
        return probe_google_key(self.candidate, self.endpoint or "", session=session, timeout=timeout)

def plan_probes(candidates: Iterable[SecretCandidate], endpoints: Sequence[str]) -> List[Probe]:
    """Candidates in declaration order; a Google key fans out to every endpoint."""
    plan: List[Probe] = []
    for c in candidates:
        if not c.category.probed:
            continue
        if c.category is SecretCategory.FIREBASE_DB_URL:
            plan.append(Probe(c))
        else:
            plan.extend(Probe(c, ep) for ep in endpoints)
    return plan

def run_probes(
    candidates: Iterable[SecretCandidate],
    endpoints: Sequence[str],
    session: Optional[requests.Session] = None,
    max_workers: int = DEFAULT_WORKERS,
    timeout: float = DEFAULT_TIMEOUT,
    cancel: Optional[threading.Event] = None,
) -> List[ProbeResult]:
    """
    Run every probe on a bounded thread pool.

    Results come back in plan order whatever order the requests finish in.
    If the caller is interrupted, queued probes are cancelled and the session
    is closed under the ones in flight. A worker that still gets an answer
    sees `cancel` and drops it. The exception propagates with no results
    returned and without waiting for the workers.
    """
    s = session or SESSION
    stop = cancel or threading.Event()
    plan = plan_probes(candidates, endpoints)
    if not plan:
        return []

    slots: List[Optional[ProbeResult]] = [None] * len(plan)

    def _work(i: int, probe: Probe) -> Tuple[int, Optional[ProbeResult]]:
        if stop.is_set():
            return i, None
        res = probe.run(s, timeout)
        # an answer that lands after cancellation is not reported
        return i, None if stop.is_set() else res

    logger.debug("Running %d probes on %d workers", len(plan), max_workers)
    pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="probe")
    try:
        futures = [pool.submit(_work, i, p) for i, p in enumerate(plan)]
        for fut in as_completed(futures):
            i, res = fut.result()
            slots[i] = res
    except BaseException:
        stop.set()
        pool.shutdown(wait=False, cancel_futures=True)
        logger.debug("Probing cancelled, closing session")
        s.close()
        raise
    pool.shutdown(wait=True)
    return [r for r in slots if r is not None]
