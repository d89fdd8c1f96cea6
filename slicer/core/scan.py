from __future__ import annotations
import logging
import threading
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Union

import requests

from .config import Config, PathEntry
from .document import ResourceDocument, load_document
from .errors import MalformedDocumentError, MissingInputError
from .manifest import parse_manifest
from .intents import HEADER as FILTER_HEADER
from .models import ProbeResult, Section, SecretCategory, Verdict
from .probes import run_probes
from .secrets import extract_candidates, manifest_api_keys
from .surface import attack_surface
from .utils import list_files

logger = logging.getLogger(__name__)

Progress = Callable[[str], None]

DIR_TITLES = {"xml": "XML-files", "raw": "raw-files"}

# ---- manifest ----------------------------------------------------------------
def manifest_section(doc: ResourceDocument, path: str = "") -> Section:
    m = parse_manifest(doc)
    sec = Section("Manifest", path or str(doc.path))
    sec.add(f"Backup allowed: {m.allow_backup}", "finding" if m.allow_backup.lower() == "true" else "plain")
    sec.add(f"Debuggable: {m.debuggable}", "finding" if m.debuggable.lower() == "true" else "plain")

    for kind, exposed in attack_surface(m).items():
        sec.add("")
        sec.add(f"{kind.value}:", "heading")
        for c in exposed:
            sec.add(f"\t{c.name}:", "finding")
            sec.add(f"\tPermission: {c.permission}")
            for line in c.intent_lines:
                sec.add(f"\t{line}" if line == FILTER_HEADER else f"\t\t{line}")

    sec.add("")
    sec.add("Apikeys-in-manifest:", "heading")
    for name, value in manifest_api_keys(m):
        sec.add(f"\t- {name}: {value}", "finding")
    return sec

# ---- strings -----------------------------------------------------------------
def _render_probe(res: ProbeResult, sec: Section) -> None:
    firebase = res.candidate.category is SecretCategory.FIREBASE_DB_URL
    if res.verdict is Verdict.UNREACHABLE:
        sec.add("Couldn't connect to Firebase" if firebase
                else "Unable to connect to the Google API", "notice")
    elif firebase and res.verdict is Verdict.EXPOSED:
        sec.add(f"\t- {res.url}: Is open to public", "finding")
    elif firebase and res.verdict is Verdict.PROTECTED:
        why = "Permission Denied" if res.status == 401 else f"Not readable (HTTP {res.status})"
        sec.add(f"\t- {res.url}: {why}")
    elif res.verdict is Verdict.EXPOSED:
        sec.add(f"\t- {res.url}: {res.status}", "finding")
    # restricted / skipped Google keys are not reported

def strings_section(
    doc: ResourceDocument,
    cfg: Config,
    path: str = "",
    session: Optional[requests.Session] = None,
    cancel: Optional[threading.Event] = None,
) -> Section:
    candidates = extract_candidates(doc)
    results = run_probes(
        candidates, cfg.google_endpoints, session=session,
        max_workers=cfg.max_workers, timeout=cfg.timeout, cancel=cancel,
    )
    sec = Section("Strings", path or str(doc.path))
    pending: List[ProbeResult] = list(results)
    for cand in candidates:
        if cand.category is SecretCategory.GENERIC_API_KEY:
            sec.add(f"\t- {cand.resource_name}: {cand.raw_value}", "finding")
            continue
        while pending and pending[0].candidate is cand:
            _render_probe(pending.pop(0), sec)
    return sec

# ---- directories -------------------------------------------------------------
def directory_section(root: Path, kind: str, path: str = "") -> Section:
    sec = Section(DIR_TITLES.get(kind, f"{root.name}-files"), path or str(root))
    for name in list_files(root):
        sec.add(f"\t- {name}")
    return sec

# ---- driver ------------------------------------------------------------------
def scan_entry(
    base: Path,
    entry: PathEntry,
    cfg: Config,
    session: Optional[requests.Session] = None,
    cancel: Optional[threading.Event] = None,
) -> Section:
    target = base / entry.path
    if not target.exists():
        raise MissingInputError(target)
    if target.is_dir():
        return directory_section(target, entry.kind, entry.path)

    doc = load_document(target)
    if doc.is_manifest:
        return manifest_section(doc, entry.path)
    if doc.is_resources:
        return strings_section(doc, cfg, entry.path, session=session, cancel=cancel)
    raise MalformedDocumentError(target, f"unexpected root element <{doc.kind}>")

def scan(
    base: Union[str, Path],
    cfg: Config,
    session: Optional[requests.Session] = None,
    cancel: Optional[threading.Event] = None,
    progress: Optional[Progress] = None,
) -> Iterator[Section]:
    """
    Yield one section per configured path, in configuration order.
    Stops at the first missing or malformed file.
    """
    root = Path(base)
    total = len(cfg.paths) or 1
    for i, entry in enumerate(cfg.paths, start=1):
        if progress: progress(f"{i}/{total} {entry.path}")
        logger.debug("Scanning %s (%s)", entry.path, entry.kind)
        yield scan_entry(root, entry, cfg, session=session, cancel=cancel)
