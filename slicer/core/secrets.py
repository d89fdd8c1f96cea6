from __future__ import annotations
from typing import List, Optional, Tuple

from .document import ResourceDocument
from .errors import MalformedDocumentError
from .models import ApplicationManifest, SecretCandidate, SecretCategory

FIREBASE_NAMES = frozenset({"firebase_database_url"})
GOOGLE_KEY_NAMES = frozenset({"google_api_key", "google_map_keys"})

# appcompat / platform strings that look like "*api*key*" but hold nothing sensitive
BENIGN_NAMES = frozenset({"abc_capital_off", "abc_capital_on", "currentApiLevel"})


def classify(name: str, value: str) -> Optional[SecretCategory]:
    """Category from the resource name alone; empty values never qualify."""
    if not (value or "").strip():
        return None
    if name in FIREBASE_NAMES:
        return SecretCategory.FIREBASE_DB_URL
    if name in GOOGLE_KEY_NAMES:
        return SecretCategory.GOOGLE_API_KEY
    low = name.lower()
    if "api" in low and "key" in low and name not in BENIGN_NAMES:
        return SecretCategory.GENERIC_API_KEY
    return None


def extract_candidates(doc: ResourceDocument) -> List[SecretCandidate]:
    if not doc.is_resources:
        raise MalformedDocumentError(doc.path, f"expected <resources> root, got <{doc.kind}>")
    out: List[SecretCandidate] = []
    for elem in doc.select("string"):
        name = elem.get("name", "none")
        value = elem.text or ""
        cat = classify(name, value)
        if cat is not None:
            out.append(SecretCandidate(name, value, cat))
    return out


def manifest_api_keys(manifest: ApplicationManifest) -> List[Tuple[str, str]]:
    """<meta-data> entries whose name mentions "api" (com.google.android.geo.API_KEY, ...)."""
    return [(n, v) for n, v in manifest.meta_data if n and "api" in n.lower()]
