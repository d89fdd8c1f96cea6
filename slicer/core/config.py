# slicer/core/config.py
from __future__ import annotations
import json
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .errors import ConfigError

# ---- schema & defaults -------------------------------------------------------
SCHEMA_VERSION = 1
KINDS = ("manifest", "strings", "xml", "raw")

DEFAULT_PATHS: List[Tuple[str, str]] = [
    ("resources/AndroidManifest.xml", "manifest"),
    ("resources/res/values/strings.xml", "strings"),
    ("resources/res/xml", "xml"),
    ("resources/res/raw", "raw"),
]

# Keyless-billing Maps endpoints; the key is appended verbatim to each one.
DEFAULT_GOOGLE_ENDPOINTS: List[str] = [
    "https://maps.googleapis.com/maps/api/staticmap?center=45%2C10&zoom=7&size=400x400&key=",
    "https://maps.googleapis.com/maps/api/streetview?size=400x400&location=40.720032,-73.988354&fov=90&heading=235&pitch=10&key=",
    "https://maps.googleapis.com/maps/api/directions/json?origin=Disneyland&destination=Universal+Studios+Hollywood4&key=",
    "https://maps.googleapis.com/maps/api/geocode/json?latlng=40,30&key=",
    "https://maps.googleapis.com/maps/api/distancematrix/json?units=imperial&origins=40.6655101,-73.89188969999998&destinations=40.6905615%2C-73.9976592&key=",
    "https://maps.googleapis.com/maps/api/place/findplacefromtext/json?input=Museum%20of%20Contemporary%20Art%20Australia&inputtype=textquery&fields=name&key=",
    "https://maps.googleapis.com/maps/api/place/autocomplete/json?input=Bingh&types=%28cities%29&key=",
    "https://maps.googleapis.com/maps/api/elevation/json?locations=39.7391536,-104.9847034&key=",
    "https://maps.googleapis.com/maps/api/timezone/json?location=39.6034810,-119.6822510&timestamp=1331161200&key=",
]

@dataclass(frozen=True)
class PathEntry:
    path: str
    kind: str

@dataclass
class Config:
    paths: List[PathEntry] = field(default_factory=lambda: [PathEntry(p, k) for p, k in DEFAULT_PATHS])
    google_endpoints: List[str] = field(default_factory=lambda: list(DEFAULT_GOOGLE_ENDPOINTS))
    max_workers: int = 4
    timeout: float = 10
    verbose: bool = False
    schema: int = SCHEMA_VERSION

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

# ---- locations ---------------------------------------------------------------
# Override with env vars:
#   SLICER_CONFIG=<full path to config.json>
#   SLICER_DIR=<directory holding config.json>
LOCAL_NAME = "slicer.json"

def _windows_roaming_dir() -> Path:
    return Path(os.environ.get("APPDATA", Path.home() / "AppData/Roaming"))

def _xdg_config_home() -> Path:
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))

def config_dir() -> Path:
    env_dir = os.environ.get("SLICER_DIR")
    if env_dir:
        return Path(env_dir).expanduser().resolve()
    if os.name == "nt":
        return (_windows_roaming_dir() / "Slicer").resolve()
    return (_xdg_config_home() / "slicer").resolve()

def config_path(explicit: Optional[str] = None) -> Path:
    """--config beats $SLICER_CONFIG beats ./slicer.json beats the per-user file."""
    if explicit:
        return Path(explicit).expanduser().resolve()
    env_path = os.environ.get("SLICER_CONFIG")
    if env_path:
        return Path(env_path).expanduser().resolve()
    local = Path.cwd() / LOCAL_NAME
    if local.is_file():
        return local
    return config_dir() / "config.json"

# ---- validation --------------------------------------------------------------
def _positive(raw: Dict[str, Any], key: str, default: float) -> float:
    v = raw.get(key, default)
    if isinstance(v, bool) or not isinstance(v, (int, float)) or v <= 0:
        raise ConfigError(f"'{key}' must be a positive number, got {v!r}")
    return v

def _workers(raw: Dict[str, Any], default: int) -> int:
    v = raw.get("max_workers", default)
    if isinstance(v, bool) or not isinstance(v, int) or v <= 0:
        raise ConfigError(f"'max_workers' must be a positive whole number, got {v!r}")
    return v

def _flag(raw: Dict[str, Any], key: str, default: bool) -> bool:
    v = raw.get(key, default)
    if not isinstance(v, bool):
        raise ConfigError(f"'{key}' must be true or false, got {v!r}")
    return v

def _paths(raw: Any) -> List[PathEntry]:
    if not isinstance(raw, list):
        raise ConfigError("'paths' must be a list of {path, kind} entries")
    out: List[PathEntry] = []
    for i, e in enumerate(raw):
        if not isinstance(e, dict):
            raise ConfigError(f"paths[{i}] must be an object, got {type(e).__name__}")
        path, kind = e.get("path"), e.get("kind")
        if not isinstance(path, str) or not path.strip():
            raise ConfigError(f"paths[{i}].path must be a non-empty string")
        if kind not in KINDS:
            raise ConfigError(f"paths[{i}].kind must be one of {', '.join(KINDS)}, got {kind!r}")
        out.append(PathEntry(path.strip(), kind))
    return out

def _endpoints(raw: Any) -> List[str]:
    if not isinstance(raw, list) or not all(isinstance(u, str) and u for u in raw):
        raise ConfigError("'google_endpoints' must be a list of URL templates")
    bad = [u for u in raw if not u.startswith(("http://", "https://"))]
    if bad:
        raise ConfigError(f"not an http(s) URL: {bad[0]}")
    return list(raw)

def parse_cfg(raw: Any) -> Config:
    if not isinstance(raw, dict):
        raise ConfigError("configuration root must be an object")
    schema = raw.get("schema", SCHEMA_VERSION)
    if schema != SCHEMA_VERSION:
        raise ConfigError(f"unsupported config schema {schema!r} (expected {SCHEMA_VERSION})")
    d = Config()
    return Config(
        paths=_paths(raw["paths"]) if "paths" in raw else d.paths,
        google_endpoints=_endpoints(raw["google_endpoints"]) if "google_endpoints" in raw else d.google_endpoints,
        max_workers=_workers(raw, d.max_workers),
        timeout=_positive(raw, "timeout", d.timeout),
        verbose=_flag(raw, "verbose", d.verbose),
    )

# ---- load / save -------------------------------------------------------------
def load_cfg(explicit: Optional[str] = None) -> Config:
    p = config_path(explicit)
    if not p.exists():
        if explicit:
            raise ConfigError(f"config file not found: {p}")
        return Config()
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigError(f"{p}: {e}") from e
    return parse_cfg(raw)

def save_cfg(cfg: Config, explicit: Optional[str] = None) -> Path:
    p = config_path(explicit)
    p.parent.mkdir(parents=True, exist_ok=True)
    tmp = p.with_suffix(".tmp")
    # Atomic-ish write
    tmp.write_text(json.dumps(cfg.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
    try:
        if p.exists():
            p.replace(p.with_suffix(".bak.json"))
    except OSError:
        pass
    tmp.replace(p)
    return p
