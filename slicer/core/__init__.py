# slicer/core/__init__.py
from .config import Config, PathEntry, load_cfg, save_cfg, config_path
from .document import ResourceDocument, load_document
from .errors import SlicerError, ConfigError, MalformedDocumentError, MissingInputError
from .http import SESSION, make_session
from .manifest import parse_manifest
from .scan import scan
from .secrets import extract_candidates
from .surface import attack_surface, is_exposed

__all__ = [
    "Config", "PathEntry", "load_cfg", "save_cfg", "config_path",
    "ResourceDocument", "load_document",
    "SlicerError", "ConfigError", "MalformedDocumentError", "MissingInputError",
    "SESSION", "make_session",
    "parse_manifest", "attack_surface", "is_exposed",
    "extract_candidates",
    "scan",
    "setup_logging",
]

# ---- simple logging toggle for the package ----
import logging

def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s"
    )
    # quiet down noisy deps
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)
