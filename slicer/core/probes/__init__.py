# slicer/core/probes/__init__.py

from .firebase import probe_firebase, firebase_probe_url
from .google import probe_google_key, NOT_AUTHORIZED
from .pool import Probe, plan_probes, run_probes

__all__ = [
    "probe_firebase",
    "firebase_probe_url",
    "probe_google_key",
    "NOT_AUTHORIZED",
    "Probe",
    "plan_probes",
    "run_probes",
]
