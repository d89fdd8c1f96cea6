from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

# ---- manifest side -----------------------------------------------------------
class Exported(Enum):
    """Value of android:exported. UNSET means the attribute was not declared."""
    TRUE = "true"
    FALSE = "false"
    UNSET = "unset"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "Exported":
        v = (raw or "").strip().lower()
        if v == "true": return cls.TRUE
        if v == "false": return cls.FALSE
        return cls.UNSET

class ComponentKind(Enum):
    ACTIVITY = "activity"
    RECEIVER = "receiver"
    SERVICE = "service"
    PROVIDER = "provider"

# Report order of component groups
ATTACK_SURFACE = (
    ComponentKind.ACTIVITY, ComponentKind.RECEIVER,
    ComponentKind.SERVICE, ComponentKind.PROVIDER,
)

@dataclass(frozen=True)
class Rule:
    kind: str                                  # action / category / data / ...
    attributes: Dict[str, str] = field(default_factory=dict)

@dataclass(frozen=True)
class IntentFilter:
    rules: Tuple[Rule, ...] = ()

@dataclass(frozen=True)
class Component:
    kind: ComponentKind
    name: str
    exported: Exported = Exported.UNSET
    permission: Optional[str] = None
    intent_filters: Tuple[IntentFilter, ...] = ()

@dataclass(frozen=True)
class ApplicationManifest:
    package: str = ""
    allow_backup: str = "true"
    debuggable: str = "false"
    components: Tuple[Component, ...] = ()
    meta_data: Tuple[Tuple[str, str], ...] = ()

    def of_kind(self, kind: ComponentKind) -> List[Component]:
        return [c for c in self.components if c.kind is kind]

@dataclass(frozen=True)
class ExposedComponent:
    kind: ComponentKind
    name: str
    permission: str
    intent_lines: Tuple[str, ...] = ()

# ---- strings side ------------------------------------------------------------
class SecretCategory(Enum):
    FIREBASE_DB_URL = "firebase-db-url"
    GOOGLE_API_KEY = "google-api-key"
    GENERIC_API_KEY = "generic-api-key"

    @property
    def probed(self) -> bool:
        return self is not SecretCategory.GENERIC_API_KEY

@dataclass(frozen=True)
class SecretCandidate:
    resource_name: str
    raw_value: str
    category: SecretCategory

    @property
    def value(self) -> str:
        return self.raw_value.strip()

class Verdict(Enum):
    EXPOSED = "exposed"
    PROTECTED = "protected"
    UNREACHABLE = "unreachable"
    SKIPPED = "skipped"

@dataclass(frozen=True)
class ProbeResult:
    candidate: SecretCandidate
    url: str
    verdict: Verdict
    status: Optional[int] = None
    evidence: Optional[str] = None

# ---- report ------------------------------------------------------------------
@dataclass(frozen=True)
class Line:
    text: str
    style: str = "plain"       # plain / heading / finding / notice

@dataclass
class Section:
    """One block of the report, built per configured path."""
    title: str
    path: str
    lines: List[Line] = field(default_factory=list)

    def add(self, text: str, style: str = "plain") -> None:
        self.lines.append(Line(text, style))

    def texts(self) -> List[str]:
        return [l.text for l in self.lines]

    @property
    def notices(self) -> List[str]:
        return [l.text for l in self.lines if l.style == "notice"]
