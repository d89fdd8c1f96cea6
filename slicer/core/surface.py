from __future__ import annotations
from typing import Dict, List

from .intents import render_filters
from .models import (
    ATTACK_SURFACE, ApplicationManifest, Component, ComponentKind, ExposedComponent, Exported,
)

NO_PERMISSION = "null"


def is_exposed(component: Component) -> bool:
    """
    Whether other apps on the device can reach this component.

    An undeclared android:exported follows the platform default: having an
    intent-filter makes the component exported, having none keeps it private.
    """
    if component.exported is Exported.TRUE:
        return True
    if component.exported is Exported.FALSE:
        return False
    return len(component.intent_filters) > 0


def describe(component: Component) -> ExposedComponent:
    return ExposedComponent(
        kind=component.kind,
        name=component.name,
        permission=component.permission if component.permission is not None else NO_PERMISSION,
        intent_lines=tuple(render_filters(component.intent_filters)),
    )


def attack_surface(manifest: ApplicationManifest) -> Dict[ComponentKind, List[ExposedComponent]]:
    """Exposed components grouped activity/receiver/service/provider, document order within a group."""
    return {
        kind: [describe(c) for c in manifest.of_kind(kind) if is_exposed(c)]
        for kind in ATTACK_SURFACE
    }
