from __future__ import annotations
from typing import List, Tuple

from .document import ResourceDocument, android_attr, attributes, child_elements, local_name
from .errors import MalformedDocumentError
from .models import (
    ATTACK_SURFACE, ApplicationManifest, Component, Exported, IntentFilter, Rule,
)

NAME_NOT_DEFINED = "name not defined"

_KINDS = {k.value: k for k in ATTACK_SURFACE}


def _intent_filter(elem) -> IntentFilter:
    return IntentFilter(tuple(Rule(local_name(c), attributes(c)) for c in child_elements(elem)))


def parse_manifest(doc: ResourceDocument) -> ApplicationManifest:
    """Build the component model from a decoded AndroidManifest.xml."""
    if not doc.is_manifest:
        raise MalformedDocumentError(doc.path, f"expected <manifest> root, got <{doc.kind}>")

    apps = doc.select("application")
    # android:allowBackup defaults to true, android:debuggable to false
    allow_backup, debuggable = "true", "false"
    if apps:
        allow_backup = android_attr(apps[0], "allowBackup", "true")
        debuggable = android_attr(apps[0], "debuggable", "false")

    components: List[Component] = []
    meta: List[Tuple[str, str]] = []
    for app in apps:
        for elem in child_elements(app):
            tag = local_name(elem)
            if tag == "meta-data":
                meta.append((android_attr(elem, "name", ""), android_attr(elem, "value", "none")))
                continue
            kind = _KINDS.get(tag)
            if kind is None:
                continue
            components.append(Component(
                kind=kind,
                name=android_attr(elem, "name", NAME_NOT_DEFINED),
                exported=Exported.parse(android_attr(elem, "exported")),
                permission=android_attr(elem, "permission"),
                intent_filters=tuple(_intent_filter(f) for f in child_elements(elem, "intent-filter")),
            ))

    return ApplicationManifest(
        package=doc.root.get("package", ""),
        allow_backup=allow_backup,
        debuggable=debuggable,
        components=tuple(components),
        meta_data=tuple(meta),
    )
