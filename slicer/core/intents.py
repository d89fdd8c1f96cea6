from __future__ import annotations
from typing import Iterable, List

from .models import IntentFilter, Rule

WILDCARD = "*"
NO_NAME = "no name"
HEADER = "Intent-filters:"


def render_rule(rule: Rule) -> str:
    if rule.kind == "data":
        scheme = rule.attributes.get("scheme", WILDCARD)
        host = rule.attributes.get("host", WILDCARD)
        return f"- data: {scheme}://{host}"
    return f"- {rule.kind}: {rule.attributes.get('name', NO_NAME)}"


def render_filters(filters: Iterable[IntentFilter]) -> List[str]:
    """
    One header per filter followed by its rules in document order.
    Nothing is sorted or merged; two identical actions print twice.
    """
    out: List[str] = []
    for f in filters:
        out.append(HEADER)
        out.extend(render_rule(r) for r in f.rules)
    return out
