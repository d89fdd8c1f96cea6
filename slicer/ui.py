#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Report rendering for slicer.

- One panel per configured path, lines in document order
- Live status while files are parsed and secrets probed
- Findings highlighted, connection problems shown inline as notices
"""
from __future__ import annotations
import threading
from pathlib import Path
from typing import Optional

import requests
from rich.console import Console
from rich.markup import escape

from .core import Config, scan
from .core.models import Line, Section
from .tui import section as section_header

console = Console()

STYLES = {
    "plain": "",
    "heading": "bold cyan",
    "finding": "bold red",
    "notice": "yellow",
}

def render_line(line: Line) -> str:
    text = escape(line.text.expandtabs(4))
    style = STYLES.get(line.style, "")
    return f"[{style}]{text}[/]" if style and text else text

def render_section(sec: Section, console_: Optional[Console] = None) -> None:
    out = console_ or console
    section_header(out, f"{sec.title}:", sec.path)
    for line in sec.lines:
        out.print(render_line(line), highlight=False)
    out.print()

def run_report(
    base: Path,
    cfg: Config,
    session: Optional[requests.Session] = None,
    console_: Optional[Console] = None,
) -> int:
    """Scan and print section by section; returns the number of sections shown."""
    out = console_ or console
    cancel = threading.Event()
    shown = 0
    with out.status("Starting…", spinner="dots") as st:
        def progress(msg: str) -> None:
            st.update(f"Scanning {escape(msg)}")
        try:
            for sec in scan(base, cfg, session=session, cancel=cancel, progress=progress):
                st.stop()
                render_section(sec, out)
                shown += 1
                st.start()
        except KeyboardInterrupt:
            cancel.set()
            raise
    return shown
