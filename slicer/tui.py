#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Shared console helpers (banner, section headers) for slicer.
"""
from __future__ import annotations
from rich.console import Console
from rich.panel import Panel

from . import __version__

def header_art() -> str:
    return r"""
   _  _     ____  _ _
 _| || |_  / ___|| (_) ___ ___ _ __
|_  ..  _| \___ \| | |/ __/ _ \ '__|
|_      _|  ___) | | | (_|  __/ |
  |_||_|   |____/|_|_|\___\___|_|
"""

def banner(console: Console) -> None:
    art = header_art().rstrip()
    console.print(f"[bold green]{art}[/]\n[dim]v{__version__} | APK attack surface & secret exposure[/]")
    console.print()

def section(console: Console, title: str, subtitle: str = "") -> None:
    msg = f"[bold]{title}[/]"
    if subtitle:
        msg += f"\n[dim]{subtitle}[/]"
    console.print(Panel.fit(msg, border_style="green"))
