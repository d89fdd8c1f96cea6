# slicer/cli.py
from __future__ import annotations
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.markup import escape

from .core import SlicerError, load_cfg, make_session, save_cfg, setup_logging
from .core.config import Config
from .tui import banner
from .ui import console, run_report

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        prog="slicer",
        description="Extract attack surface and exposed secrets from a decompiled APK",
        epilog="example: slicer -d /path/to/the/extracted/apk",
    )
    ap.add_argument("-d", "--dir", help="Path to the jadx/apktool output directory")
    ap.add_argument("-nb", "--no-banner", action="store_true", help="Don't show the banner")
    ap.add_argument("-c", "--config", help="Config file (default: ./slicer.json or the per-user config)")
    ap.add_argument("--workers", type=int, help="Concurrent probes (overrides config)")
    ap.add_argument("--timeout", type=float, help="Per-probe timeout in seconds (overrides config)")
    ap.add_argument("--insecure", action="store_true", help="Skip TLS certificate verification for probes")
    ap.add_argument("--init-config", action="store_true", help="Write the default config file and exit")
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging for core/network")
    return ap.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        if args.init_config:
            p = save_cfg(Config(), args.config)
            console.print(f"Wrote default config to [bold]{p}[/]")
            return 0

        cfg = load_cfg(args.config)
        setup_logging(verbose=args.verbose or cfg.verbose)
        if args.workers is not None: cfg.max_workers = max(1, args.workers)
        if args.timeout is not None: cfg.timeout = max(0.1, args.timeout)

        if not args.dir:
            console.print("[red]error:[/] -d/--dir is required")
            return 2
        base = Path(args.dir)
        if not base.is_dir():
            console.print(f"[red]error:[/] not a directory: {base}")
            return 1

        if not args.no_banner:
            banner(console)
        session = make_session(pool_size=cfg.max_workers, verify=not args.insecure)
        run_report(base, cfg, session=session)
    except SlicerError as e:
        console.print(f"[bold red]error:[/] {escape(str(e))}")
        return 1
    except KeyboardInterrupt:
        console.print("[yellow]Interrupted[/]")
        return 130
    return 0

if __name__ == "__main__":
    sys.exit(main())
