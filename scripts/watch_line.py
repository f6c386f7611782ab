#!/usr/bin/env python3
"""Watch live vehicle positions for one line in the terminal.

Polls the feed on the configured interval and prints the vehicle count,
the map viewport and one pin per vehicle after every cycle.

Usage
-----
::

    python scripts/watch_line.py 86
    python scripts/watch_line.py 14 --once --json

Options::

    --once       Run a single cycle and exit
    --json       Print each update as JSON
    --interval   Override the poll interval in seconds
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pympk import MpkClient, MpkConfig, VehicleMapDelegate, ViewState  # noqa: E402

# ── helpers ──────────────────────────────────────────────────


def _section(title: str) -> str:
    return f"\n{'─' * 60}\n  {title}\n{'─' * 60}"


def _render_text(state: ViewState, delegate: VehicleMapDelegate) -> str:
    out: list[str] = [_section(state.title)]
    stamp = state.updated_at.isoformat() if state.updated_at else "-"
    out.append(f"  updated   : {stamp}")
    if state.error_message is not None:
        out.append(f"  {state.error_message}")
        return "\n".join(out)

    out.append(f"  vehicles  : {state.vehicle_count}")
    if state.viewport is not None:
        vp = state.viewport
        out.append(
            f"  viewport  : center=({vp.center.latitude:.5f}, {vp.center.longitude:.5f})"
            f" span=({vp.span.latitude_delta:.5f}, {vp.span.longitude_delta:.5f})"
        )
    for pin in state.pins(delegate):
        out.append(f"    [{pin.glyph}] {pin.title:>8}  {pin.coordinate.latitude:.5f}, {pin.coordinate.longitude:.5f}")
    return "\n".join(out)


def _render_json(state: ViewState) -> str:
    payload = state.model_dump(mode="json")
    payload["vehicle_count"] = state.vehicle_count
    return json.dumps(payload, ensure_ascii=False)


# ── main ─────────────────────────────────────────────────────


async def main() -> None:
    parser = argparse.ArgumentParser(description="Watch live MPK Łódź vehicle positions")
    parser.add_argument("line", help="Line number, e.g. 86 or 14")
    parser.add_argument("--once", action="store_true", help="Run a single cycle and exit")
    parser.add_argument("--json", dest="json_mode", action="store_true", help="Print updates as JSON")
    parser.add_argument("--interval", type=float, default=None, help="Poll interval in seconds")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    overrides = {"poll_interval": args.interval} if args.interval is not None else {}
    config = MpkConfig.from_env(**overrides)
    delegate = VehicleMapDelegate(radius_m=config.focus_radius_m)

    def render(state: ViewState) -> None:
        print(_render_json(state) if args.json_mode else _render_text(state, delegate), flush=True)

    async with MpkClient(config) as client:
        poller = client.create_poller(args.line, on_update=render)
        if args.once:
            await poller.run_cycle()
            return
        async with poller:
            await asyncio.Event().wait()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
