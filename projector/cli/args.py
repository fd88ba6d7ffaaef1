# projector/cli/args.py
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="projector")
    parser.add_argument("--port", "-p", default=None, help="Serial port or pyserial URL (e.g. /dev/ttyUSB0, COM3).")
    parser.add_argument("--config", type=Path, default=None, help="YAML config file (port, serial overrides).")
    parser.add_argument("--log-level", default="WARNING", choices=LOG_LEVELS, type=str.upper)
    parser.add_argument("--log-file", type=Path, default=None, help="Also write logs to this file.")

    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("commands", help="List the device command table.")
    sub.add_parser("status", help="Print power state and lamp hours.")
    sub.add_parser("on", help="Power the projector on.")
    sub.add_parser("off", help="Power the projector off.")
    sub.add_parser("lamp-hours", help="Print lamp hours.")

    p_run = sub.add_parser("run", help="Execute any command from the command table.")
    p_run.add_argument("name")

    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
