# projector/cli/main.py
from __future__ import annotations

from typing import Optional

from projector.app.config import load_config
from projector.core.errors import ProjectorError

from projector.cli.args import parse_args
from projector.cli.commands import (
    configure_logging,
    cmd_commands,
    cmd_status,
    cmd_power,
    cmd_lamp_hours,
    cmd_run,
)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    try:
        cfg = load_config(args.config, port=args.port)

        if args.cmd == "commands":
            return cmd_commands(cfg)
        if args.cmd == "status":
            return cmd_status(cfg)
        if args.cmd == "on":
            return cmd_power(cfg, on=True)
        if args.cmd == "off":
            return cmd_power(cfg, on=False)
        if args.cmd == "lamp-hours":
            return cmd_lamp_hours(cfg)
        if args.cmd == "run":
            return cmd_run(cfg, args.name)

        return 2
    except ProjectorError as e:
        print(f"ERROR: {e.message}")
        if e.hint:
            print(f"Hint: {e.hint}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
