# projector/cli/commands.py
from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from projector.app.config import ProjectorConfig
from projector.core.errors import ConfigError
from projector.protocol.client import ProjectorClient
from projector.protocol.loader import load_commands
from projector.protocol.session import Session

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


# ---------------- Logging ----------------

def configure_logging(level: str, log_file: Optional[Path] = None) -> None:
    """
    Console logging at ``level`` plus an optional file handler (idempotent).
    """
    root = logging.getLogger()
    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        sh = logging.StreamHandler()
        sh.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(sh)
    root.setLevel(getattr(logging, level))

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    target = str(log_file.resolve())
    for h in root.handlers:
        if isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == target:
            return

    fh = logging.FileHandler(log_file, encoding="utf-8", delay=True)
    fh.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(fh)


# ---------------- Session helper ----------------

@contextmanager
def open_client(cfg: ProjectorConfig, session: Optional[Session] = None) -> Iterator[ProjectorClient]:
    if not cfg.port:
        raise ConfigError(
            "No serial port given.",
            hint="Pass --port or set 'port' in the config file.",
        )

    session = session or Session()
    commands = load_commands(cfg.metadata_dir)
    try:
        session.open(cfg.port, cfg.serial)
        yield ProjectorClient(session, commands)
    finally:
        session.close()


# ---------------- Commands ----------------

def cmd_commands(cfg: ProjectorConfig) -> int:
    commands = load_commands(cfg.metadata_dir)

    print("Device commands:\n")
    for name in sorted(commands):
        c = commands[name]
        raw = c.build_frame().encode().hex(" ")
        result = f" -> {c.response.type}@{c.response.offset}" if c.response else ""
        print(f"  {name:<14} {c.kind.name.lower():<5} {raw}{result}")
    return 0


def cmd_status(cfg: ProjectorConfig, session: Optional[Session] = None) -> int:
    with open_client(cfg, session) as client:
        on = client.power_state()
        print(f"Power:      {'on' if on else 'off'}")
        print(f"Lamp hours: {client.lamp_hours()}")
    return 0


def cmd_power(cfg: ProjectorConfig, on: bool, session: Optional[Session] = None) -> int:
    with open_client(cfg, session) as client:
        if on:
            client.power_on()
        else:
            client.power_off()
        print(f"POWER_{'ON' if on else 'OFF'}: ok")
    return 0


def cmd_lamp_hours(cfg: ProjectorConfig, session: Optional[Session] = None) -> int:
    with open_client(cfg, session) as client:
        print(client.lamp_hours())
    return 0


def cmd_run(cfg: ProjectorConfig, name: str, session: Optional[Session] = None) -> int:
    with open_client(cfg, session) as client:
        result = client.execute(name)
        print(f"{name}: {'ok' if result is None else result}")
    return 0
