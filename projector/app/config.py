# projector/app/config.py
from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from projector.core.errors import ConfigError

METADATA_DIR = Path(__file__).resolve().parents[1] / "metadata"
SERIAL_FILE = "serial.yml"


@dataclass(frozen=True)
class SerialConfig:
    """Line settings for the projector's RS-232 port (115200 8N1 by default)."""

    baudrate: int = 115200
    bytesize: int = 8
    parity: str = "N"
    stopbits: int = 1
    timeout: float = 0.1          # per-read timeout (s); reads return early with what is buffered
    write_timeout: float = 1.0
    max_idle_reads: int = 3       # consecutive empty reads before a frame is declared incomplete

    def __post_init__(self) -> None:
        if self.max_idle_reads < 1:
            raise ConfigError(
                f"max_idle_reads must be >= 1, got {self.max_idle_reads}",
                details={"max_idle_reads": self.max_idle_reads},
            )
        if self.timeout is None or self.timeout <= 0:
            raise ConfigError(
                f"timeout must be > 0, got {self.timeout}",
                hint="Reads must return promptly; use a short bounded timeout such as 0.1.",
                details={"timeout": self.timeout},
            )


@dataclass(frozen=True)
class ProjectorConfig:
    port: Optional[str] = None
    serial: SerialConfig = field(default_factory=SerialConfig)
    metadata_dir: Path = METADATA_DIR


_FIELD_TYPES: Dict[str, tuple] = {
    "baudrate": (int,),
    "bytesize": (int,),
    "parity": (str,),
    "stopbits": (int, float),
    "timeout": (int, float),
    "write_timeout": (int, float),
    "max_idle_reads": (int,),
}


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            doc = yaml.safe_load(f) or {}
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}", hint=str(e)) from None

    if not isinstance(doc, dict):
        raise ConfigError(f"{path} must contain a mapping")
    return doc


def serial_from_mapping(values: Mapping[str, Any], base: Optional[SerialConfig] = None) -> SerialConfig:
    """Overlay ``values`` on ``base`` (or the defaults), validating keys and types."""
    base = base or SerialConfig()
    known = {f.name for f in fields(SerialConfig)}

    for key, value in values.items():
        if key not in known:
            raise ConfigError(
                f"Unknown serial option '{key}'.",
                hint=f"Valid options: {sorted(known)}",
                details={"option": key},
            )
        expected = _FIELD_TYPES[key]
        if isinstance(value, bool) or not isinstance(value, expected):
            raise ConfigError(
                f"Invalid value for serial option '{key}': {value!r}",
                hint=f"Expected {' or '.join(t.__name__ for t in expected)}",
                details={"option": key, "value": value},
            )

    return replace(base, **dict(values))


def load_serial_defaults(metadata_dir: Path = METADATA_DIR) -> SerialConfig:
    doc = _load_yaml(Path(metadata_dir) / SERIAL_FILE)
    return serial_from_mapping(doc.get("serial", {}) or {})


def load_config(path: Optional[Path] = None, *, port: Optional[str] = None) -> ProjectorConfig:
    """
    Build a ProjectorConfig from shipped defaults plus an optional user file.

    User file layout::

        port: /dev/ttyUSB0
        metadata_dir: ./metadata     # optional
        serial:
          timeout: 0.2
    """
    doc: Dict[str, Any] = _load_yaml(Path(path)) if path else {}

    metadata_dir = Path(doc.get("metadata_dir") or METADATA_DIR)
    serial_cfg = load_serial_defaults(metadata_dir)

    user_serial = doc.get("serial", {}) or {}
    if not isinstance(user_serial, dict):
        raise ConfigError("'serial' must be a mapping")
    serial_cfg = serial_from_mapping(user_serial, serial_cfg)

    return ProjectorConfig(
        port=port or doc.get("port"),
        serial=serial_cfg,
        metadata_dir=metadata_dir,
    )
