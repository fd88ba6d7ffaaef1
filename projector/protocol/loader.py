# projector/protocol/loader.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from projector.app.config import METADATA_DIR
from projector.core.errors import ConfigError

from .core import CommandKind, Frame
from .core.decoder import FIELD_TO_STRUCT


@dataclass(frozen=True)
class ResponseField:
    type: str
    offset: int


@dataclass(frozen=True)
class CommandDef:
    """One device command from commands.yml, resolved to concrete bytes."""

    name: str
    kind: CommandKind
    module: int
    field: int
    value: int = 0
    reply_size: int = 0
    response: Optional[ResponseField] = None

    def build_frame(self) -> Frame:
        if self.kind == CommandKind.READ:
            return Frame.read_request(self.module, self.field, self.reply_size)
        return Frame.write_request(self.module, self.field, self.value)


_KINDS = {"read": CommandKind.READ, "write": CommandKind.WRITE}


class CommandLoader:
    """Load the device command table (commands.yml) into CommandDef entries."""

    FILENAME = "commands.yml"

    def __init__(self, config_dir: Path = METADATA_DIR):
        self.config_dir = Path(config_dir)

        self.doc: Dict[str, Any] = {}
        self.modules: Dict[str, int] = {}
        self.commands: Dict[str, CommandDef] = {}

    def load_all(self) -> Dict[str, CommandDef]:
        path = self.config_dir / self.FILENAME
        if not path.exists():
            raise ConfigError(f"Command table not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            try:
                self.doc = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {path}", hint=str(e)) from None

        modules = self.doc.get("modules", {}) or {}
        commands = self.doc.get("commands", {}) or {}

        if not isinstance(modules, dict):
            raise ConfigError("commands.yml must contain 'modules' mapping")
        if not isinstance(commands, dict):
            raise ConfigError("commands.yml must contain 'commands' mapping")

        self.modules = {str(k): self._byte(v, f"module '{k}'") for k, v in modules.items()}
        self.commands = {str(name): self._parse_command(str(name), spec) for name, spec in commands.items()}
        return self.commands

    # ---------------- Helpers ----------------
    def _parse_command(self, name: str, spec: Any) -> CommandDef:
        if not isinstance(spec, dict):
            raise ConfigError(f"Command '{name}' must be a mapping")

        kind = _KINDS.get(str(spec.get("kind", "")).lower())
        if kind is None:
            raise ConfigError(
                f"Command '{name}' has invalid kind {spec.get('kind')!r}",
                hint=f"Valid kinds: {sorted(_KINDS)}",
            )

        module_ref = spec.get("module")
        if isinstance(module_ref, str):
            if module_ref not in self.modules:
                raise ConfigError(
                    f"Command '{name}' references unknown module '{module_ref}'",
                    hint=f"Known modules: {sorted(self.modules)}",
                )
            module = self.modules[module_ref]
        else:
            module = self._byte(module_ref, f"{name}.module")

        response = None
        resp = spec.get("response")
        if resp is not None:
            ftype = resp.get("type") if isinstance(resp, dict) else None
            if ftype not in FIELD_TO_STRUCT:
                raise ConfigError(
                    f"Command '{name}' has unsupported response type {ftype!r}",
                    hint=f"Supported: {sorted(FIELD_TO_STRUCT)}",
                )
            offset = resp.get("offset", 0)
            if isinstance(offset, bool) or not isinstance(offset, int) or offset < 0:
                raise ConfigError(f"Command '{name}' has invalid response offset {offset!r}")
            response = ResponseField(type=ftype, offset=offset)

        return CommandDef(
            name=name,
            kind=kind,
            module=module,
            field=self._byte(spec.get("field"), f"{name}.field"),
            value=self._byte(spec.get("value", 0), f"{name}.value"),
            reply_size=self._byte(spec.get("reply_size", 0), f"{name}.reply_size"),
            response=response,
        )

    @staticmethod
    def _byte(v: Any, what: str) -> int:
        if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= 0xFF:
            raise ConfigError(f"Invalid byte value for {what}: {v!r}")
        return v


def load_commands(config_dir: Path = METADATA_DIR) -> Dict[str, CommandDef]:
    return CommandLoader(config_dir).load_all()
