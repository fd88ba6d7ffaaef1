# projector/protocol/client.py
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from projector.core.errors import ConfigError

from .core.decoder import decode_field
from .loader import CommandDef, load_commands
from .session import Session


class ProjectorClient:
    """
    User-facing API over Session.transact().

    Commands come from the device command table; read commands decode a
    single field out of the response payload, write commands return None.
    """

    def __init__(self, session: Session, commands: Optional[Mapping[str, CommandDef]] = None):
        self._session = session
        self._commands: Dict[str, CommandDef] = dict(commands) if commands is not None else load_commands()

    @property
    def commands(self) -> Mapping[str, CommandDef]:
        return dict(self._commands)

    def execute(self, name: str) -> Any:
        cmd = self._commands.get(name)
        if cmd is None:
            raise ConfigError(
                f"Unknown command: {name}",
                hint=f"Known commands: {sorted(self._commands)}",
            )

        response = self._session.transact(cmd.build_frame())
        if cmd.response is None:
            return None
        return decode_field(response.payload, cmd.response.type, cmd.response.offset)

    def power_state(self) -> bool:
        return bool(self.execute("power_state"))

    def power_on(self) -> None:
        self.execute("power_on")

    def power_off(self) -> None:
        self.execute("power_off")

    def lamp_hours(self) -> int:
        return int(self.execute("lamp_hours"))
