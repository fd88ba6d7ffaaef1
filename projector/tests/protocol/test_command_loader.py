from __future__ import annotations

from pathlib import Path

import pytest

from projector.core.errors import ConfigError
from projector.protocol.core.defs import CommandKind
from projector.protocol.loader import CommandLoader, ResponseField, load_commands


def _write(dirp: Path, text: str) -> None:
    (dirp / "commands.yml").write_text(text, encoding="utf-8")


def test_shipped_table_matches_device_bytes():
    cmds = load_commands()

    assert cmds["power_state"].build_frame().payload == bytes([0x34, 0x00, 0x00, 0x11, 0x00])
    assert cmds["power_on"].build_frame().payload == bytes([0x34, 0x11, 0x00, 0x00])
    assert cmds["power_off"].build_frame().payload == bytes([0x34, 0x11, 0x01, 0x00])
    assert cmds["lamp_hours"].build_frame().payload == bytes([0x34, 0x00, 0x00, 0x15, 0x01])

    assert cmds["power_state"].response == ResponseField(type="bool", offset=2)
    assert cmds["lamp_hours"].response == ResponseField(type="uint32", offset=2)
    assert cmds["power_on"].response is None


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        CommandLoader(tmp_path).load_all()


def test_numeric_module_and_defaults(tmp_path: Path) -> None:
    _write(tmp_path, "commands:\n  input:\n    kind: read\n    module: 0x30\n    field: 0x02\n")

    cmd = CommandLoader(tmp_path).load_all()["input"]

    assert cmd.kind is CommandKind.READ
    assert cmd.module == 0x30
    assert cmd.reply_size == 0


def test_unknown_module_reference_raises(tmp_path: Path) -> None:
    _write(tmp_path, "modules: {}\ncommands:\n  x:\n    kind: write\n    module: audio\n    field: 1\n")
    with pytest.raises(ConfigError):
        CommandLoader(tmp_path).load_all()


@pytest.mark.parametrize(
    "body",
    [
        "commands:\n  x:\n    kind: poke\n    module: 1\n    field: 1\n",
        "commands:\n  x:\n    kind: read\n    module: 1\n    field: 300\n",
        "commands:\n  x:\n    kind: read\n    module: 1\n    field: 1\n    response: {type: float, offset: 0}\n",
        "commands:\n  x:\n    kind: read\n    module: 1\n    field: 1\n    response: {type: bool, offset: -1}\n",
        "commands: [1, 2]\n",
    ],
)
def test_invalid_definitions_raise(tmp_path: Path, body: str) -> None:
    _write(tmp_path, body)
    with pytest.raises(ConfigError):
        CommandLoader(tmp_path).load_all()
