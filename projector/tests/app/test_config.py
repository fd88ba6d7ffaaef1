from __future__ import annotations

from pathlib import Path

import pytest

from projector.app.config import (
    METADATA_DIR,
    ProjectorConfig,
    SerialConfig,
    load_config,
    load_serial_defaults,
    serial_from_mapping,
)
from projector.core.errors import ConfigError, ErrorKind


def test_shipped_serial_defaults_match_dataclass():
    assert load_serial_defaults() == SerialConfig()


def test_load_config_without_file_uses_defaults():
    cfg = load_config(port="COM3")
    assert cfg == ProjectorConfig(port="COM3", serial=SerialConfig(), metadata_dir=METADATA_DIR)


def test_load_config_overlays_user_file(tmp_path: Path):
    path = tmp_path / "projector.yml"
    path.write_text("port: /dev/ttyS0\nserial:\n  timeout: 0.25\n  max_idle_reads: 5\n", encoding="utf-8")

    cfg = load_config(path)

    assert cfg.port == "/dev/ttyS0"
    assert cfg.serial.timeout == 0.25
    assert cfg.serial.max_idle_reads == 5
    assert cfg.serial.baudrate == 115200


def test_cli_port_overrides_file(tmp_path: Path):
    path = tmp_path / "projector.yml"
    path.write_text("port: /dev/ttyS0\n", encoding="utf-8")
    assert load_config(path, port="COM9").port == "COM9"


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(ConfigError) as ei:
        load_config(tmp_path / "nope.yml")
    assert ei.value.kind is ErrorKind.CONFIG_ERROR


def test_invalid_yaml_raises(tmp_path: Path):
    path = tmp_path / "bad.yml"
    path.write_text("serial: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


@pytest.mark.parametrize(
    "values",
    [
        {"speed": 9600},
        {"baudrate": "fast"},
        {"baudrate": True},
        {"max_idle_reads": 0},
        {"timeout": -1},
    ],
)
def test_serial_from_mapping_rejects_bad_values(values):
    with pytest.raises(ConfigError):
        serial_from_mapping(values)


def test_serial_from_mapping_keeps_base_values():
    base = SerialConfig(baudrate=9600)
    assert serial_from_mapping({"timeout": 0.3}, base) == SerialConfig(baudrate=9600, timeout=0.3)


@pytest.mark.parametrize("timeout", [None, 0, 0.0, -0.5])
def test_serial_config_rejects_unbounded_or_nonblocking_timeout(timeout):
    with pytest.raises(ConfigError) as ei:
        SerialConfig(timeout=timeout)
    assert ei.value.details == {"timeout": timeout}


@pytest.mark.parametrize("timeout", [None, 0])
def test_serial_from_mapping_rejects_unusable_timeout(timeout):
    with pytest.raises(ConfigError):
        serial_from_mapping({"timeout": timeout})
