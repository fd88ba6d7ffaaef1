# projector/transport/uart.py
from __future__ import annotations

from typing import Optional

import serial
from serial import SerialException

from projector.app.config import SerialConfig

from .base import Transport
from .errors import TransportIOError, TransportOpenError


class UARTTransport(Transport):
    """
    UART transport implemented via pyserial.

    read(n) issues one pyserial read and may return fewer bytes due to timeout.
    ``port`` may be a device path or any pyserial URL (``loop://``, ``socket://host:port``).
    """

    def __init__(self, port: str, config: Optional[SerialConfig] = None):
        self.port = port
        self.config = config or SerialConfig()
        self.ser: Optional[serial.SerialBase] = None

    def open(self) -> None:
        cfg = self.config
        try:
            self.ser = serial.serial_for_url(
                self.port,
                baudrate=cfg.baudrate,
                bytesize=cfg.bytesize,
                parity=cfg.parity,
                stopbits=cfg.stopbits,
                timeout=cfg.timeout,
                write_timeout=cfg.write_timeout,
            )
            self.ser.reset_input_buffer()
            self.ser.reset_output_buffer()
        except (SerialException, ValueError) as e:
            self.ser = None
            raise TransportOpenError(
                f"Could not open {self.port}: {e}",
                details={"port": self.port},
            ) from None

    def close(self) -> None:
        if self.ser is not None:
            try:
                self.ser.close()
            finally:
                self.ser = None

    def is_open(self) -> bool:
        return self.ser is not None and self.ser.is_open

    def read(self, n: int) -> bytes:
        if self.ser is None:
            raise TransportIOError("read while transport not open")

        try:
            return self.ser.read(n)
        except SerialException as e:
            raise TransportIOError(f"UART read failed: {e}") from None

    def write(self, data: bytes) -> int:
        if self.ser is None:
            raise TransportIOError("write while transport not open")

        try:
            return self.ser.write(data)
        except SerialException as e:
            raise TransportIOError(f"UART write failed: {e}") from None

    def flush(self) -> None:
        if self.ser is None:
            raise TransportIOError("flush while transport not open")

        try:
            self.ser.reset_input_buffer()
            self.ser.reset_output_buffer()
        except SerialException as e:
            raise TransportIOError(f"UART flush failed: {e}") from None
