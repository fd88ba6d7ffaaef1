# projector/protocol/session.py
from __future__ import annotations

import logging
from typing import Callable, Optional

from projector.app.config import SerialConfig
from projector.core.errors import DeviceExceptionError, NotOpenError
from projector.transport.base import Transport
from projector.transport.uart import UARTTransport

from .core import CommandKind, Frame, FrameReader

TransportFactory = Callable[[str, SerialConfig], Transport]


class Session:
    """
    Exclusive owner of one projector channel.

    Sequences half-duplex transactions: flush stale input, write the request,
    read back exactly one response frame. A single caller drives a session;
    it performs no locking, retries or backoff.

    Lifecycle:
      - created closed
      - open() closes any previous channel before acquiring a new one
      - close() is idempotent
    """

    def __init__(
        self,
        *,
        transport_factory: TransportFactory = UARTTransport,
        logger: Optional[logging.Logger] = None,
    ):
        self._transport_factory = transport_factory
        self._log = logger or logging.getLogger(__name__)
        self._transport: Optional[Transport] = None
        self._config = SerialConfig()

    # ---------------- Lifecycle ----------------
    @property
    def is_open(self) -> bool:
        return self._transport is not None

    @property
    def config(self) -> SerialConfig:
        return self._config

    def open(self, port: str, config: Optional[SerialConfig] = None) -> None:
        self.close()

        cfg = config or SerialConfig()
        transport = self._transport_factory(port, cfg)
        transport.open()  # TransportOpenError leaves the session closed

        self._transport = transport
        self._config = cfg
        self._log.debug(
            "CHANNEL_OPENED port=%s baud=%d timeout=%s",
            port,
            cfg.baudrate,
            cfg.timeout,
        )

    def close(self) -> None:
        transport, self._transport = self._transport, None
        if transport is not None:
            transport.close()
            self._log.debug("CHANNEL_CLOSED")

    def _require_open(self) -> Transport:
        if self._transport is None:
            raise NotOpenError()
        return self._transport

    # ---------------- Frame I/O ----------------
    def send(self, frame: Frame) -> None:
        transport = self._require_open()
        raw = frame.encode()
        self._log.debug("SENDING_FRAME kind=%s len=%d raw=%s", frame.kind_name, len(raw), raw.hex())
        transport.write(raw)

    def receive_frame(self) -> Frame:
        transport = self._require_open()
        reader = FrameReader(transport, max_idle_reads=self._config.max_idle_reads, logger=self._log)
        return reader.receive_frame()

    def transact(self, frame: Frame) -> Frame:
        """
        Flush, send ``frame`` and return the device's response.

        Raises DeviceExceptionError when the device answers with an
        exception-kind frame; its payload is not interpreted.
        """
        transport = self._require_open()
        transport.flush()

        self.send(frame)
        response = self.receive_frame()

        if response.command == CommandKind.EXCEPTION:
            raise DeviceExceptionError(response)
        return response

    # ---------------- Context manager ----------------
    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
