"""
Printer double for testing code that talks to a transport.

MockPrinter never touches hardware. It records every write and behaves like
a printer for the query commands in the catalog: writing one of them makes
the matching status byte readable. The status bytes come from flags set with
set_status(), named by the response bits each query's descriptor documents.

Example:
    >>> from thermalprinter import commands
    >>> from thermalprinter.protocol import CommandKind
    >>> from thermalprinter.transport import MockPrinter
    >>>
    >>> printer = MockPrinter()
    >>> printer.set_status(CommandKind.TRANSMIT_PAPER_SENSOR_STATUS, {"no paper": True})
    >>>
    >>> async with printer:
    ...     await printer.write(commands.transmit_paper_sensor_status())
    ...     status = await printer.read(1)
    >>> printer.decode_status(CommandKind.TRANSMIT_PAPER_SENSOR_STATUS, status[0])["no paper"]
    True
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from thermalprinter.exceptions import TimeoutError, TransportError
from thermalprinter.protocol.catalog import CommandCatalog, CommandDescriptor, CommandKind
from thermalprinter.protocol.encoding import bytes_to_hex, decode_bit_flags, encode_bit_flags
from thermalprinter.transport.abc import AbstractTransport

logger = logging.getLogger(__name__)


def _meaning_table(descriptor: CommandDescriptor) -> dict[str, int]:
    return {meaning: bit for bit, meaning in descriptor.response_bits.items()}


class MockPrinter(AbstractTransport):
    """
    Transport double that answers status queries from its own state.

    A write whose bytes are exactly one query command queues that query's
    status byte. Every other write is only recorded. All status bits start
    cleared, i.e. a printer with paper and no errors.

    Attributes:
        received: Every write, in order.
        answered: Query kinds answered so far, in order.
    """

    def __init__(
        self,
        port_name: str = "mock://printer",
        *,
        catalog: CommandCatalog | None = None,
        timeout: float = 5.0,
    ) -> None:
        """
        Args:
            port_name: Identifier reported by port_name.
            catalog: Catalog whose query commands are answered.
            timeout: Timeout reported when a read finds too few status bytes.
        """
        catalog = catalog if catalog is not None else CommandCatalog()
        self._queries: dict[bytes, CommandDescriptor] = {
            d.opcode: d for d in catalog if d.response_bits is not None
        }
        self._status: dict[CommandKind, int] = {d.kind: 0 for d in self._queries.values()}
        self._port_name = port_name
        self._timeout = timeout
        self._is_open = False
        self._received: list[bytes] = []
        self._answered: list[CommandKind] = []
        self._replies = bytearray()

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def port_name(self) -> str:
        return self._port_name

    @property
    def received(self) -> tuple[bytes, ...]:
        return tuple(self._received)

    @property
    def answered(self) -> tuple[CommandKind, ...]:
        return tuple(self._answered)

    def set_status(self, kind: CommandKind, flags: Mapping[str, bool]) -> None:
        """
        Set the status byte a query answers with.

        Args:
            kind: Query command kind.
            flags: Response bit meaning to state. Meanings left out are cleared.

        Raises:
            KeyError: If the kind does not return a status byte.
            ValueError: If a meaning is not one of the query's response bits.
        """
        table = _meaning_table(self._query(kind))
        self._status[kind] = encode_bit_flags(flags, table)

    def decode_status(self, kind: CommandKind, value: int) -> dict[str, bool]:
        """Name every response bit of a status byte returned for kind."""
        return decode_bit_flags(value, _meaning_table(self._query(kind)))

    def _query(self, kind: CommandKind) -> CommandDescriptor:
        for descriptor in self._queries.values():
            if descriptor.kind is kind:
                return descriptor
        raise KeyError(f"{kind.name} does not return a status byte")

    async def open(self) -> None:
        if self._is_open:
            raise TransportError(f"{self._port_name} already open")
        self._is_open = True

    async def close(self) -> None:
        self._is_open = False

    async def write(self, data: bytes) -> None:
        """
        Record a write and queue the status byte if it is a query.

        Raises:
            TransportError: If the printer is not open.
        """
        if not self._is_open:
            raise TransportError(f"{self._port_name} not open")

        data = bytes(data)
        self._received.append(data)
        logger.debug("Received on %s: %s", self._port_name, bytes_to_hex(data))

        descriptor = self._queries.get(data)
        if descriptor is not None:
            status = self._status[descriptor.kind]
            self._answered.append(descriptor.kind)
            self._replies.append(status)
            logger.debug("Answered %s with %02X", descriptor.kind.name, status)

    async def read(self, size: int, timeout: float | None = None) -> bytes:
        """
        Read status bytes produced by earlier queries.

        Raises:
            TimeoutError: If fewer than size status bytes are pending.
            TransportError: If the printer is not open.
        """
        if not self._is_open:
            raise TransportError(f"{self._port_name} not open")

        if len(self._replies) < size:
            raise TimeoutError(
                f"{len(self._replies)} of {size} status bytes pending",
                timeout_seconds=timeout if timeout is not None else self._timeout,
            )

        result = bytes(self._replies[:size])
        del self._replies[:size]
        return result
