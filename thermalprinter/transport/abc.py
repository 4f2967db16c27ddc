"""
Abstract transport interface for sending encoded commands to a printer.

This library only encodes commands; moving the bytes to a device (serial,
USB, Bluetooth) belongs to a transport. This module fixes the contract such a
transport offers so that code built on the encoder can be written, and
tested, against it.

The transport layer is responsible for:
- Opening/closing the physical connection
- Writing encoded commands
- Reading the raw status bytes returned by query commands

Interpreting status bytes is left to the caller; each query command's
descriptor documents the meaning of its response bits.

Implementations:
- MockPrinter: records writes and answers query commands
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types import TracebackType


class AbstractTransport(ABC):
    """
    Abstract base class for printer transports.

    Transports support async context manager protocol for safe resource
    management:

        async with transport:
            await transport.write(commands.initialize_printer())
            await transport.write(commands.transmit_paper_sensor_status())
            status = await transport.read(1)

    Attributes:
        is_open: Whether the transport connection is currently open.
        port_name: Identifier for the transport (e.g., serial port name).
    """

    @property
    @abstractmethod
    def is_open(self) -> bool:
        """
        Check if the transport connection is currently open.

        Returns:
            True if connected and ready for I/O, False otherwise.
        """
        ...

    @property
    @abstractmethod
    def port_name(self) -> str:
        """
        Get the transport identifier.

        Returns:
            Port name or identifier string (e.g., "/dev/rfcomm0", "COM3").
        """
        ...

    @abstractmethod
    async def open(self) -> None:
        """
        Open the transport connection.

        Raises:
            TransportError: If the connection cannot be established or is
                already open.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """
        Close the transport connection.

        Safe to call multiple times (idempotent). After closing, the
        transport can be reopened with open().
        """
        ...

    @abstractmethod
    async def write(self, data: bytes) -> None:
        """
        Write encoded command bytes to the printer.

        Args:
            data: One or more complete encoded commands.

        Raises:
            TransportError: If the transport is not open or write fails.
        """
        ...

    @abstractmethod
    async def read(self, size: int, timeout: float | None = None) -> bytes:
        """
        Read an exact number of status bytes.

        Args:
            size: Number of bytes to read.
            timeout: Read timeout in seconds. None uses transport default.

        Returns:
            Exactly `size` bytes.

        Raises:
            TimeoutError: If timeout expires before all bytes are received.
            TransportError: If the transport is not open or read fails.
        """
        ...

    async def __aenter__(self) -> AbstractTransport:
        """Async context manager entry - opens the transport."""
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Async context manager exit - closes the transport."""
        await self.close()
