"""
Command builder: turns a command kind and its parameters into wire bytes.

The layout of every command is:

    opcode ++ wire scalars (in parameter order) ++ framing

where the framing depends on the descriptor:

    NONE / FIXED / BIT_FLAGS    nothing more
    LENGTH_PREFIXED_RAW         raw payload
    NUL_TERMINATED_RAW          payload + 0x00
    LENGTH_PREFIXED_STRING      one length byte per string, then the strings

Example:
    >>> from thermalprinter.protocol.catalog import CommandKind
    >>> encode(CommandKind.SET_LINE_SPACING, dots=30)
    b'\\x1b3\\x1e'
"""

from __future__ import annotations

import logging
from typing import Any

from thermalprinter.protocol.catalog import (
    CommandCatalog,
    CommandKind,
    Framing,
    ParamKind,
    ParamSpec,
)
from thermalprinter.protocol.constants import ControlByte
from thermalprinter.protocol.encoding import bytes_to_hex, encode_uint16_le
from thermalprinter.protocol.validator import ValidatedCommand, validate

logger = logging.getLogger(__name__)


class CommandBuilder:
    """
    Assembles encoded commands from a catalog.

    The builder holds no state besides the catalog it reads, so one instance
    can be shared freely.

    Example:
        >>> builder = CommandBuilder()
        >>> builder.build(CommandKind.INITIALIZE_PRINTER)
        b'\\x1b@'
    """

    def __init__(self, catalog: CommandCatalog | None = None) -> None:
        """
        Initialize the builder.

        Args:
            catalog: Descriptors to build from. Defaults to the full catalog.
        """
        self._catalog = catalog if catalog is not None else CommandCatalog()

    @property
    def catalog(self) -> CommandCatalog:
        return self._catalog

    def build(self, kind: CommandKind, **params: Any) -> bytes:
        """
        Validate parameters and encode one command.

        Args:
            kind: Command to encode.
            **params: Parameter values by name.

        Returns:
            Complete command bytes.

        Raises:
            KeyError: If the kind is not in this builder's catalog.
            TypeError: If parameters are missing, unexpected or mistyped.
            EncodeError: If any value fails validation. No bytes are produced.
        """
        descriptor = self._catalog.get(kind)
        if descriptor is None:
            raise KeyError(f"Command {kind!r} is not in the catalog")

        command = validate(descriptor, params)
        data = self.assemble(command)
        logger.debug("Encoded %s: %s", kind.name, bytes_to_hex(data))
        return data

    def assemble(self, command: ValidatedCommand) -> bytes:
        """
        Lay out an already validated command.

        Args:
            command: Output of validate().

        Returns:
            Command bytes.
        """
        descriptor = command.descriptor
        values = command.values

        frame = bytearray(descriptor.opcode)
        payloads: list[bytes] = []
        for spec in descriptor.params:
            if spec.is_payload:
                payloads.append(values[spec.name])
            elif spec.wire:
                frame.extend(_encode_scalar(spec, values[spec.name]))

        framing = descriptor.framing
        if framing is Framing.LENGTH_PREFIXED_STRING:
            frame.extend(len(payload) for payload in payloads)
        for payload in payloads:
            frame.extend(payload)
        if framing is Framing.NUL_TERMINATED_RAW:
            frame.append(ControlByte.NUL)

        return bytes(frame)


def _encode_scalar(spec: ParamSpec, value: Any) -> bytes:
    if spec.kind is ParamKind.SELECTOR:
        return bytes([spec.table[value]])
    if spec.kind is ParamKind.UINT16:
        return bytes(encode_uint16_le(value, param=spec.name))
    # BYTE values and packed FLAGS are already range-checked single bytes
    return bytes([value])


DEFAULT_BUILDER = CommandBuilder()


def encode(kind: CommandKind, **params: Any) -> bytes:
    """
    Encode one command with the default builder.

    Args:
        kind: Command to encode.
        **params: Parameter values by name.

    Returns:
        Complete command bytes.
    """
    return DEFAULT_BUILDER.build(kind, **params)
