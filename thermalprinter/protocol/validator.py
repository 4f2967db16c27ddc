"""
Parameter validation.

validate() runs every check a command needs before a single byte is
assembled:

1. Each parameter, left to right, against its ParamSpec (range, selector
   table, flag table, payload length bounds, single-byte text), followed by
   the parameter's own rule over the values validated so far
2. The descriptor's prepare hook
3. Payload length rules (declared dimensions against actual payload length,
   and one length byte per length-prefixed string)

The first violation is raised. Nothing is returned on failure, so the
builder never sees partially valid input.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

from thermalprinter.exceptions import (
    EncodeError,
    InvalidPayloadError,
    PayloadFault,
    UnsupportedValueError,
)
from thermalprinter.models.options import FlagOptions
from thermalprinter.protocol.catalog import (
    CommandDescriptor,
    Framing,
    ParamKind,
    ParamSpec,
)
from thermalprinter.protocol.constants import ProtocolConstants
from thermalprinter.protocol.encoding import (
    check_range,
    encode_ascii,
    encode_bit_flags,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidatedCommand:
    """
    A descriptor paired with values that passed every check.

    Values are normalized: BYTE and UINT16 are ints, FLAGS are the packed
    byte, SELECTOR keeps the enum member, RAW and STRING are bytes.
    """

    descriptor: CommandDescriptor
    values: Mapping[str, Any]


def validate(descriptor: CommandDescriptor, params: Mapping[str, Any]) -> ValidatedCommand:
    """
    Validate parameters for one command.

    Args:
        descriptor: Command being encoded.
        params: Caller-supplied values keyed by parameter name.

    Returns:
        ValidatedCommand ready for framing.

    Raises:
        TypeError: If a parameter is missing, unexpected, or of the wrong
            Python type.
        RangeError: If a scalar is out of range.
        UnsupportedValueError: If a selector is not a legal variant.
        InvalidPayloadError: If a payload has the wrong content or length.
    """
    expected = descriptor.param_names
    missing = [name for name in expected if name not in params]
    unexpected = sorted(set(params) - set(expected))
    if missing or unexpected:
        raise TypeError(
            f"{descriptor.kind.name}: missing {missing or 'nothing'}, "
            f"unexpected {unexpected or 'nothing'}"
        )

    try:
        checked: dict[str, Any] = {}
        for spec in descriptor.params:
            checked[spec.name] = _validate_param(spec, params[spec.name])
            if spec.check is not None:
                spec.check(checked)
        values: Mapping[str, Any] = checked
        if descriptor.prepare is not None:
            values = descriptor.prepare(values)
        _check_payload_lengths(descriptor, values)
    except EncodeError as e:
        logger.debug("Rejected %s: %s", descriptor.kind.name, e)
        raise

    return ValidatedCommand(descriptor, MappingProxyType(dict(values)))


def _validate_param(spec: ParamSpec, value: Any) -> Any:
    if value is None and spec.optional:
        return None

    if spec.kind is ParamKind.BYTE:
        return check_range(value, spec.minimum, spec.maximum, param=spec.name)

    if spec.kind is ParamKind.UINT16:
        return check_range(value, spec.minimum, spec.maximum, param=spec.name)

    if spec.kind is ParamKind.SELECTOR:
        return _validate_selector(spec, value)

    if spec.kind is ParamKind.FLAGS:
        return _validate_flags(spec, value)

    if spec.kind is ParamKind.RAW:
        data = _coerce_raw(spec.name, value)
    else:
        data = _coerce_string(spec.name, value)
    _check_length_bounds(spec, data)
    return data


def _validate_selector(spec: ParamSpec, value: Any) -> Enum:
    if not isinstance(value, Enum) or value not in spec.table:
        raise UnsupportedValueError(spec.name, value, tuple(spec.table))
    return value


def _validate_flags(spec: ParamSpec, value: Any) -> int:
    if isinstance(value, FlagOptions):
        if value.bit_table() is not spec.table:
            raise UnsupportedValueError(spec.name, value)
        return encode_bit_flags(value.as_flags(), spec.table)
    if isinstance(value, Mapping):
        return encode_bit_flags(value, spec.table)
    raise TypeError(f"{spec.name} must be a flag mapping, got {type(value).__name__}")


def _coerce_raw(name: str, value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise TypeError(f"{name} must be bytes or a sequence of ints, got {type(value).__name__}")
    for index, item in enumerate(value):
        check_range(item, 0, ProtocolConstants.MAX_BYTE, param=f"{name}[{index}]")
    return bytes(value)


def _coerce_string(name: str, value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    return encode_ascii(value, param=name)


def _check_length_bounds(spec: ParamSpec, data: bytes) -> None:
    length = len(data)
    if length < spec.minimum:
        raise InvalidPayloadError(
            PayloadFault.INVALID_LENGTH,
            f"Needs at least {spec.minimum} bytes, got {length}",
            param=spec.name,
        )
    if spec.maximum is not None and length > spec.maximum:
        raise InvalidPayloadError(
            PayloadFault.INVALID_LENGTH,
            f"Allows at most {spec.maximum} bytes, got {length}",
            param=spec.name,
            position=spec.maximum,
        )


def _check_payload_lengths(descriptor: CommandDescriptor, values: Mapping[str, Any]) -> None:
    if descriptor.payload_length is not None:
        payload = descriptor.payload_param
        expected = descriptor.payload_length(values)
        actual = len(values[payload.name])
        if actual != expected:
            raise InvalidPayloadError(
                PayloadFault.LENGTH_MISMATCH,
                f"Declared dimensions imply {expected} bytes, got {actual}",
                param=payload.name,
            )

    if descriptor.framing is Framing.LENGTH_PREFIXED_STRING:
        for spec in descriptor.params:
            if spec.kind is ParamKind.STRING and len(values[spec.name]) > ProtocolConstants.MAX_BYTE:
                raise InvalidPayloadError(
                    PayloadFault.INVALID_LENGTH,
                    f"{len(values[spec.name])} bytes do not fit a one-byte length prefix",
                    param=spec.name,
                )
