"""
Byte-level encoding primitives for ESC/POS parameters.

Every parameter of every command is built from four primitives:

- a single byte checked against a numeric range
- a 16-bit value split into a low byte and a high byte (little-endian)
- a set of named booleans packed into one byte through a bit-position table
- single-byte text, one byte per character

For example:
- ESC 3 30 sets line spacing: the scalar 30 is sent as 0x1E
- ESC $ 300 sets the print position: 300 is sent as [0x2C, 0x01]
- ESC ! with bold and underline sends 0b10001000
"""

from __future__ import annotations

from collections.abc import Mapping

from thermalprinter.exceptions import InvalidPayloadError, PayloadFault, RangeError


def check_range(value: int, minimum: int, maximum: int, *, param: str = "value") -> int:
    """
    Check that an integer lies within [minimum, maximum].

    Args:
        value: Value to check.
        minimum: Smallest legal value.
        maximum: Largest legal value.
        param: Parameter name reported on failure.

    Returns:
        The value unchanged.

    Raises:
        TypeError: If value is not an int (bools are rejected).
        RangeError: If value is outside the range.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{param} must be an int, got {type(value).__name__}")
    if not minimum <= value <= maximum:
        raise RangeError(param, value, minimum, maximum)
    return value


def encode_scalar(value: int, minimum: int, maximum: int, *, param: str = "value") -> int:
    """
    Encode a range-checked scalar as one byte.

    Args:
        value: Value to encode.
        minimum: Smallest legal value.
        maximum: Largest legal value.
        param: Parameter name reported on failure.

    Returns:
        Byte value (0-255).

    Raises:
        RangeError: If value is outside [minimum, maximum].

    Example:
        >>> encode_scalar(30, 0, 255, param="dots")
        30
    """
    return check_range(value, minimum, maximum, param=param) & 0xFF


def encode_uint16_le(value: int, *, param: str = "value") -> tuple[int, int]:
    """
    Split a 16-bit value into (low, high) bytes.

    low = value mod 256, high = value div 256. This is how the protocol
    carries every nL/nH and xL/xH pair; values up to 65535 never fail.

    Args:
        value: 16-bit value (0-65535).
        param: Parameter name reported on failure.

    Returns:
        Tuple of (low, high).

    Raises:
        RangeError: If value is outside 0-65535.

    Example:
        >>> encode_uint16_le(300)
        (44, 1)
    """
    check_range(value, 0, 0xFFFF, param=param)
    return value & 0xFF, (value >> 8) & 0xFF


def decode_uint16_le(low: int, high: int) -> int:
    """
    Join a (low, high) byte pair back into a 16-bit value.

    Example:
        >>> decode_uint16_le(44, 1)
        300
    """
    return low | (high << 8)


def encode_bit_flags(flags: Mapping[str, bool], table: Mapping[str, int]) -> int:
    """
    Pack named booleans into one byte.

    Each true flag contributes 1 << table[name]. Flags missing from the
    mapping are treated as false.

    Args:
        flags: Flag name to boolean.
        table: Flag name to bit position (0-7).

    Returns:
        Packed byte value.

    Raises:
        ValueError: If a flag name is not in the table. This is a programming
            error, not an input error.
        TypeError: If a flag value is not a bool.

    Example:
        >>> encode_bit_flags({"bold": True}, {"bold": 3})
        8
    """
    unknown = set(flags) - set(table)
    if unknown:
        raise ValueError(f"Unknown flag name(s): {', '.join(sorted(unknown))}")

    value = 0
    for name, enabled in flags.items():
        if not isinstance(enabled, bool):
            raise TypeError(f"Flag {name!r} must be a bool, got {type(enabled).__name__}")
        if enabled:
            value |= 1 << table[name]
    return value


def decode_bit_flags(value: int, table: Mapping[str, int]) -> dict[str, bool]:
    """
    Unpack a byte into named booleans by masking each table position.

    Example:
        >>> decode_bit_flags(0b10001000, {"bold": 3, "underline": 7})
        {'bold': True, 'underline': True}
    """
    return {name: bool(value & (1 << position)) for name, position in table.items()}


def encode_ascii(text: str, *, param: str = "text") -> bytes:
    """
    Encode text as one byte per character.

    The protocol has no multi-byte text; each character's code point is sent
    as-is and must fit in a byte.

    Args:
        text: Text to encode.
        param: Parameter name reported on failure.

    Returns:
        Encoded bytes, the same length as text.

    Raises:
        TypeError: If text is not a str.
        InvalidPayloadError: If any character is above 0xFF.

    Example:
        >>> encode_ascii("ABC")
        b'ABC'
    """
    if not isinstance(text, str):
        raise TypeError(f"{param} must be a str, got {type(text).__name__}")

    for position, char in enumerate(text):
        if ord(char) > 0xFF:
            raise InvalidPayloadError(
                PayloadFault.NOT_SINGLE_BYTE,
                f"Character {char!r} (U+{ord(char):04X}) is not a single byte",
                param=param,
                position=position,
            )
    return text.encode("latin-1")


def bytes_to_hex(data: bytes | bytearray | memoryview) -> str:
    """
    Format bytes as space-separated uppercase hex for logging.

    Example:
        >>> bytes_to_hex(b"\\x1b\\x40")
        '1B 40'
    """
    return bytes(data).hex(" ").upper()
