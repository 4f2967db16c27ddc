"""
Exception hierarchy for thermalprinter.

All exceptions inherit from ThermalPrinterError. Encoding failures derive from
EncodeError and always carry the name of the offending parameter, so a caller
can report exactly which input to correct:

1. RangeError - a scalar outside its documented numeric range
2. UnsupportedValueError - a selector that is not one of its legal variants
3. InvalidPayloadError - a payload with the wrong length or content

A failing encode call never returns partial bytes.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Final


class ThermalPrinterError(Exception):
    """
    Base exception for all thermalprinter errors.

    Allows callers to catch every library error with a single except clause.
    """

    pass


class EncodeError(ThermalPrinterError):
    """
    A command could not be encoded from the given parameters.

    Attributes:
        param: Name of the parameter that failed validation.
    """

    def __init__(self, message: str, *, param: str | None = None) -> None:
        super().__init__(message)
        self.param = param


class RangeError(EncodeError):
    """
    Scalar parameter outside its legal numeric range.

    Example:
        >>> err = RangeError("dots", 300, 0, 255)
        >>> str(err)
        'dots=300 is outside the legal range 0..255'
    """

    def __init__(self, param: str, value: int, minimum: int, maximum: int) -> None:
        super().__init__(
            f"{param}={value} is outside the legal range {minimum}..{maximum}",
            param=param,
        )
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class UnsupportedValueError(EncodeError):
    """
    Enumerated selector that is not among its legal variants.

    Raised when a raw integer or a member of the wrong enum is passed where a
    selector is expected.
    """

    def __init__(
        self,
        param: str,
        value: Any,
        allowed: tuple[Any, ...] = (),
    ) -> None:
        message = f"{param}={value!r} is not a supported value"
        if allowed:
            names = ", ".join(getattr(v, "name", repr(v)) for v in allowed)
            message = f"{message} (expected one of: {names})"
        super().__init__(message, param=param)
        self.value = value
        self.allowed = allowed


class PayloadFault(Enum):
    """Reason codes carried by InvalidPayloadError."""

    LENGTH_MISMATCH = "length_mismatch"
    """Payload length differs from the length implied by its dimensions."""

    NOT_SINGLE_BYTE = "not_single_byte"
    """Text contains a character outside the single-byte range 0-255."""

    INVALID_SYMBOL = "invalid_symbol"
    """Byte outside the symbology's alphabet."""

    INVALID_LENGTH = "invalid_length"
    """Payload too short, too long, or with the wrong parity."""

    EMBEDDED_TERMINATOR = "embedded_terminator"
    """NUL byte inside a NUL-terminated payload."""

    ORDERING = "ordering"
    """Values that must be strictly ascending are not."""

    CODE_SET = "code_set"
    """CODE128 code set missing, or given for a symbology without one."""


class InvalidPayloadError(EncodeError):
    """
    Payload content or length is invalid.

    Attributes:
        reason: PayloadFault describing the class of problem.
        detail: Human-readable detail.
        position: Offending byte position within the payload, when known.
    """

    def __init__(
        self,
        reason: PayloadFault,
        detail: str | None = None,
        *,
        param: str | None = None,
        position: int | None = None,
    ) -> None:
        detail = detail or FAULT_MESSAGES[reason]
        super().__init__(detail, param=param)
        self.reason = reason
        self.detail = detail
        self.position = position

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.param:
            parts.append(f"param={self.param}")
        if self.position is not None:
            parts.append(f"position={self.position}")
        return " ".join(parts) if len(parts) > 1 else parts[0]


class TransportError(ThermalPrinterError):
    """
    Transport-level error.

    Raised by transport implementations for I/O on a closed transport or
    failed writes. Encoding never raises it.
    """

    pass


class TimeoutError(ThermalPrinterError):  # noqa: A001 - intentionally shadows builtin
    """
    No status response arrived in time.

    Raised by transport implementations when a read expires.
    """

    def __init__(
        self,
        message: str = "Communication timeout",
        *,
        timeout_seconds: float | None = None,
    ) -> None:
        super().__init__(message)
        self.timeout_seconds = timeout_seconds

    def __str__(self) -> str:
        base = super().__str__()
        if self.timeout_seconds is not None:
            return f"{base} (after {self.timeout_seconds:.1f}s)"
        return base


FAULT_MESSAGES: Final[dict[PayloadFault, str]] = {
    PayloadFault.LENGTH_MISMATCH: "Payload length does not match its declared dimensions",
    PayloadFault.NOT_SINGLE_BYTE: "Text is not representable as single bytes",
    PayloadFault.INVALID_SYMBOL: "Byte is not in the symbology alphabet",
    PayloadFault.INVALID_LENGTH: "Payload length is not allowed",
    PayloadFault.EMBEDDED_TERMINATOR: "Payload contains the NUL terminator",
    PayloadFault.ORDERING: "Values are not strictly ascending",
    PayloadFault.CODE_SET: "Code set selection is invalid",
}
