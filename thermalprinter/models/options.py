"""
Pydantic option structs for bit-flag commands.

Commands whose single parameter byte is a set of independent switches take
one of these models instead of a row of booleans. Every field is named after
its entry in the matching bit-position table, so a model converts to the
flag mapping the codec packs with a plain ``model_dump()``.

Design principles:
- All models are frozen (immutable)
- Fields are strict booleans; 1 and "yes" are rejected
- Unknown fields are rejected rather than ignored
- Every switch defaults to off, the state the printer assumes after ESC @
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import ClassVar, Final

from pydantic import BaseModel, ConfigDict

PRINT_MODE_BITS: Final[Mapping[str, int]] = MappingProxyType({
    "bold": 3,
    "double_height": 4,
    "double_width": 5,
    "delete_line": 6,
    "underline": 7,
})
"""ESC ! bit positions. Bits 0, 1 and 2 are reserved."""

AUTOMATIC_STATUS_BACK_BITS: Final[Mapping[str, int]] = MappingProxyType({
    "asb": 2,
    "rts": 5,
})
"""GS a bit positions."""

SWITCH_BITS: Final[Mapping[str, int]] = MappingProxyType({
    "enabled": 0,
})
"""Single on/off switch in bit 0 (ESC E, ESC G, ESC {, GS B, GS b, ESC %)."""

PANEL_KEY_BITS: Final[Mapping[str, int]] = MappingProxyType({
    "disabled": 0,
})
"""ESC c 5: bit 0 set disables the panel buttons."""


class FlagOptions(BaseModel):
    """
    Base class for option structs packed into a single byte.

    Subclasses set ``bits`` to their bit-position table.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    bits: ClassVar[Mapping[str, int]] = MappingProxyType({})

    @classmethod
    def bit_table(cls) -> Mapping[str, int]:
        """Bit position of every field."""
        return cls.bits

    def as_flags(self) -> dict[str, bool]:
        """Return the field values keyed by flag name."""
        return self.model_dump()


class PrintMode(FlagOptions):
    """
    Character print mode for ESC !.

    Example:
        >>> mode = PrintMode(bold=True, underline=True)
        >>> mode.as_flags()["underline"]
        True
    """

    bold: bool = False
    double_height: bool = False
    double_width: bool = False
    delete_line: bool = False
    underline: bool = False

    bits: ClassVar[Mapping[str, int]] = PRINT_MODE_BITS


class AutomaticStatusBack(FlagOptions):
    """
    Automatic status back settings for GS a.

    Attributes:
        asb: Report paper and error status changes automatically.
        rts: Enable RTS flow control on the serial line.
    """

    asb: bool = False
    rts: bool = False

    bits: ClassVar[Mapping[str, int]] = AUTOMATIC_STATUS_BACK_BITS
