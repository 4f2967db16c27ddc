"""
ESC/POS control bytes and protocol constants.

Commands are introduced by a prefix byte (ESC = 0x1B, GS = 0x1D) followed by a
command letter and parameter bytes. A handful of commands are a single ASCII
control character (LF, CR, FF, HT, CAN).
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final


class ControlByte(IntEnum):
    """
    ASCII control characters used as opcodes or opcode prefixes.
    """

    NUL = 0x00
    """Terminator for NUL-terminated payloads."""

    HT = 0x09
    """Horizontal tab."""

    LF = 0x0A
    """Print and line feed."""

    FF = 0x0C
    """Print and return to standard mode (in page mode)."""

    CR = 0x0D
    """Print and carriage return."""

    SO = 0x0E
    """Shift out (ESC SO selects double width)."""

    DC4 = 0x14
    """Device control 4 (ESC DC4 cancels double width)."""

    CAN = 0x18
    """Cancel print data in page mode."""

    ESC = 0x1B
    """Escape - prefix of most commands."""

    GS = 0x1D
    """Group separator - prefix of extended commands."""


class ProtocolConstants:
    """
    Protocol defaults and limits.

    Defaults are the values the printer assumes after ESC @; they are
    documented here for callers and are never substituted for a missing
    argument.
    """

    # ===== Printer Defaults =====

    DEFAULT_LINE_SPACING_DOTS: Final[int] = 30
    """Line spacing selected by ESC 2."""

    DEFAULT_BARCODE_HEIGHT_DOTS: Final[int] = 50
    """Barcode height after initialization."""

    DEFAULT_BARCODE_WIDTH: Final[int] = 3
    """Barcode module width after initialization."""

    DEFAULT_MAX_HEATING_DOTS: Final[int] = 7
    """ESC 7 n1 default: 8 * (7 + 1) = 64 dots heated at once."""

    DEFAULT_HEATING_TIME: Final[int] = 80
    """ESC 7 n2 default in units of 10us (800us)."""

    DEFAULT_HEATING_INTERVAL: Final[int] = 2
    """ESC 7 n3 default in units of 10us (20us)."""

    # ===== Limits =====

    MAX_BYTE: Final[int] = 0xFF
    """Largest value of a single parameter byte."""

    MAX_UINT16: Final[int] = 0xFFFF
    """Largest value of a paired low/high parameter."""

    MAX_LEFT_BLANK_CHARACTERS: Final[int] = 47
    """Upper bound of ESC B n."""

    USER_CHARACTER_HEIGHT_BYTES: Final[int] = 3
    """Vertical bytes per user-defined character column (24 dots)."""

    MAX_USER_CHARACTER_WIDTH: Final[int] = 12
    """Widest user-defined character in dots."""

    FIRST_USER_CHARACTER_CODE: Final[int] = 32
    """Lowest code a user-defined character may occupy."""

    LAST_USER_CHARACTER_CODE: Final[int] = 126
    """Highest code a user-defined character may occupy."""

    MAX_TAB_POSITIONS: Final[int] = 32
    """Maximum number of horizontal tab positions for ESC D."""

    MAX_BIT_IMAGE_DOTS: Final[int] = 1023
    """Largest nL + nH * 256 for ESC * (nH is 0-3)."""

    MAX_DOWNLOADED_IMAGE_WIDTH: Final[int] = 48
    """GS * x upper bound, in units of 8 dots."""

    MAX_DOWNLOADED_IMAGE_AREA: Final[int] = 1199
    """GS * requires x * y < 1200."""

    MIN_HEATING_TIME: Final[int] = 3
    """Lowest heating time accepted by ESC 7."""

    # ===== Barcode Framing =====

    CODE_SET_SELECTOR: Final[int] = 0x7B
    """'{' - introduces a CODE128 code set selection."""

    # ===== Control Board =====

    WAKE_UP_BYTE: Final[int] = 0xFF
    """Byte the host sends to wake a sleeping control board (ESC 8)."""

    WAKE_UP_DELAY: Final[float] = 0.05
    """Seconds to wait after the wake-up byte before sending commands."""
