"""
Enumerated protocol selectors and their byte codes.

Each selector is a plain Enum (not IntEnum) so that a variant can never be
mistaken for, or silently cast to, its wire value. The byte sent for a
variant comes only from the explicit code table next to it. Tables are
read-only mappings.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Final


class UnderlineMode(Enum):
    """Underline thickness for ESC -."""

    OFF = "off"
    ONE_DOT = "one_dot"
    TWO_DOT = "two_dot"


UNDERLINE_MODE_CODES: Final[Mapping[UnderlineMode, int]] = MappingProxyType({
    UnderlineMode.OFF: 0,
    UnderlineMode.ONE_DOT: 1,
    UnderlineMode.TWO_DOT: 2,
})


class CharacterFont(Enum):
    """Character fonts for ESC M. Availability depends on the printer."""

    FONT_A = "a"
    FONT_B = "b"
    FONT_C = "c"
    FONT_D = "d"
    FONT_E = "e"
    SPECIAL_A = "special_a"
    SPECIAL_B = "special_b"


CHARACTER_FONT_CODES: Final[Mapping[CharacterFont, int]] = MappingProxyType({
    CharacterFont.FONT_A: 0,
    CharacterFont.FONT_B: 1,
    CharacterFont.FONT_C: 2,
    CharacterFont.FONT_D: 3,
    CharacterFont.FONT_E: 4,
    CharacterFont.SPECIAL_A: 97,
    CharacterFont.SPECIAL_B: 98,
})


class InternationalCharset(Enum):
    """International character sets for ESC R."""

    USA = "usa"
    FRANCE = "france"
    GERMANY = "germany"
    UK = "uk"
    DENMARK_I = "denmark_i"
    SWEDEN = "sweden"
    ITALY = "italy"
    SPAIN_I = "spain_i"
    JAPAN = "japan"
    NORWAY = "norway"
    DENMARK_II = "denmark_ii"
    SPAIN_II = "spain_ii"
    LATIN_AMERICA = "latin_america"
    KOREA = "korea"
    SLOVENIA_CROATIA = "slovenia_croatia"
    CHINA = "china"
    VIETNAM = "vietnam"
    ARABIA = "arabia"
    INDIA_DEVANAGARI = "india_devanagari"
    INDIA_BENGALI = "india_bengali"
    INDIA_TAMIL = "india_tamil"
    INDIA_TELUGU = "india_telugu"
    INDIA_ASSAMESE = "india_assamese"
    INDIA_ORIYA = "india_oriya"
    INDIA_KANNADA = "india_kannada"
    INDIA_MALAYALAM = "india_malayalam"
    INDIA_GUJARATI = "india_gujarati"
    INDIA_PUNJABI = "india_punjabi"
    INDIA_MARATHI = "india_marathi"


INTERNATIONAL_CHARSET_CODES: Final[Mapping[InternationalCharset, int]] = MappingProxyType({
    InternationalCharset.USA: 0,
    InternationalCharset.FRANCE: 1,
    InternationalCharset.GERMANY: 2,
    InternationalCharset.UK: 3,
    InternationalCharset.DENMARK_I: 4,
    InternationalCharset.SWEDEN: 5,
    InternationalCharset.ITALY: 6,
    InternationalCharset.SPAIN_I: 7,
    InternationalCharset.JAPAN: 8,
    InternationalCharset.NORWAY: 9,
    InternationalCharset.DENMARK_II: 10,
    InternationalCharset.SPAIN_II: 11,
    InternationalCharset.LATIN_AMERICA: 12,
    InternationalCharset.KOREA: 13,
    InternationalCharset.SLOVENIA_CROATIA: 14,
    InternationalCharset.CHINA: 15,
    InternationalCharset.VIETNAM: 16,
    InternationalCharset.ARABIA: 17,
    InternationalCharset.INDIA_DEVANAGARI: 66,
    InternationalCharset.INDIA_BENGALI: 67,
    InternationalCharset.INDIA_TAMIL: 68,
    InternationalCharset.INDIA_TELUGU: 69,
    InternationalCharset.INDIA_ASSAMESE: 70,
    InternationalCharset.INDIA_ORIYA: 71,
    InternationalCharset.INDIA_KANNADA: 72,
    InternationalCharset.INDIA_MALAYALAM: 73,
    InternationalCharset.INDIA_GUJARATI: 74,
    InternationalCharset.INDIA_PUNJABI: 75,
    InternationalCharset.INDIA_MARATHI: 82,
})


class RotationMode(Enum):
    """90 degree clockwise rotation for ESC V."""

    OFF = "off"
    ON_1_DOT_SPACING = "on_1_dot"
    ON_1_5_DOT_SPACING = "on_1_5_dot"


ROTATION_MODE_CODES: Final[Mapping[RotationMode, int]] = MappingProxyType({
    RotationMode.OFF: 0,
    RotationMode.ON_1_DOT_SPACING: 1,
    RotationMode.ON_1_5_DOT_SPACING: 2,
})


class PrintColor(Enum):
    """Print color for ESC r (two-color printers)."""

    BLACK = "black"
    RED = "red"


PRINT_COLOR_CODES: Final[Mapping[PrintColor, int]] = MappingProxyType({
    PrintColor.BLACK: 0,
    PrintColor.RED: 1,
})


class Alignment(Enum):
    """Justification for ESC a."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


ALIGNMENT_CODES: Final[Mapping[Alignment, int]] = MappingProxyType({
    Alignment.LEFT: 0,
    Alignment.CENTER: 1,
    Alignment.RIGHT: 2,
})


class CodeTable(Enum):
    """Character code table pages for ESC t."""

    PC437 = "pc437"
    PC850 = "pc850"


CODE_TABLE_CODES: Final[Mapping[CodeTable, int]] = MappingProxyType({
    CodeTable.PC437: 0,
    CodeTable.PC850: 1,
})


class PrintDirection(Enum):
    """Print direction and starting corner in page mode (ESC T)."""

    LEFT_TO_RIGHT = "left_to_right"
    BOTTOM_TO_TOP = "bottom_to_top"
    RIGHT_TO_LEFT = "right_to_left"
    TOP_TO_BOTTOM = "top_to_bottom"


PRINT_DIRECTION_CODES: Final[Mapping[PrintDirection, int]] = MappingProxyType({
    PrintDirection.LEFT_TO_RIGHT: 0,
    PrintDirection.BOTTOM_TO_TOP: 1,
    PrintDirection.RIGHT_TO_LEFT: 2,
    PrintDirection.TOP_TO_BOTTOM: 3,
})


class BitImageMode(Enum):
    """
    Dot density for ESC *.

    8-dot modes send one byte per column, 24-dot modes send three.
    """

    SINGLE_DENSITY_8 = "single_8"
    DOUBLE_DENSITY_8 = "double_8"
    SINGLE_DENSITY_24 = "single_24"
    DOUBLE_DENSITY_24 = "double_24"


BIT_IMAGE_MODE_CODES: Final[Mapping[BitImageMode, int]] = MappingProxyType({
    BitImageMode.SINGLE_DENSITY_8: 0,
    BitImageMode.DOUBLE_DENSITY_8: 1,
    BitImageMode.SINGLE_DENSITY_24: 32,
    BitImageMode.DOUBLE_DENSITY_24: 33,
})

BIT_IMAGE_COLUMN_BYTES: Final[Mapping[BitImageMode, int]] = MappingProxyType({
    BitImageMode.SINGLE_DENSITY_8: 1,
    BitImageMode.DOUBLE_DENSITY_8: 1,
    BitImageMode.SINGLE_DENSITY_24: 3,
    BitImageMode.DOUBLE_DENSITY_24: 3,
})
"""Payload bytes per horizontal dot for each bit-image mode."""


class ImageScale(Enum):
    """Scaling for GS / and GS v 0."""

    NORMAL = "normal"
    DOUBLE_WIDTH = "double_width"
    DOUBLE_HEIGHT = "double_height"
    QUADRUPLE = "quadruple"


IMAGE_SCALE_CODES: Final[Mapping[ImageScale, int]] = MappingProxyType({
    ImageScale.NORMAL: 0,
    ImageScale.DOUBLE_WIDTH: 1,
    ImageScale.DOUBLE_HEIGHT: 2,
    ImageScale.QUADRUPLE: 3,
})


class CutMode(Enum):
    """Paper cut for GS V."""

    FULL = "full"
    PARTIAL = "partial"


CUT_MODE_CODES: Final[Mapping[CutMode, int]] = MappingProxyType({
    CutMode.FULL: 0,
    CutMode.PARTIAL: 1,
})


class DrawerPin(Enum):
    """Cash drawer connector pin for ESC p."""

    PIN_2 = "pin_2"
    PIN_5 = "pin_5"


DRAWER_PIN_CODES: Final[Mapping[DrawerPin, int]] = MappingProxyType({
    DrawerPin.PIN_2: 0,
    DrawerPin.PIN_5: 1,
})


class HriPosition(Enum):
    """Where human readable interpretation text is printed (GS H)."""

    NONE = "none"
    ABOVE = "above"
    BELOW = "below"
    BOTH = "both"


HRI_POSITION_CODES: Final[Mapping[HriPosition, int]] = MappingProxyType({
    HriPosition.NONE: 0,
    HriPosition.ABOVE: 1,
    HriPosition.BELOW: 2,
    HriPosition.BOTH: 3,
})


class HriFont(Enum):
    """Font for human readable interpretation text (GS f)."""

    FONT_A = "a"
    FONT_B = "b"


HRI_FONT_CODES: Final[Mapping[HriFont, int]] = MappingProxyType({
    HriFont.FONT_A: 0,
    HriFont.FONT_B: 1,
})


class BarcodeSymbology(Enum):
    """Barcode systems accepted by GS k."""

    UPC_A = "upc_a"
    UPC_E = "upc_e"
    EAN13 = "ean13"
    EAN8 = "ean8"
    CODE39 = "code39"
    ITF = "itf"
    CODABAR = "codabar"
    CODE93 = "code93"
    CODE128 = "code128"
    CODE11 = "code11"
    MSI = "msi"


BARCODE_NUL_TERMINATED_CODES: Final[Mapping[BarcodeSymbology, int]] = MappingProxyType({
    BarcodeSymbology.UPC_A: 0,
    BarcodeSymbology.UPC_E: 1,
    BarcodeSymbology.EAN13: 2,
    BarcodeSymbology.EAN8: 3,
    BarcodeSymbology.CODE39: 4,
    BarcodeSymbology.ITF: 5,
    BarcodeSymbology.CODABAR: 6,
    BarcodeSymbology.CODE93: 7,
    BarcodeSymbology.CODE128: 8,
    BarcodeSymbology.CODE11: 9,
    BarcodeSymbology.MSI: 10,
})
"""Type byte m for GS k m d1...dk NUL."""

BARCODE_LENGTH_PREFIXED_CODES: Final[Mapping[BarcodeSymbology, int]] = MappingProxyType({
    BarcodeSymbology.UPC_A: 65,
    BarcodeSymbology.UPC_E: 66,
    BarcodeSymbology.EAN13: 67,
    BarcodeSymbology.EAN8: 68,
    BarcodeSymbology.CODE39: 69,
    BarcodeSymbology.ITF: 70,
    BarcodeSymbology.CODABAR: 71,
    BarcodeSymbology.CODE93: 72,
    BarcodeSymbology.CODE128: 73,
    BarcodeSymbology.CODE11: 74,
    BarcodeSymbology.MSI: 75,
})
"""Type byte m for GS k m n d1...dn."""


class Code128CodeSet(Enum):
    """CODE128 code set that starts the symbol."""

    CODE_A = "a"
    CODE_B = "b"
    CODE_C = "c"


CODE128_CODE_SET_CODES: Final[Mapping[Code128CodeSet, int]] = MappingProxyType({
    Code128CodeSet.CODE_A: 0x41,
    Code128CodeSet.CODE_B: 0x42,
    Code128CodeSet.CODE_C: 0x43,
})
"""Letter sent after '{' to select the code set."""


class BaudRate(Enum):
    """Bluetooth control board baud rate for ESC 0."""

    BAUD_9600 = 9600
    BAUD_19200 = 19200
    BAUD_38400 = 38400
    BAUD_57600 = 57600
    BAUD_115200 = 115200


BAUD_RATE_CODES: Final[Mapping[BaudRate, int]] = MappingProxyType({
    BaudRate.BAUD_9600: 0,
    BaudRate.BAUD_19200: 1,
    BaudRate.BAUD_38400: 2,
    BaudRate.BAUD_57600: 3,
    BaudRate.BAUD_115200: 4,
})
