"""
Data models for command parameters.

This module contains:

- Selector enums for every enumerated protocol code, each with an explicit
  variant-to-byte table
- Pydantic option structs for bit-flag commands
"""

from thermalprinter.models.options import (
    AUTOMATIC_STATUS_BACK_BITS,
    PANEL_KEY_BITS,
    PRINT_MODE_BITS,
    SWITCH_BITS,
    AutomaticStatusBack,
    FlagOptions,
    PrintMode,
)
from thermalprinter.models.selectors import (
    Alignment,
    BarcodeSymbology,
    BaudRate,
    BitImageMode,
    CharacterFont,
    Code128CodeSet,
    CodeTable,
    CutMode,
    DrawerPin,
    HriFont,
    HriPosition,
    ImageScale,
    InternationalCharset,
    PrintColor,
    PrintDirection,
    RotationMode,
    UnderlineMode,
)

__all__ = [
    # Options
    "FlagOptions",
    "PrintMode",
    "AutomaticStatusBack",
    # Bit tables
    "PRINT_MODE_BITS",
    "AUTOMATIC_STATUS_BACK_BITS",
    "SWITCH_BITS",
    "PANEL_KEY_BITS",
    # Selectors
    "Alignment",
    "BarcodeSymbology",
    "BaudRate",
    "BitImageMode",
    "CharacterFont",
    "Code128CodeSet",
    "CodeTable",
    "CutMode",
    "DrawerPin",
    "HriFont",
    "HriPosition",
    "ImageScale",
    "InternationalCharset",
    "PrintColor",
    "PrintDirection",
    "RotationMode",
    "UnderlineMode",
]
