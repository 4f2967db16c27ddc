"""
Protocol layer for ESC/POS command encoding.

This module contains the low-level protocol handling:
- Control bytes and protocol constants
- Byte codec primitives (scalars, 16-bit LE pairs, bit flags, text)
- The command catalog
- Barcode symbology rules
- Parameter validation
- Byte assembly
"""

from thermalprinter.protocol.builder import DEFAULT_BUILDER, CommandBuilder, encode
from thermalprinter.protocol.catalog import (
    CATALOG,
    CommandCatalog,
    CommandDescriptor,
    CommandKind,
    Framing,
    ParamKind,
    ParamSpec,
)
from thermalprinter.protocol.constants import ControlByte, ProtocolConstants
from thermalprinter.protocol.encoding import (
    bytes_to_hex,
    check_range,
    decode_bit_flags,
    decode_uint16_le,
    encode_ascii,
    encode_bit_flags,
    encode_scalar,
    encode_uint16_le,
)
from thermalprinter.protocol.symbology import SYMBOLOGY_RULES, SymbologyRule, check_barcode_data
from thermalprinter.protocol.validator import ValidatedCommand, validate

__all__ = [
    # Constants
    "ControlByte",
    "ProtocolConstants",
    # Encoding
    "check_range",
    "encode_scalar",
    "encode_uint16_le",
    "decode_uint16_le",
    "encode_bit_flags",
    "decode_bit_flags",
    "encode_ascii",
    "bytes_to_hex",
    # Catalog
    "CATALOG",
    "CommandCatalog",
    "CommandDescriptor",
    "CommandKind",
    "Framing",
    "ParamKind",
    "ParamSpec",
    # Symbology
    "SYMBOLOGY_RULES",
    "SymbologyRule",
    "check_barcode_data",
    # Validation
    "ValidatedCommand",
    "validate",
    # Builder
    "CommandBuilder",
    "DEFAULT_BUILDER",
    "encode",
]
