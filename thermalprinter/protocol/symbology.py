"""
Barcode symbology content rules.

Each symbology accepted by GS k restricts which bytes may appear in the
barcode data and how many of them there may be. The rules are checked before
a barcode command is framed so that a bad symbol is reported with the
position of the first offending byte instead of being printed as garbage.

Rules:
    Symbology   Length      Alphabet
    UPC-A       11-12       0-9
    UPC-E       11-12       0-9
    EAN13       12-13       0-9
    EAN8        7-8         0-9
    CODE39      1+          space $ % + - . / 0-9 A-Z
    ITF         2+, even    0-9
    CODABAR     1+          $ + - . / 0-9 : A-D
    CODE93      1+          0-127
    CODE128     1+          0-127
    CODE11      1+          0-9
    MSI         1+          0-9
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from thermalprinter.exceptions import InvalidPayloadError, PayloadFault
from thermalprinter.models.selectors import BarcodeSymbology, Code128CodeSet

DIGITS: Final[frozenset[int]] = frozenset(range(0x30, 0x3A))
UPPERCASE: Final[frozenset[int]] = frozenset(range(0x41, 0x5B))
ASCII7: Final[frozenset[int]] = frozenset(range(0x00, 0x80))

CODE39_ALPHABET: Final[frozenset[int]] = (
    DIGITS | UPPERCASE | frozenset(b" $%+-./")
)
CODABAR_ALPHABET: Final[frozenset[int]] = (
    DIGITS | frozenset(b"ABCD") | frozenset(b"$+-./:")
)


@dataclass(frozen=True)
class SymbologyRule:
    """
    Content constraints for one barcode symbology.

    Attributes:
        alphabet: Byte values allowed anywhere in the data.
        min_length: Fewest data bytes.
        max_length: Most data bytes, or None for no symbology limit.
        even_length: Data length must be even.
    """

    alphabet: frozenset[int]
    min_length: int = 1
    max_length: int | None = None
    even_length: bool = False


SYMBOLOGY_RULES: Final[Mapping[BarcodeSymbology, SymbologyRule]] = MappingProxyType({
    BarcodeSymbology.UPC_A: SymbologyRule(DIGITS, 11, 12),
    BarcodeSymbology.UPC_E: SymbologyRule(DIGITS, 11, 12),
    BarcodeSymbology.EAN13: SymbologyRule(DIGITS, 12, 13),
    BarcodeSymbology.EAN8: SymbologyRule(DIGITS, 7, 8),
    BarcodeSymbology.CODE39: SymbologyRule(CODE39_ALPHABET),
    BarcodeSymbology.ITF: SymbologyRule(DIGITS, 2, even_length=True),
    BarcodeSymbology.CODABAR: SymbologyRule(CODABAR_ALPHABET),
    BarcodeSymbology.CODE93: SymbologyRule(ASCII7),
    BarcodeSymbology.CODE128: SymbologyRule(ASCII7),
    BarcodeSymbology.CODE11: SymbologyRule(DIGITS),
    BarcodeSymbology.MSI: SymbologyRule(DIGITS),
})

CODE_SET_C_RULE: Final[SymbologyRule] = SymbologyRule(DIGITS, 2, even_length=True)
"""CODE128 code set C packs two digits per symbol."""


def check_rule(rule: SymbologyRule, data: bytes, *, param: str = "data") -> None:
    """
    Check data against a single rule.

    Raises:
        InvalidPayloadError: INVALID_SYMBOL with the first bad position, or
            INVALID_LENGTH when the length or parity is wrong.
    """
    for position, value in enumerate(data):
        if value not in rule.alphabet:
            raise InvalidPayloadError(
                PayloadFault.INVALID_SYMBOL,
                f"Byte 0x{value:02X} is not in the symbology alphabet",
                param=param,
                position=position,
            )

    length = len(data)
    if length < rule.min_length:
        raise InvalidPayloadError(
            PayloadFault.INVALID_LENGTH,
            f"Needs at least {rule.min_length} characters, got {length}",
            param=param,
        )
    if rule.max_length is not None and length > rule.max_length:
        raise InvalidPayloadError(
            PayloadFault.INVALID_LENGTH,
            f"Allows at most {rule.max_length} characters, got {length}",
            param=param,
            position=rule.max_length,
        )
    if rule.even_length and length % 2:
        raise InvalidPayloadError(
            PayloadFault.INVALID_LENGTH,
            f"Needs an even number of characters, got {length}",
            param=param,
            position=length - 1,
        )


def check_barcode_data(
    symbology: BarcodeSymbology,
    data: bytes,
    *,
    code_set: Code128CodeSet | None = None,
    param: str = "data",
) -> None:
    """
    Check barcode data against its symbology.

    Args:
        symbology: Barcode system the data is printed with.
        data: Barcode data without any code-set prefix.
        code_set: CODE128 code set, which adds the code set C digit-pair rule.
        param: Parameter name reported on failure.

    Raises:
        InvalidPayloadError: If the data breaks the symbology's rules.

    Example:
        >>> check_barcode_data(BarcodeSymbology.EAN8, b"1234567")
        >>> check_barcode_data(BarcodeSymbology.ITF, b"123")
        Traceback (most recent call last):
        ...
        thermalprinter.exceptions.InvalidPayloadError: ...
    """
    check_rule(SYMBOLOGY_RULES[symbology], data, param=param)
    if code_set is Code128CodeSet.CODE_C:
        check_rule(CODE_SET_C_RULE, data, param=param)
