"""Tests for option models and selector tables."""

import pytest
from pydantic import ValidationError

from thermalprinter.models.options import (
    AUTOMATIC_STATUS_BACK_BITS,
    PRINT_MODE_BITS,
    AutomaticStatusBack,
    FlagOptions,
    PrintMode,
)
from thermalprinter.models.selectors import (
    BARCODE_LENGTH_PREFIXED_CODES,
    BARCODE_NUL_TERMINATED_CODES,
    BAUD_RATE_CODES,
    BIT_IMAGE_COLUMN_BYTES,
    BIT_IMAGE_MODE_CODES,
    CHARACTER_FONT_CODES,
    INTERNATIONAL_CHARSET_CODES,
    Alignment,
    BarcodeSymbology,
    BaudRate,
    BitImageMode,
    InternationalCharset,
)


class TestPrintMode:
    """Tests for the PrintMode model."""

    def test_defaults_off(self):
        """Test every switch defaults to off."""
        assert not any(PrintMode().as_flags().values())

    def test_fields_match_bit_table(self):
        """Test field names equal bit table names."""
        assert set(PrintMode.model_fields) == set(PRINT_MODE_BITS)
        assert PrintMode.bit_table() is PRINT_MODE_BITS

    def test_frozen(self):
        """Test the model is immutable."""
        mode = PrintMode(bold=True)
        with pytest.raises(ValidationError):
            mode.bold = False

    def test_strict_bool(self):
        """Test ints are not accepted as bools."""
        with pytest.raises(ValidationError):
            PrintMode(bold=1)

    def test_unknown_field(self):
        """Test unknown fields are rejected."""
        with pytest.raises(ValidationError):
            PrintMode(italic=True)

    def test_as_flags(self):
        """Test conversion to the flag mapping."""
        flags = PrintMode(double_width=True, underline=True).as_flags()
        assert flags == {
            "bold": False,
            "double_height": False,
            "double_width": True,
            "delete_line": False,
            "underline": True,
        }


class TestAutomaticStatusBack:
    """Tests for the AutomaticStatusBack model."""

    def test_fields_match_bit_table(self):
        """Test field names equal bit table names."""
        assert set(AutomaticStatusBack.model_fields) == set(AUTOMATIC_STATUS_BACK_BITS)

    def test_bit_positions(self):
        """Test ASB is bit 2 and RTS is bit 5."""
        assert AUTOMATIC_STATUS_BACK_BITS == {"asb": 2, "rts": 5}

    def test_bit_table_is_class_level(self):
        """Test the table is shared by the class, not a model field."""
        assert AutomaticStatusBack.bit_table() is AUTOMATIC_STATUS_BACK_BITS
        assert "bits" not in AutomaticStatusBack.model_fields
        assert "bits" not in AutomaticStatusBack(asb=True).as_flags()

    def test_base_has_no_bits(self):
        """Test the base options class defines no flags."""
        assert dict(FlagOptions.bit_table()) == {}


class TestSelectorTables:
    """Tests for explicit variant-to-byte tables."""

    def test_alignment_is_not_int(self):
        """Test selectors are not interchangeable with their codes."""
        assert Alignment.CENTER != 1

    def test_tables_cover_enums(self):
        """Test every variant has a code."""
        assert set(BARCODE_NUL_TERMINATED_CODES) == set(BarcodeSymbology)
        assert set(BARCODE_LENGTH_PREFIXED_CODES) == set(BarcodeSymbology)
        assert set(INTERNATIONAL_CHARSET_CODES) == set(InternationalCharset)
        assert set(BAUD_RATE_CODES) == set(BaudRate)
        assert set(BIT_IMAGE_MODE_CODES) == set(BitImageMode)
        assert set(BIT_IMAGE_COLUMN_BYTES) == set(BitImageMode)

    def test_barcode_code_ranges(self):
        """Test function A codes are 0-10 and function B codes are 65-75."""
        assert sorted(BARCODE_NUL_TERMINATED_CODES.values()) == list(range(0, 11))
        assert sorted(BARCODE_LENGTH_PREFIXED_CODES.values()) == list(range(65, 76))
        for symbology in BarcodeSymbology:
            assert (
                BARCODE_LENGTH_PREFIXED_CODES[symbology]
                == BARCODE_NUL_TERMINATED_CODES[symbology] + 65
            )

    def test_charset_codes(self):
        """Test the international character set code ranges."""
        codes = set(INTERNATIONAL_CHARSET_CODES.values())
        assert codes == set(range(0, 18)) | set(range(66, 76)) | {82}

    def test_font_codes(self):
        """Test fonts A-E and the two special fonts."""
        assert sorted(CHARACTER_FONT_CODES.values()) == [0, 1, 2, 3, 4, 97, 98]

    def test_codes_unique(self):
        """Test no two variants share a code."""
        for table in (
            BARCODE_NUL_TERMINATED_CODES,
            INTERNATIONAL_CHARSET_CODES,
            CHARACTER_FONT_CODES,
            BAUD_RATE_CODES,
        ):
            assert len(set(table.values())) == len(table)

    def test_tables_read_only(self):
        """Test code tables cannot be modified."""
        with pytest.raises(TypeError):
            BAUD_RATE_CODES[BaudRate.BAUD_9600] = 9
