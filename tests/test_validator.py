"""Tests for parameter validation."""

import pytest

from thermalprinter.exceptions import (
    InvalidPayloadError,
    PayloadFault,
    RangeError,
    UnsupportedValueError,
)
from thermalprinter.models.options import AutomaticStatusBack, PrintMode
from thermalprinter.models.selectors import BarcodeSymbology, BaudRate, Code128CodeSet
from thermalprinter.protocol.catalog import CATALOG, CommandKind
from thermalprinter.protocol.validator import validate


class TestNormalization:
    """Tests for the shape of validated values."""

    def test_flags_are_packed(self):
        """Test flag options become the packed byte."""
        command = validate(
            CATALOG[CommandKind.SET_PRINT_MODE],
            {"mode": PrintMode(bold=True, underline=True)},
        )
        assert command.values["mode"] == 0b10001000

    def test_flag_mapping_accepted(self):
        """Test a plain flag mapping is accepted."""
        command = validate(CATALOG[CommandKind.SET_EMPHASIZED_MODE], {"state": {"enabled": True}})
        assert command.values["state"] == 1

    def test_selector_kept_as_member(self):
        """Test selectors stay enum members until assembly."""
        command = validate(
            CATALOG[CommandKind.PRINT_BARCODE],
            {"symbology": BarcodeSymbology.EAN8, "data": "1234567"},
        )
        assert command.values["symbology"] is BarcodeSymbology.EAN8
        assert command.values["data"] == b"1234567"

    def test_raw_sequence_becomes_bytes(self):
        """Test a list of ints becomes bytes."""
        command = validate(
            CATALOG[CommandKind.SET_HORIZONTAL_TAB_POSITIONS], {"positions": [1, 2, 3]}
        )
        assert command.values["positions"] == b"\x01\x02\x03"

    def test_bytearray_accepted(self):
        """Test bytearray payloads."""
        command = validate(
            CATALOG[CommandKind.DEFINE_DOWNLOADED_BIT_IMAGE],
            {"width": 1, "height": 1, "data": bytearray(8)},
        )
        assert command.values["data"] == bytes(8)

    def test_values_are_read_only(self):
        """Test validated values cannot be changed."""
        command = validate(CATALOG[CommandKind.SET_LINE_SPACING], {"dots": 30})
        with pytest.raises(TypeError):
            command.values["dots"] = 31

    def test_code_set_prefix_applied(self):
        """Test the CODE128 code set is prefixed to the data."""
        command = validate(
            CATALOG[CommandKind.PRINT_BARCODE_WITH_LENGTH],
            {
                "symbology": BarcodeSymbology.CODE128,
                "code_set": Code128CodeSet.CODE_A,
                "data": "ABC",
            },
        )
        assert command.values["data"] == b"{AABC"


class TestRejection:
    """Tests for rejected input."""

    def test_first_violation_wins(self):
        """Test parameters are checked left to right."""
        with pytest.raises(RangeError) as exc_info:
            validate(
                CATALOG[CommandKind.SET_CONTROL_PARAMETERS],
                {"max_heating_dots": 256, "heating_time": 0, "heating_interval": -1},
            )
        assert exc_info.value.param == "max_heating_dots"

    def test_heating_time_minimum(self):
        """Test heating time below 3 is rejected."""
        with pytest.raises(RangeError) as exc_info:
            validate(
                CATALOG[CommandKind.SET_CONTROL_PARAMETERS],
                {"max_heating_dots": 7, "heating_time": 2, "heating_interval": 2},
            )
        assert exc_info.value.minimum == 3

    def test_raw_element_out_of_range(self):
        """Test a payload element outside 0-255 names its index."""
        with pytest.raises(RangeError) as exc_info:
            validate(
                CATALOG[CommandKind.SET_HORIZONTAL_TAB_POSITIONS], {"positions": [8, 300]}
            )
        assert exc_info.value.param == "positions[1]"

    def test_raw_rejects_str(self):
        """Test text is not accepted as a raw payload."""
        with pytest.raises(TypeError):
            validate(
                CATALOG[CommandKind.DEFINE_DOWNLOADED_BIT_IMAGE],
                {"width": 1, "height": 1, "data": "abcdefgh"},
            )

    def test_wrong_flag_model(self):
        """Test flag options for another command are unsupported."""
        with pytest.raises(UnsupportedValueError):
            validate(
                CATALOG[CommandKind.SET_PRINT_MODE], {"mode": AutomaticStatusBack(asb=True)}
            )

    def test_flags_wrong_type(self):
        """Test a bare bool is not a flag set."""
        with pytest.raises(TypeError):
            validate(CATALOG[CommandKind.SET_EMPHASIZED_MODE], {"state": True})

    def test_unknown_flag_name(self):
        """Test an unknown flag name is a value error."""
        with pytest.raises(ValueError):
            validate(CATALOG[CommandKind.SET_EMPHASIZED_MODE], {"state": {"bold": True}})

    def test_character_range_before_width(self):
        """Test last below first is reported before a bad width."""
        with pytest.raises(RangeError) as exc_info:
            validate(
                CATALOG[CommandKind.DEFINE_USER_DEFINED_CHARACTERS],
                {"first": 66, "last": 65, "width": 255, "data": b""},
            )
        assert exc_info.value.param == "last"
        assert (exc_info.value.minimum, exc_info.value.maximum) == (66, 126)

    def test_none_for_required_selector(self):
        """Test None is unsupported where a selector is required."""
        with pytest.raises(UnsupportedValueError):
            validate(
                CATALOG[CommandKind.PRINT_BARCODE], {"symbology": None, "data": "1234567"}
            )


class TestTabPositions:
    """Tests for ESC D position rules."""

    def test_not_ascending(self):
        """Test positions must strictly increase."""
        with pytest.raises(InvalidPayloadError) as exc_info:
            validate(
                CATALOG[CommandKind.SET_HORIZONTAL_TAB_POSITIONS], {"positions": [8, 8, 16]}
            )
        assert exc_info.value.reason is PayloadFault.ORDERING
        assert exc_info.value.position == 1

    def test_zero_position(self):
        """Test position 0 would end the list early."""
        with pytest.raises(InvalidPayloadError) as exc_info:
            validate(CATALOG[CommandKind.SET_HORIZONTAL_TAB_POSITIONS], {"positions": [0, 8]})
        assert exc_info.value.reason is PayloadFault.EMBEDDED_TERMINATOR

    def test_too_many(self):
        """Test at most 32 positions."""
        descriptor = CATALOG[CommandKind.SET_HORIZONTAL_TAB_POSITIONS]
        validate(descriptor, {"positions": list(range(1, 33))})
        with pytest.raises(InvalidPayloadError) as exc_info:
            validate(descriptor, {"positions": list(range(1, 34))})
        assert exc_info.value.reason is PayloadFault.INVALID_LENGTH


class TestBarcodes:
    """Tests for barcode commands."""

    def test_nul_in_data(self):
        """Test NUL inside NUL-terminated data is rejected."""
        with pytest.raises(InvalidPayloadError) as exc_info:
            validate(
                CATALOG[CommandKind.PRINT_BARCODE],
                {"symbology": BarcodeSymbology.CODE128, "data": b"AB\x00C"},
            )
        assert exc_info.value.reason is PayloadFault.EMBEDDED_TERMINATOR
        assert exc_info.value.position == 2

    def test_empty_data(self):
        """Test barcodes need at least one character."""
        with pytest.raises(InvalidPayloadError) as exc_info:
            validate(
                CATALOG[CommandKind.PRINT_BARCODE],
                {"symbology": BarcodeSymbology.CODE39, "data": ""},
            )
        assert exc_info.value.reason is PayloadFault.INVALID_LENGTH

    def test_code128_requires_code_set(self):
        """Test CODE128 without a code set is rejected."""
        with pytest.raises(InvalidPayloadError) as exc_info:
            validate(
                CATALOG[CommandKind.PRINT_BARCODE_WITH_LENGTH],
                {"symbology": BarcodeSymbology.CODE128, "code_set": None, "data": "ABC"},
            )
        assert exc_info.value.reason is PayloadFault.CODE_SET
        assert exc_info.value.param == "code_set"

    def test_code_set_checked_before_data(self):
        """Test the code set rule fires before data is validated."""
        with pytest.raises(InvalidPayloadError) as exc_info:
            validate(
                CATALOG[CommandKind.PRINT_BARCODE_WITH_LENGTH],
                {"symbology": BarcodeSymbology.CODE39, "code_set": Code128CodeSet.CODE_A,
                 "data": "\u20ac"},
            )
        assert exc_info.value.reason is PayloadFault.CODE_SET
        assert exc_info.value.param == "code_set"

    def test_nul_terminated_data_unbounded(self):
        """Test NUL-terminated data may exceed 255 bytes."""
        validated = validate(
            CATALOG[CommandKind.PRINT_BARCODE],
            {"symbology": BarcodeSymbology.CODE39, "data": "1" * 300},
        )
        assert len(validated.values["data"]) == 300

    def test_code_set_rejected_for_other_symbologies(self):
        """Test a code set with EAN13 is rejected."""
        with pytest.raises(InvalidPayloadError) as exc_info:
            validate(
                CATALOG[CommandKind.PRINT_BARCODE_WITH_LENGTH],
                {
                    "symbology": BarcodeSymbology.EAN13,
                    "code_set": Code128CodeSet.CODE_B,
                    "data": "400638133393",
                },
            )
        assert exc_info.value.reason is PayloadFault.CODE_SET

    def test_prefixed_length_limit(self):
        """Test data plus the two-byte prefix must fit one length byte."""
        descriptor = CATALOG[CommandKind.PRINT_BARCODE_WITH_LENGTH]
        validate(
            descriptor,
            {"symbology": BarcodeSymbology.CODE128, "code_set": Code128CodeSet.CODE_B,
             "data": "A" * 253},
        )
        with pytest.raises(InvalidPayloadError) as exc_info:
            validate(
                descriptor,
                {"symbology": BarcodeSymbology.CODE128, "code_set": Code128CodeSet.CODE_B,
                 "data": "A" * 254},
            )
        assert exc_info.value.reason is PayloadFault.INVALID_LENGTH

    def test_non_single_byte_text(self):
        """Test barcode text outside a single byte is rejected."""
        with pytest.raises(InvalidPayloadError) as exc_info:
            validate(
                CATALOG[CommandKind.PRINT_BARCODE],
                {"symbology": BarcodeSymbology.CODE128, "data": "AB€"},
            )
        assert exc_info.value.reason is PayloadFault.NOT_SINGLE_BYTE
        assert exc_info.value.position == 2


class TestBluetooth:
    """Tests for ESC 0 string parameters."""

    def test_name_too_long(self):
        """Test a name longer than 255 bytes is rejected."""
        with pytest.raises(InvalidPayloadError) as exc_info:
            validate(
                CATALOG[CommandKind.SET_BLUETOOTH_PARAMETERS],
                {"baud_rate": BaudRate.BAUD_9600, "name": "x" * 256, "password": ""},
            )
        assert exc_info.value.param == "name"
