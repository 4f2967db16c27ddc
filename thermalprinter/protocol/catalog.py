"""
Command catalog: the static table of every supported command.

Each command kind maps to one immutable CommandDescriptor holding its opcode
bytes, its ordered parameter specs and its framing. The builder and the
validator read nothing but this table, so the whole byte layout of the
protocol is written down here and nowhere else.

Framing kinds:
    NONE                    opcode only
    FIXED                   opcode + scalar bytes (1 per byte, 2 per uint16)
    BIT_FLAGS               opcode + one packed flag byte
    LENGTH_PREFIXED_RAW     opcode + dimension bytes + raw payload
    NUL_TERMINATED_RAW      opcode + type byte + payload + 0x00
    LENGTH_PREFIXED_STRING  opcode + type byte + length byte(s) + string(s)

The table is built once at import time and exposed through read-only
mappings; it is safe to share between threads.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Final

from thermalprinter.exceptions import InvalidPayloadError, PayloadFault, RangeError
from thermalprinter.models.options import (
    AUTOMATIC_STATUS_BACK_BITS,
    PANEL_KEY_BITS,
    PRINT_MODE_BITS,
    SWITCH_BITS,
)
from thermalprinter.models.selectors import (
    ALIGNMENT_CODES,
    BARCODE_LENGTH_PREFIXED_CODES,
    BARCODE_NUL_TERMINATED_CODES,
    BAUD_RATE_CODES,
    BIT_IMAGE_COLUMN_BYTES,
    BIT_IMAGE_MODE_CODES,
    CHARACTER_FONT_CODES,
    CODE128_CODE_SET_CODES,
    CODE_TABLE_CODES,
    CUT_MODE_CODES,
    DRAWER_PIN_CODES,
    HRI_FONT_CODES,
    HRI_POSITION_CODES,
    IMAGE_SCALE_CODES,
    INTERNATIONAL_CHARSET_CODES,
    PRINT_COLOR_CODES,
    PRINT_DIRECTION_CODES,
    ROTATION_MODE_CODES,
    UNDERLINE_MODE_CODES,
    BarcodeSymbology,
)
from thermalprinter.protocol.constants import ControlByte, ProtocolConstants
from thermalprinter.protocol.symbology import check_barcode_data

ESC: Final[int] = ControlByte.ESC
GS: Final[int] = ControlByte.GS


class Framing(Enum):
    """Byte layout following the opcode."""

    NONE = "none"
    FIXED = "fixed"
    BIT_FLAGS = "bit_flags"
    LENGTH_PREFIXED_RAW = "length_prefixed_raw"
    NUL_TERMINATED_RAW = "nul_terminated_raw"
    LENGTH_PREFIXED_STRING = "length_prefixed_string"


class ParamKind(Enum):
    """How a parameter is validated and put on the wire."""

    BYTE = "byte"
    """Single byte within [minimum, maximum]."""

    FLAGS = "flags"
    """Named booleans packed into one byte through a bit table."""

    UINT16 = "uint16"
    """16-bit value sent as low byte then high byte."""

    SELECTOR = "selector"
    """Enum member mapped to its byte through an explicit code table."""

    RAW = "raw"
    """Raw byte payload; minimum and maximum bound its length."""

    STRING = "string"
    """Single-byte text payload; minimum and maximum bound its length."""


SCALAR_KINDS: Final[frozenset[ParamKind]] = frozenset({
    ParamKind.BYTE,
    ParamKind.FLAGS,
    ParamKind.UINT16,
    ParamKind.SELECTOR,
})
PAYLOAD_KINDS: Final[frozenset[ParamKind]] = frozenset({ParamKind.RAW, ParamKind.STRING})


class CommandKind(Enum):
    """Every command the catalog can encode."""

    # Print
    LINE_FEED = "line_feed"
    RETURN_TO_STANDARD_MODE = "return_to_standard_mode"
    CARRIAGE_RETURN = "carriage_return"
    PRINT_PAGE_MODE_DATA = "print_page_mode_data"
    HORIZONTAL_TAB = "horizontal_tab"
    PRINT_AND_FEED = "print_and_feed"
    PRINT_AND_REVERSE_FEED = "print_and_reverse_feed"
    PRINT_AND_FEED_LINES = "print_and_feed_lines"
    PRINT_AND_REVERSE_FEED_LINES = "print_and_reverse_feed_lines"

    # Line spacing
    DEFAULT_LINE_SPACING = "default_line_spacing"
    SET_LINE_SPACING = "set_line_spacing"

    # Character
    CANCEL_PAGE_DATA = "cancel_page_data"
    ENABLE_DOUBLE_WIDTH = "enable_double_width"
    DISABLE_DOUBLE_WIDTH = "disable_double_width"
    CANCEL_USER_DEFINED_CHARACTERS = "cancel_user_defined_characters"
    SET_RIGHT_SIDE_CHARACTER_SPACING = "set_right_side_character_spacing"
    SET_LEFT_BLANK = "set_left_blank"
    SET_PRINT_MODE = "set_print_mode"
    SET_EMPHASIZED_MODE = "set_emphasized_mode"
    SET_DOUBLE_STRIKE_MODE = "set_double_strike_mode"
    SET_UPSIDE_DOWN_MODE = "set_upside_down_mode"
    SET_REVERSE_MODE = "set_reverse_mode"
    SET_USER_DEFINED_CHARACTERS = "set_user_defined_characters"
    SET_UNDERLINE_MODE = "set_underline_mode"
    SELECT_CHARACTER_FONT = "select_character_font"
    SELECT_INTERNATIONAL_CHARACTER_SET = "select_international_character_set"
    SET_ROTATION_MODE = "set_rotation_mode"
    SELECT_PRINT_COLOR = "select_print_color"
    SET_ALIGNMENT = "set_alignment"
    SELECT_CODE_TABLE = "select_code_table"
    DEFINE_USER_DEFINED_CHARACTERS = "define_user_defined_characters"
    SET_HORIZONTAL_TAB_POSITIONS = "set_horizontal_tab_positions"

    # Position and page mode
    SELECT_PAGE_MODE = "select_page_mode"
    SELECT_STANDARD_MODE = "select_standard_mode"
    SET_ABSOLUTE_POSITION = "set_absolute_position"
    SET_RELATIVE_POSITION = "set_relative_position"
    SET_LEFT_MARGIN = "set_left_margin"
    SET_PRINT_AREA_WIDTH = "set_print_area_width"
    SET_ABSOLUTE_VERTICAL_POSITION = "set_absolute_vertical_position"
    SET_PAGE_MODE_AREA = "set_page_mode_area"
    SET_PAGE_MODE_DIRECTION = "set_page_mode_direction"

    # Bit image
    PRINT_BIT_IMAGE = "print_bit_image"
    DEFINE_DOWNLOADED_BIT_IMAGE = "define_downloaded_bit_image"
    PRINT_RASTER_BIT_IMAGE = "print_raster_bit_image"
    PRINT_DOWNLOADED_BIT_IMAGE = "print_downloaded_bit_image"
    SET_SMOOTHING_MODE = "set_smoothing_mode"

    # Device and status
    INITIALIZE_PRINTER = "initialize_printer"
    TRANSMIT_PAPER_SENSOR_STATUS = "transmit_paper_sensor_status"
    TRANSMIT_PERIPHERAL_DEVICE_STATUS = "transmit_peripheral_device_status"
    SET_AUTOMATIC_STATUS_BACK = "set_automatic_status_back"
    SET_PANEL_KEY = "set_panel_key"
    CUT_PAPER = "cut_paper"
    GENERATE_PULSE = "generate_pulse"

    # Barcode
    SET_HRI_POSITION = "set_hri_position"
    SELECT_HRI_FONT = "select_hri_font"
    SET_BARCODE_HEIGHT = "set_barcode_height"
    SET_BARCODE_WIDTH = "set_barcode_width"
    PRINT_BARCODE = "print_barcode"
    PRINT_BARCODE_WITH_LENGTH = "print_barcode_with_length"

    # Control board
    SET_CONTROL_PARAMETERS = "set_control_parameters"
    SET_SLEEP_INTERVAL = "set_sleep_interval"
    SET_BLUETOOTH_PARAMETERS = "set_bluetooth_parameters"


Values = Mapping[str, Any]
"""Validated parameter values keyed by parameter name."""

ParamCheck = Callable[[Values], None]


@dataclass(frozen=True)
class ParamSpec:
    """
    One parameter of a command.

    Attributes:
        name: Keyword the caller passes the value under.
        kind: How the value is validated and encoded.
        minimum: Lower bound of the value (scalars) or of the length (payloads).
        maximum: Upper bound of the value or length. None means unbounded.
        table: Code table (selectors) or bit-position table (flags).
        optional: The value may be None.
        wire: The value is sent as its own byte(s). Parameters that only shape
            another parameter's payload are not.
        check: Rule run once this parameter is valid. It sees the values of
            this parameter and every one before it, so a violation is reported
            at the first parameter that makes the combination illegal.
    """

    name: str
    kind: ParamKind
    minimum: int = 0
    maximum: int | None = ProtocolConstants.MAX_BYTE
    table: Mapping[Any, int] | None = None
    optional: bool = False
    wire: bool = True
    check: ParamCheck | None = field(default=None, compare=False)

    @property
    def is_scalar(self) -> bool:
        return self.kind in SCALAR_KINDS

    @property
    def is_payload(self) -> bool:
        return self.kind in PAYLOAD_KINDS

    @property
    def wire_width(self) -> int:
        """Bytes the parameter occupies on the wire when it is a scalar."""
        if not self.wire or not self.is_scalar:
            return 0
        return 2 if self.kind is ParamKind.UINT16 else 1


Prepare = Callable[[Values], Values]
PayloadLength = Callable[[Values], int]


@dataclass(frozen=True)
class CommandDescriptor:
    """
    Immutable description of one command.

    Attributes:
        kind: Command kind this descriptor encodes.
        opcode: Leading bytes, including any fixed sub-function byte.
        framing: Layout of everything after the opcode.
        params: Parameters in wire order.
        payload_length: Expected raw payload length, computed from the
            dimension parameters (LENGTH_PREFIXED_RAW only).
        prepare: Rewrites validated values before framing, e.g. to prefix a
            barcode with its code set.
        response_bits: Meaning of each bit of the status byte the printer
            returns, for query commands.
        summary: One-line description.
    """

    kind: CommandKind
    opcode: bytes
    framing: Framing
    params: tuple[ParamSpec, ...] = ()
    payload_length: PayloadLength | None = None
    prepare: Prepare | None = None
    response_bits: Mapping[int, str] | None = None
    summary: str = field(default="", compare=False)

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.params)

    @property
    def payload_param(self) -> ParamSpec | None:
        """The raw payload parameter checked by payload_length, if any."""
        for spec in self.params:
            if spec.kind is ParamKind.RAW:
                return spec
        return None

    @property
    def fixed_length(self) -> int | None:
        """
        Encoded length for commands without a variable payload.

        Returns:
            Opcode length plus every wire scalar's width, or None for
            framings whose length depends on the payload.
        """
        if self.framing not in (Framing.NONE, Framing.FIXED, Framing.BIT_FLAGS):
            return None
        return len(self.opcode) + sum(spec.wire_width for spec in self.params)


# =============================================================================
# Parameter constructors
# =============================================================================


def byte(
    name: str,
    minimum: int = 0,
    maximum: int = ProtocolConstants.MAX_BYTE,
    *,
    check: ParamCheck | None = None,
) -> ParamSpec:
    return ParamSpec(name, ParamKind.BYTE, minimum, maximum, check=check)


def uint16(name: str, minimum: int = 0, maximum: int = ProtocolConstants.MAX_UINT16) -> ParamSpec:
    return ParamSpec(name, ParamKind.UINT16, minimum, maximum)


def flags(name: str, table: Mapping[str, int]) -> ParamSpec:
    return ParamSpec(name, ParamKind.FLAGS, table=table)


def selector(
    name: str,
    table: Mapping[Any, int],
    *,
    optional: bool = False,
    wire: bool = True,
    check: ParamCheck | None = None,
) -> ParamSpec:
    return ParamSpec(
        name, ParamKind.SELECTOR, table=table, optional=optional, wire=wire, check=check
    )


def raw(
    name: str,
    minimum: int = 0,
    maximum: int | None = None,
    *,
    check: ParamCheck | None = None,
) -> ParamSpec:
    return ParamSpec(name, ParamKind.RAW, minimum, maximum, check=check)


def string(
    name: str,
    minimum: int = 0,
    maximum: int | None = ProtocolConstants.MAX_BYTE,
    *,
    check: ParamCheck | None = None,
) -> ParamSpec:
    return ParamSpec(name, ParamKind.STRING, minimum, maximum, check=check)


# =============================================================================
# Cross-parameter rules
# =============================================================================


def _check_character_range(values: Values) -> None:
    first, last = values["first"], values["last"]
    if last < first:
        raise RangeError("last", last, first, ProtocolConstants.LAST_USER_CHARACTER_CODE)


def _user_character_length(values: Values) -> int:
    # One s x w glyph per character code from first to last.
    count = values["last"] - values["first"] + 1
    return ProtocolConstants.USER_CHARACTER_HEIGHT_BYTES * values["width"] * count


def _bit_image_length(values: Values) -> int:
    return values["dots"] * BIT_IMAGE_COLUMN_BYTES[values["mode"]]


def _check_downloaded_image_area(values: Values) -> None:
    width, height = values["width"], values["height"]
    if width * height > ProtocolConstants.MAX_DOWNLOADED_IMAGE_AREA:
        raise RangeError(
            "height", height, 1, ProtocolConstants.MAX_DOWNLOADED_IMAGE_AREA // width
        )


def _downloaded_image_length(values: Values) -> int:
    return values["width"] * values["height"] * 8


def _raster_image_length(values: Values) -> int:
    return values["width_bytes"] * values["height"]


def _check_tab_positions(values: Values) -> None:
    positions = values["positions"]
    previous = 0
    for index, position in enumerate(positions):
        if position == ControlByte.NUL:
            raise InvalidPayloadError(
                PayloadFault.EMBEDDED_TERMINATOR,
                "Tab position 0 would terminate the list",
                param="positions",
                position=index,
            )
        if position <= previous:
            raise InvalidPayloadError(
                PayloadFault.ORDERING,
                f"Tab position {position} does not follow {previous}",
                param="positions",
                position=index,
            )
        previous = position


def _check_nul_terminated_barcode(values: Values) -> None:
    data = values["data"]
    if ControlByte.NUL in data:
        raise InvalidPayloadError(
            PayloadFault.EMBEDDED_TERMINATOR,
            param="data",
            position=data.index(ControlByte.NUL),
        )
    check_barcode_data(values["symbology"], data)


def _check_code_set(values: Values) -> None:
    symbology, code_set = values["symbology"], values["code_set"]
    if symbology is BarcodeSymbology.CODE128 and code_set is None:
        raise InvalidPayloadError(
            PayloadFault.CODE_SET, "CODE128 requires a code set", param="code_set"
        )
    if symbology is not BarcodeSymbology.CODE128 and code_set is not None:
        raise InvalidPayloadError(
            PayloadFault.CODE_SET,
            f"{symbology.name} does not take a code set",
            param="code_set",
        )


def _check_length_prefixed_barcode(values: Values) -> None:
    check_barcode_data(values["symbology"], values["data"], code_set=values["code_set"])


def _prefix_code_set(values: Values) -> Values:
    code_set = values["code_set"]
    if code_set is None:
        return values
    prefix = bytes([ProtocolConstants.CODE_SET_SELECTOR, CODE128_CODE_SET_CODES[code_set]])
    return {**values, "data": prefix + values["data"]}


# =============================================================================
# Status response bits
# =============================================================================

PAPER_SENSOR_STATUS_BITS: Final[Mapping[int, str]] = MappingProxyType({
    0: "no printer",
    2: "no paper",
    3: "power error",
    6: "printer temperature over",
})

PERIPHERAL_DEVICE_STATUS_BITS: Final[Mapping[int, str]] = MappingProxyType({
    0: "drawer status",
})


# =============================================================================
# The table
# =============================================================================


def _build_catalog() -> dict[CommandKind, CommandDescriptor]:
    K = CommandKind
    F = Framing
    descriptors = [
        # ----- Print -----
        CommandDescriptor(K.LINE_FEED, bytes([ControlByte.LF]), F.NONE,
                          summary="Print the buffer and feed one line"),
        CommandDescriptor(K.RETURN_TO_STANDARD_MODE, bytes([ControlByte.FF]), F.NONE,
                          summary="Print page mode data and return to standard mode"),
        CommandDescriptor(K.CARRIAGE_RETURN, bytes([ControlByte.CR]), F.NONE,
                          summary="Print and carriage return"),
        CommandDescriptor(K.PRINT_PAGE_MODE_DATA, bytes([ESC, ControlByte.FF]), F.NONE,
                          summary="Print page mode data without leaving page mode"),
        CommandDescriptor(K.HORIZONTAL_TAB, bytes([ControlByte.HT]), F.NONE,
                          summary="Move to the next horizontal tab position"),
        CommandDescriptor(K.PRINT_AND_FEED, bytes([ESC, 0x4A]), F.FIXED, (byte("dots"),),
                          summary="Print and feed paper by dots"),
        CommandDescriptor(K.PRINT_AND_REVERSE_FEED, bytes([ESC, 0x4B]), F.FIXED, (byte("dots"),),
                          summary="Print and feed paper backwards by dots"),
        CommandDescriptor(K.PRINT_AND_FEED_LINES, bytes([ESC, 0x64]), F.FIXED, (byte("lines"),),
                          summary="Print and feed paper by lines"),
        CommandDescriptor(K.PRINT_AND_REVERSE_FEED_LINES, bytes([ESC, 0x65]), F.FIXED,
                          (byte("lines"),),
                          summary="Print and feed paper backwards by lines"),

        # ----- Line spacing -----
        CommandDescriptor(K.DEFAULT_LINE_SPACING, bytes([ESC, 0x32]), F.NONE,
                          summary="Select the default line spacing"),
        CommandDescriptor(K.SET_LINE_SPACING, bytes([ESC, 0x33]), F.FIXED, (byte("dots"),),
                          summary="Set line spacing in dots"),

        # ----- Character -----
        CommandDescriptor(K.CANCEL_PAGE_DATA, bytes([ControlByte.CAN]), F.NONE,
                          summary="Cancel print data in page mode"),
        CommandDescriptor(K.ENABLE_DOUBLE_WIDTH, bytes([ESC, ControlByte.SO]), F.NONE,
                          summary="Turn double width on"),
        CommandDescriptor(K.DISABLE_DOUBLE_WIDTH, bytes([ESC, ControlByte.DC4]), F.NONE,
                          summary="Turn double width off"),
        CommandDescriptor(K.CANCEL_USER_DEFINED_CHARACTERS, bytes([ESC, 0x3F, 0x00]), F.NONE,
                          summary="Fall back to the internal character set"),
        CommandDescriptor(K.SET_RIGHT_SIDE_CHARACTER_SPACING, bytes([ESC, 0x20]), F.FIXED,
                          (byte("dots"),),
                          summary="Set right-side character spacing"),
        CommandDescriptor(K.SET_LEFT_BLANK, bytes([ESC, 0x42]), F.FIXED,
                          (byte("characters", 0, ProtocolConstants.MAX_LEFT_BLANK_CHARACTERS),),
                          summary="Set the left blank in characters"),
        CommandDescriptor(K.SET_PRINT_MODE, bytes([ESC, 0x21]), F.BIT_FLAGS,
                          (flags("mode", PRINT_MODE_BITS),),
                          summary="Select print mode"),
        CommandDescriptor(K.SET_EMPHASIZED_MODE, bytes([ESC, 0x45]), F.BIT_FLAGS,
                          (flags("state", SWITCH_BITS),),
                          summary="Turn emphasized mode on or off"),
        CommandDescriptor(K.SET_DOUBLE_STRIKE_MODE, bytes([ESC, 0x47]), F.BIT_FLAGS,
                          (flags("state", SWITCH_BITS),),
                          summary="Turn double-strike mode on or off"),
        CommandDescriptor(K.SET_UPSIDE_DOWN_MODE, bytes([ESC, 0x7B]), F.BIT_FLAGS,
                          (flags("state", SWITCH_BITS),),
                          summary="Turn upside-down printing on or off"),
        CommandDescriptor(K.SET_REVERSE_MODE, bytes([GS, 0x42]), F.BIT_FLAGS,
                          (flags("state", SWITCH_BITS),),
                          summary="Turn white/black reverse printing on or off"),
        CommandDescriptor(K.SET_USER_DEFINED_CHARACTERS, bytes([ESC, 0x25]), F.BIT_FLAGS,
                          (flags("state", SWITCH_BITS),),
                          summary="Select or cancel the user-defined character set"),
        CommandDescriptor(K.SET_UNDERLINE_MODE, bytes([ESC, 0x2D]), F.FIXED,
                          (selector("mode", UNDERLINE_MODE_CODES),),
                          summary="Set underline thickness"),
        CommandDescriptor(K.SELECT_CHARACTER_FONT, bytes([ESC, 0x4D]), F.FIXED,
                          (selector("font", CHARACTER_FONT_CODES),),
                          summary="Select character font"),
        CommandDescriptor(K.SELECT_INTERNATIONAL_CHARACTER_SET, bytes([ESC, 0x52]), F.FIXED,
                          (selector("charset", INTERNATIONAL_CHARSET_CODES),),
                          summary="Select an international character set"),
        CommandDescriptor(K.SET_ROTATION_MODE, bytes([ESC, 0x56]), F.FIXED,
                          (selector("rotation", ROTATION_MODE_CODES),),
                          summary="Turn 90 degree clockwise rotation on or off"),
        CommandDescriptor(K.SELECT_PRINT_COLOR, bytes([ESC, 0x72]), F.FIXED,
                          (selector("color", PRINT_COLOR_CODES),),
                          summary="Select print color"),
        CommandDescriptor(K.SET_ALIGNMENT, bytes([ESC, 0x61]), F.FIXED,
                          (selector("alignment", ALIGNMENT_CODES),),
                          summary="Select justification"),
        CommandDescriptor(K.SELECT_CODE_TABLE, bytes([ESC, 0x74]), F.FIXED,
                          (selector("code_table", CODE_TABLE_CODES),),
                          summary="Select a character code table"),
        CommandDescriptor(
            K.DEFINE_USER_DEFINED_CHARACTERS,
            bytes([ESC, 0x26, ProtocolConstants.USER_CHARACTER_HEIGHT_BYTES]),
            F.LENGTH_PREFIXED_RAW,
            (
                byte("first", ProtocolConstants.FIRST_USER_CHARACTER_CODE,
                     ProtocolConstants.LAST_USER_CHARACTER_CODE),
                byte("last", ProtocolConstants.FIRST_USER_CHARACTER_CODE,
                     ProtocolConstants.LAST_USER_CHARACTER_CODE,
                     check=_check_character_range),
                byte("width", 0, ProtocolConstants.MAX_USER_CHARACTER_WIDTH),
                raw("data"),
            ),
            payload_length=_user_character_length,
            summary="Define glyphs for a range of user-defined characters",
        ),
        CommandDescriptor(
            K.SET_HORIZONTAL_TAB_POSITIONS,
            bytes([ESC, 0x44]),
            F.NUL_TERMINATED_RAW,
            (
                raw("positions", 0, ProtocolConstants.MAX_TAB_POSITIONS,
                    check=_check_tab_positions),
            ),
            summary="Set horizontal tab positions",
        ),

        # ----- Position and page mode -----
        CommandDescriptor(K.SELECT_PAGE_MODE, bytes([ESC, 0x4C]), F.NONE,
                          summary="Switch to page mode"),
        CommandDescriptor(K.SELECT_STANDARD_MODE, bytes([ESC, 0x53]), F.NONE,
                          summary="Switch to standard mode"),
        CommandDescriptor(K.SET_ABSOLUTE_POSITION, bytes([ESC, 0x24]), F.FIXED,
                          (uint16("position"),),
                          summary="Set absolute horizontal print position"),
        CommandDescriptor(K.SET_RELATIVE_POSITION, bytes([ESC, 0x5C]), F.FIXED,
                          (uint16("offset"),),
                          summary="Set relative horizontal print position"),
        CommandDescriptor(K.SET_LEFT_MARGIN, bytes([GS, 0x4C]), F.FIXED,
                          (uint16("margin"),),
                          summary="Set left margin"),
        CommandDescriptor(K.SET_PRINT_AREA_WIDTH, bytes([GS, 0x57]), F.FIXED,
                          (uint16("width"),),
                          summary="Set printing area width"),
        CommandDescriptor(K.SET_ABSOLUTE_VERTICAL_POSITION, bytes([GS, 0x24]), F.FIXED,
                          (uint16("position"),),
                          summary="Set absolute vertical print position in page mode"),
        CommandDescriptor(
            K.SET_PAGE_MODE_AREA,
            bytes([ESC, 0x57]),
            F.FIXED,
            (uint16("x"), uint16("y"), uint16("width", 1), uint16("height", 1)),
            summary="Set the printing area in page mode",
        ),
        CommandDescriptor(K.SET_PAGE_MODE_DIRECTION, bytes([ESC, 0x54]), F.FIXED,
                          (selector("direction", PRINT_DIRECTION_CODES),),
                          summary="Select print direction in page mode"),

        # ----- Bit image -----
        CommandDescriptor(
            K.PRINT_BIT_IMAGE,
            bytes([ESC, 0x2A]),
            F.LENGTH_PREFIXED_RAW,
            (
                selector("mode", BIT_IMAGE_MODE_CODES),
                uint16("dots", 0, ProtocolConstants.MAX_BIT_IMAGE_DOTS),
                raw("data"),
            ),
            payload_length=_bit_image_length,
            summary="Print a column-format bit image",
        ),
        CommandDescriptor(
            K.DEFINE_DOWNLOADED_BIT_IMAGE,
            bytes([GS, 0x2A]),
            F.LENGTH_PREFIXED_RAW,
            (
                byte("width", 1, ProtocolConstants.MAX_DOWNLOADED_IMAGE_WIDTH),
                byte("height", 1, check=_check_downloaded_image_area),
                raw("data"),
            ),
            payload_length=_downloaded_image_length,
            summary="Store a bit image in printer memory",
        ),
        CommandDescriptor(
            K.PRINT_RASTER_BIT_IMAGE,
            bytes([GS, 0x76, 0x30]),
            F.LENGTH_PREFIXED_RAW,
            (
                selector("scale", IMAGE_SCALE_CODES),
                uint16("width_bytes", 1),
                uint16("height", 1),
                raw("data"),
            ),
            payload_length=_raster_image_length,
            summary="Print a raster bit image",
        ),
        CommandDescriptor(K.PRINT_DOWNLOADED_BIT_IMAGE, bytes([GS, 0x2F]), F.FIXED,
                          (selector("scale", IMAGE_SCALE_CODES),),
                          summary="Print the stored bit image"),
        CommandDescriptor(K.SET_SMOOTHING_MODE, bytes([GS, 0x62]), F.BIT_FLAGS,
                          (flags("state", SWITCH_BITS),),
                          summary="Turn smoothing on or off"),

        # ----- Device and status -----
        CommandDescriptor(K.INITIALIZE_PRINTER, bytes([ESC, 0x40]), F.NONE,
                          summary="Clear the buffer and reset every setting"),
        CommandDescriptor(K.TRANSMIT_PAPER_SENSOR_STATUS, bytes([ESC, 0x76]), F.NONE,
                          response_bits=PAPER_SENSOR_STATUS_BITS,
                          summary="Request the paper sensor status byte"),
        CommandDescriptor(K.TRANSMIT_PERIPHERAL_DEVICE_STATUS, bytes([ESC, 0x75]), F.NONE,
                          response_bits=PERIPHERAL_DEVICE_STATUS_BITS,
                          summary="Request the peripheral device status byte"),
        CommandDescriptor(K.SET_AUTOMATIC_STATUS_BACK, bytes([GS, 0x61]), F.BIT_FLAGS,
                          (flags("settings", AUTOMATIC_STATUS_BACK_BITS),),
                          summary="Enable or disable automatic status back"),
        CommandDescriptor(K.SET_PANEL_KEY, bytes([ESC, 0x63, 0x35]), F.BIT_FLAGS,
                          (flags("state", PANEL_KEY_BITS),),
                          summary="Enable or disable the panel buttons"),
        CommandDescriptor(K.CUT_PAPER, bytes([GS, 0x56]), F.FIXED,
                          (selector("mode", CUT_MODE_CODES),),
                          summary="Cut the paper"),
        CommandDescriptor(
            K.GENERATE_PULSE,
            bytes([ESC, 0x70]),
            F.FIXED,
            (selector("pin", DRAWER_PIN_CODES), byte("on_time"), byte("off_time")),
            summary="Send a pulse to a cash drawer pin",
        ),

        # ----- Barcode -----
        CommandDescriptor(K.SET_HRI_POSITION, bytes([GS, 0x48]), F.FIXED,
                          (selector("position", HRI_POSITION_CODES),),
                          summary="Select where barcode text is printed"),
        CommandDescriptor(K.SELECT_HRI_FONT, bytes([GS, 0x66]), F.FIXED,
                          (selector("font", HRI_FONT_CODES),),
                          summary="Select the font for barcode text"),
        CommandDescriptor(K.SET_BARCODE_HEIGHT, bytes([GS, 0x68]), F.FIXED, (byte("dots", 1),),
                          summary="Set barcode height in dots"),
        CommandDescriptor(K.SET_BARCODE_WIDTH, bytes([GS, 0x77]), F.FIXED,
                          (byte("width", 2, 3),),
                          summary="Set barcode module width"),
        CommandDescriptor(
            K.PRINT_BARCODE,
            bytes([GS, 0x6B]),
            F.NUL_TERMINATED_RAW,
            (
                selector("symbology", BARCODE_NUL_TERMINATED_CODES),
                string("data", 1, None, check=_check_nul_terminated_barcode),
            ),
            summary="Print a NUL-terminated barcode",
        ),
        CommandDescriptor(
            K.PRINT_BARCODE_WITH_LENGTH,
            bytes([GS, 0x6B]),
            F.LENGTH_PREFIXED_STRING,
            (
                selector("symbology", BARCODE_LENGTH_PREFIXED_CODES),
                selector("code_set", CODE128_CODE_SET_CODES, optional=True, wire=False,
                         check=_check_code_set),
                string("data", 1, check=_check_length_prefixed_barcode),
            ),
            prepare=_prefix_code_set,
            summary="Print a length-prefixed barcode",
        ),

        # ----- Control board -----
        CommandDescriptor(
            K.SET_CONTROL_PARAMETERS,
            bytes([ESC, 0x37]),
            F.FIXED,
            (
                byte("max_heating_dots"),
                byte("heating_time", ProtocolConstants.MIN_HEATING_TIME),
                byte("heating_interval"),
            ),
            summary="Set heating dots, heating time and heating interval",
        ),
        CommandDescriptor(K.SET_SLEEP_INTERVAL, bytes([ESC, 0x38]), F.FIXED,
                          (byte("seconds"),),
                          summary="Set idle seconds before the control board sleeps"),
        CommandDescriptor(
            K.SET_BLUETOOTH_PARAMETERS,
            bytes([ESC, 0x30]),
            F.LENGTH_PREFIXED_STRING,
            (
                selector("baud_rate", BAUD_RATE_CODES),
                string("name"),
                string("password"),
            ),
            summary="Set Bluetooth baud rate, name and password",
        ),
    ]
    return {descriptor.kind: descriptor for descriptor in descriptors}


CATALOG: Final[Mapping[CommandKind, CommandDescriptor]] = MappingProxyType(_build_catalog())
"""Every command descriptor keyed by kind."""


class CommandCatalog:
    """
    Read-only view over a set of command descriptors.

    Example:
        >>> catalog = CommandCatalog()
        >>> catalog[CommandKind.INITIALIZE_PRINTER].opcode
        b'\\x1b@'
        >>> CommandKind.LINE_FEED in catalog
        True
    """

    def __init__(self, descriptors: Mapping[CommandKind, CommandDescriptor] | None = None) -> None:
        if descriptors is None:
            self._descriptors = CATALOG
        else:
            self._descriptors = MappingProxyType(dict(descriptors))

    def get(self, kind: CommandKind) -> CommandDescriptor | None:
        """Get a descriptor, or None if the kind is not in this catalog."""
        return self._descriptors.get(kind)

    def __getitem__(self, kind: CommandKind) -> CommandDescriptor:
        return self._descriptors[kind]

    def __contains__(self, kind: object) -> bool:
        return kind in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)

    def __iter__(self) -> Iterator[CommandDescriptor]:
        return iter(self._descriptors.values())

    @property
    def kinds(self) -> tuple[CommandKind, ...]:
        """Every command kind in this catalog."""
        return tuple(self._descriptors)

    def by_framing(self, framing: Framing) -> tuple[CommandDescriptor, ...]:
        """Descriptors that use the given framing."""
        return tuple(d for d in self._descriptors.values() if d.framing is framing)
