"""
One function per printer command.

Each function takes every parameter explicitly (there are no default
arguments) and returns the encoded command as bytes. Invalid input raises an
EncodeError subclass and produces nothing.

Example:
    >>> from thermalprinter import commands
    >>> from thermalprinter.models import Alignment, PrintMode
    >>> receipt = b"".join([
    ...     commands.initialize_printer(),
    ...     commands.set_alignment(Alignment.CENTER),
    ...     commands.set_print_mode(PrintMode(bold=True)),
    ...     b"TOTAL 12.00",
    ...     commands.line_feed(),
    ... ])
"""

from __future__ import annotations

from collections.abc import Sequence

from thermalprinter.models.options import AutomaticStatusBack, PrintMode
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
from thermalprinter.protocol.builder import encode
from thermalprinter.protocol.catalog import CommandKind

RawData = bytes | bytearray | Sequence[int]
"""Raw payloads may be bytes or a sequence of byte values."""

# =============================================================================
# Print
# =============================================================================


def line_feed() -> bytes:
    """LF: print the buffer and feed one line."""
    return encode(CommandKind.LINE_FEED)


def return_to_standard_mode() -> bytes:
    """FF: print page mode data and return to standard mode."""
    return encode(CommandKind.RETURN_TO_STANDARD_MODE)


def carriage_return() -> bytes:
    """CR: print and carriage return."""
    return encode(CommandKind.CARRIAGE_RETURN)


def print_page_mode_data() -> bytes:
    """ESC FF: print page mode data, staying in page mode."""
    return encode(CommandKind.PRINT_PAGE_MODE_DATA)


def horizontal_tab() -> bytes:
    """HT: move to the next tab position."""
    return encode(CommandKind.HORIZONTAL_TAB)


def print_and_feed(dots: int) -> bytes:
    """
    ESC J n: print and feed paper n dots.

    Args:
        dots: Feed amount (0-255).

    Raises:
        RangeError: If dots is outside 0-255.
    """
    return encode(CommandKind.PRINT_AND_FEED, dots=dots)


def print_and_reverse_feed(dots: int) -> bytes:
    """ESC K n: print and feed paper backwards n dots."""
    return encode(CommandKind.PRINT_AND_REVERSE_FEED, dots=dots)


def print_and_feed_lines(lines: int) -> bytes:
    """ESC d n: print and feed n lines."""
    return encode(CommandKind.PRINT_AND_FEED_LINES, lines=lines)


def print_and_reverse_feed_lines(lines: int) -> bytes:
    """ESC e n: print and feed n lines backwards."""
    return encode(CommandKind.PRINT_AND_REVERSE_FEED_LINES, lines=lines)


# =============================================================================
# Line spacing
# =============================================================================


def default_line_spacing() -> bytes:
    """ESC 2: select the default line spacing (30 dots)."""
    return encode(CommandKind.DEFAULT_LINE_SPACING)


def set_line_spacing(dots: int) -> bytes:
    """
    ESC 3 n: set line spacing to n dots.

    Example:
        >>> set_line_spacing(30)
        b'\\x1b3\\x1e'
    """
    return encode(CommandKind.SET_LINE_SPACING, dots=dots)


# =============================================================================
# Character
# =============================================================================


def cancel_page_data() -> bytes:
    """CAN: delete all print data in the current page mode area."""
    return encode(CommandKind.CANCEL_PAGE_DATA)


def enable_double_width() -> bytes:
    return encode(CommandKind.ENABLE_DOUBLE_WIDTH)


def disable_double_width() -> bytes:
    return encode(CommandKind.DISABLE_DOUBLE_WIDTH)


def cancel_user_defined_characters() -> bytes:
    """ESC ? 0: use the internal characters instead of user-defined ones."""
    return encode(CommandKind.CANCEL_USER_DEFINED_CHARACTERS)


def set_right_side_character_spacing(dots: int) -> bytes:
    return encode(CommandKind.SET_RIGHT_SIDE_CHARACTER_SPACING, dots=dots)


def set_left_blank(characters: int) -> bytes:
    """ESC B n: leave n characters blank on the left (0-47)."""
    return encode(CommandKind.SET_LEFT_BLANK, characters=characters)


def set_print_mode(mode: PrintMode) -> bytes:
    """
    ESC ! n: select print mode.

    Example:
        >>> set_print_mode(PrintMode(bold=True, underline=True))
        b'\\x1b!\\x88'
    """
    return encode(CommandKind.SET_PRINT_MODE, mode=mode)


def set_emphasized_mode(enabled: bool) -> bytes:
    return encode(CommandKind.SET_EMPHASIZED_MODE, state={"enabled": enabled})


def set_double_strike_mode(enabled: bool) -> bytes:
    return encode(CommandKind.SET_DOUBLE_STRIKE_MODE, state={"enabled": enabled})


def set_upside_down_mode(enabled: bool) -> bytes:
    return encode(CommandKind.SET_UPSIDE_DOWN_MODE, state={"enabled": enabled})


def set_reverse_mode(enabled: bool) -> bytes:
    """GS B n: white on black printing."""
    return encode(CommandKind.SET_REVERSE_MODE, state={"enabled": enabled})


def set_user_defined_characters(enabled: bool) -> bytes:
    """ESC % n: select (True) or cancel (False) the user-defined character set."""
    return encode(CommandKind.SET_USER_DEFINED_CHARACTERS, state={"enabled": enabled})


def set_underline_mode(mode: UnderlineMode) -> bytes:
    return encode(CommandKind.SET_UNDERLINE_MODE, mode=mode)


def select_character_font(font: CharacterFont) -> bytes:
    return encode(CommandKind.SELECT_CHARACTER_FONT, font=font)


def select_international_character_set(charset: InternationalCharset) -> bytes:
    return encode(CommandKind.SELECT_INTERNATIONAL_CHARACTER_SET, charset=charset)


def set_rotation_mode(rotation: RotationMode) -> bytes:
    return encode(CommandKind.SET_ROTATION_MODE, rotation=rotation)


def select_print_color(color: PrintColor) -> bytes:
    return encode(CommandKind.SELECT_PRINT_COLOR, color=color)


def set_alignment(alignment: Alignment) -> bytes:
    """ESC a n: left, center or right justification."""
    return encode(CommandKind.SET_ALIGNMENT, alignment=alignment)


def select_code_table(code_table: CodeTable) -> bytes:
    return encode(CommandKind.SELECT_CODE_TABLE, code_table=code_table)


def define_user_defined_characters(first: int, last: int, width: int, data: RawData) -> bytes:
    """
    ESC & 3 n m w d...: define glyphs for character codes first..last.

    Every glyph is 24 dots (3 bytes) tall and width dots wide, so data must
    hold exactly 3 * width * (last - first + 1) bytes.

    Args:
        first: First character code (32-126).
        last: Last character code (first-126).
        width: Glyph width in dots (0-12).
        data: Column data for every glyph in order.

    Raises:
        RangeError: If a code or the width is out of range.
        InvalidPayloadError: If data has the wrong length.
    """
    return encode(
        CommandKind.DEFINE_USER_DEFINED_CHARACTERS,
        first=first,
        last=last,
        width=width,
        data=data,
    )


def set_horizontal_tab_positions(positions: RawData) -> bytes:
    """
    ESC D n1...nk NUL: set tab positions.

    Args:
        positions: Up to 32 column positions, strictly ascending, each 1-255.
            An empty list clears every tab position.
    """
    return encode(CommandKind.SET_HORIZONTAL_TAB_POSITIONS, positions=positions)


# =============================================================================
# Position and page mode
# =============================================================================


def select_page_mode() -> bytes:
    return encode(CommandKind.SELECT_PAGE_MODE)


def select_standard_mode() -> bytes:
    return encode(CommandKind.SELECT_STANDARD_MODE)


def set_absolute_position(position: int) -> bytes:
    """ESC $ nL nH: set the print position from the start of the line."""
    return encode(CommandKind.SET_ABSOLUTE_POSITION, position=position)


def set_relative_position(offset: int) -> bytes:
    """
    ESC \\ nL nH: move the print position relative to the current one.

    Backward moves are sent as 65536 minus the distance.
    """
    return encode(CommandKind.SET_RELATIVE_POSITION, offset=offset)


def set_left_margin(margin: int) -> bytes:
    return encode(CommandKind.SET_LEFT_MARGIN, margin=margin)


def set_print_area_width(width: int) -> bytes:
    return encode(CommandKind.SET_PRINT_AREA_WIDTH, width=width)


def set_absolute_vertical_position(position: int) -> bytes:
    return encode(CommandKind.SET_ABSOLUTE_VERTICAL_POSITION, position=position)


def set_page_mode_area(x: int, y: int, width: int, height: int) -> bytes:
    """ESC W: set the page mode printing area. Width and height must be at least 1."""
    return encode(CommandKind.SET_PAGE_MODE_AREA, x=x, y=y, width=width, height=height)


def set_page_mode_direction(direction: PrintDirection) -> bytes:
    return encode(CommandKind.SET_PAGE_MODE_DIRECTION, direction=direction)


# =============================================================================
# Bit image
# =============================================================================


def print_bit_image(mode: BitImageMode, dots: int, data: RawData) -> bytes:
    """
    ESC * m nL nH d...: print a column-format bit image.

    Args:
        mode: Dot density. 24-dot modes need 3 bytes per column.
        dots: Horizontal dots (0-1023).
        data: dots bytes for 8-dot modes, dots * 3 bytes for 24-dot modes.
    """
    return encode(CommandKind.PRINT_BIT_IMAGE, mode=mode, dots=dots, data=data)


def define_downloaded_bit_image(width: int, height: int, data: RawData) -> bytes:
    """
    GS * x y d...: store a bit image in printer memory.

    Args:
        width: Width in units of 8 dots (1-48).
        height: Height in units of 8 dots (1-255). width * height must not
            exceed 1199.
        data: Exactly width * height * 8 bytes.
    """
    return encode(CommandKind.DEFINE_DOWNLOADED_BIT_IMAGE, width=width, height=height, data=data)


def print_raster_bit_image(
    scale: ImageScale,
    width_bytes: int,
    height: int,
    data: RawData,
) -> bytes:
    """GS v 0 m xL xH yL yH d...: print width_bytes * height bytes of raster data."""
    return encode(
        CommandKind.PRINT_RASTER_BIT_IMAGE,
        scale=scale,
        width_bytes=width_bytes,
        height=height,
        data=data,
    )


def print_downloaded_bit_image(scale: ImageScale) -> bytes:
    return encode(CommandKind.PRINT_DOWNLOADED_BIT_IMAGE, scale=scale)


def set_smoothing_mode(enabled: bool) -> bytes:
    return encode(CommandKind.SET_SMOOTHING_MODE, state={"enabled": enabled})


# =============================================================================
# Device and status
# =============================================================================


def initialize_printer() -> bytes:
    """
    ESC @: clear the print buffer and reset every setting.

    Example:
        >>> initialize_printer()
        b'\\x1b@'
    """
    return encode(CommandKind.INITIALIZE_PRINTER)


def transmit_paper_sensor_status() -> bytes:
    """ESC v: the printer answers with one status byte."""
    return encode(CommandKind.TRANSMIT_PAPER_SENSOR_STATUS)


def transmit_peripheral_device_status() -> bytes:
    """ESC u: the printer answers with one status byte."""
    return encode(CommandKind.TRANSMIT_PERIPHERAL_DEVICE_STATUS)


def set_automatic_status_back(settings: AutomaticStatusBack) -> bytes:
    return encode(CommandKind.SET_AUTOMATIC_STATUS_BACK, settings=settings)


def set_panel_key(disabled: bool) -> bytes:
    """ESC c 5 n: disable (True) or enable (False) the panel buttons."""
    return encode(CommandKind.SET_PANEL_KEY, state={"disabled": disabled})


def cut_paper(mode: CutMode) -> bytes:
    return encode(CommandKind.CUT_PAPER, mode=mode)


def generate_pulse(pin: DrawerPin, on_time: int, off_time: int) -> bytes:
    """
    ESC p m t1 t2: pulse a cash drawer pin.

    Args:
        pin: Connector pin.
        on_time: Pulse on time in units of 2 ms (0-255).
        off_time: Pulse off time in units of 2 ms (0-255).
    """
    return encode(CommandKind.GENERATE_PULSE, pin=pin, on_time=on_time, off_time=off_time)


# =============================================================================
# Barcode
# =============================================================================


def set_hri_position(position: HriPosition) -> bytes:
    return encode(CommandKind.SET_HRI_POSITION, position=position)


def select_hri_font(font: HriFont) -> bytes:
    return encode(CommandKind.SELECT_HRI_FONT, font=font)


def set_barcode_height(dots: int) -> bytes:
    """GS h n: barcode height in dots (1-255)."""
    return encode(CommandKind.SET_BARCODE_HEIGHT, dots=dots)


def set_barcode_width(width: int) -> bytes:
    """GS w n: barcode module width (2-3)."""
    return encode(CommandKind.SET_BARCODE_WIDTH, width=width)


def print_barcode(symbology: BarcodeSymbology, data: str | bytes) -> bytes:
    """
    GS k m d1...dk NUL: print a barcode terminated by NUL.

    Args:
        symbology: Barcode system.
        data: Barcode content, checked against the symbology.

    Raises:
        InvalidPayloadError: If data breaks the symbology's rules or
            contains NUL.

    Example:
        >>> print_barcode(BarcodeSymbology.EAN8, "1234567")
        b'\\x1dk\\x031234567\\x00'
    """
    return encode(CommandKind.PRINT_BARCODE, symbology=symbology, data=data)


def print_barcode_with_length(
    symbology: BarcodeSymbology,
    data: str | bytes,
    code_set: Code128CodeSet | None,
) -> bytes:
    """
    GS k m n d1...dn: print a barcode with an explicit length byte.

    CODE128 data is preceded by '{' and the code set letter, and the length
    byte counts those two bytes.

    Args:
        symbology: Barcode system.
        data: Barcode content, checked against the symbology.
        code_set: Required for CODE128, must be None for every other
            symbology.

    Raises:
        InvalidPayloadError: If data breaks the symbology's rules, the code
            set does not fit the symbology, or the result exceeds 255 bytes.

    Example:
        >>> print_barcode_with_length(
        ...     BarcodeSymbology.CODE128, "No.123", Code128CodeSet.CODE_B,
        ... )
        b'\\x1dkI\\x08{BNo.123'
    """
    return encode(
        CommandKind.PRINT_BARCODE_WITH_LENGTH,
        symbology=symbology,
        code_set=code_set,
        data=data,
    )


# =============================================================================
# Control board
# =============================================================================


def set_control_parameters(max_heating_dots: int, heating_time: int, heating_interval: int) -> bytes:
    """
    ESC 7 n1 n2 n3: set heating parameters.

    Args:
        max_heating_dots: Heated dots are 8 * (n1 + 1) (0-255).
        heating_time: Units of 10 us (3-255).
        heating_interval: Units of 10 us (0-255).
    """
    return encode(
        CommandKind.SET_CONTROL_PARAMETERS,
        max_heating_dots=max_heating_dots,
        heating_time=heating_time,
        heating_interval=heating_interval,
    )


def set_sleep_interval(seconds: int) -> bytes:
    """
    ESC 8 n: idle seconds before the control board sleeps (0 never sleeps).

    A sleeping board is woken by sending ProtocolConstants.WAKE_UP_BYTE and
    waiting ProtocolConstants.WAKE_UP_DELAY seconds.
    """
    return encode(CommandKind.SET_SLEEP_INTERVAL, seconds=seconds)


def set_bluetooth_parameters(baud_rate: BaudRate, name: str, password: str) -> bytes:
    """ESC 0 n1 n2 n3 d...: set Bluetooth baud rate, device name and password."""
    return encode(
        CommandKind.SET_BLUETOOTH_PARAMETERS,
        baud_rate=baud_rate,
        name=name,
        password=password,
    )
