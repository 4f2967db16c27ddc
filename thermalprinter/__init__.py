"""
thermalprinter - ESC/POS command encoding for thermal receipt printers.

This library turns printer operations into the exact bytes an ESC/POS-style
thermal printer expects, or rejects the input without producing any bytes.
Sending the bytes is left to a transport.

Example:
    >>> from thermalprinter import commands
    >>> from thermalprinter.models import PrintMode
    >>>
    >>> commands.initialize_printer()
    b'\\x1b@'
    >>> commands.set_print_mode(PrintMode(bold=True, underline=True))
    b'\\x1b!\\x88'
"""

from thermalprinter import commands
from thermalprinter.exceptions import (
    EncodeError,
    InvalidPayloadError,
    PayloadFault,
    RangeError,
    ThermalPrinterError,
    TimeoutError,
    TransportError,
    UnsupportedValueError,
)
from thermalprinter.models import AutomaticStatusBack, PrintMode
from thermalprinter.protocol import CommandBuilder, CommandKind, encode
from thermalprinter.transport import AbstractTransport, MockPrinter

__version__ = "0.1.0"
__all__ = [
    # Commands
    "commands",
    "encode",
    "CommandBuilder",
    "CommandKind",
    # Models
    "PrintMode",
    "AutomaticStatusBack",
    # Exceptions
    "ThermalPrinterError",
    "EncodeError",
    "RangeError",
    "UnsupportedValueError",
    "InvalidPayloadError",
    "PayloadFault",
    "TransportError",
    "TimeoutError",
    # Transport
    "AbstractTransport",
    "MockPrinter",
    # Version
    "__version__",
]
