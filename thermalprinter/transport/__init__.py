"""
Transport contract for sending encoded commands to a printer.

Available transports:
- AbstractTransport: interface every transport implements
- MockPrinter: printer double that answers status queries, for tests
"""

from thermalprinter.transport.abc import AbstractTransport
from thermalprinter.transport.mock import MockPrinter

__all__ = [
    "AbstractTransport",
    "MockPrinter",
]
