"""Tests for MockPrinter."""

import pytest

from thermalprinter import commands
from thermalprinter.exceptions import TimeoutError, TransportError
from thermalprinter.protocol.catalog import CATALOG, CommandCatalog, CommandKind
from thermalprinter.transport.mock import MockPrinter

PAPER = CommandKind.TRANSMIT_PAPER_SENSOR_STATUS
PERIPHERAL = CommandKind.TRANSMIT_PERIPHERAL_DEVICE_STATUS


class TestConnection:
    """Tests for opening and closing."""

    @pytest.fixture
    def printer(self):
        """Create a MockPrinter instance."""
        return MockPrinter()

    @pytest.mark.asyncio
    async def test_open_close(self, printer):
        """Test opening and closing the printer."""
        assert not printer.is_open
        await printer.open()
        assert printer.is_open
        await printer.close()
        assert not printer.is_open

    @pytest.mark.asyncio
    async def test_double_open_raises(self, printer):
        """Test that opening twice raises error."""
        await printer.open()
        with pytest.raises(TransportError):
            await printer.open()

    @pytest.mark.asyncio
    async def test_context_manager(self, printer):
        """Test async with opens and closes."""
        async with printer:
            assert printer.is_open
        assert not printer.is_open

    @pytest.mark.asyncio
    async def test_write_when_closed_raises(self, printer):
        """Test that writing to a closed printer raises."""
        with pytest.raises(TransportError):
            await printer.write(commands.initialize_printer())

    @pytest.mark.asyncio
    async def test_read_when_closed_raises(self, printer):
        """Test that reading from a closed printer raises."""
        with pytest.raises(TransportError):
            await printer.read(1)


class TestStatusQueries:
    """Tests for answering query commands."""

    @pytest.fixture
    def printer(self):
        """Create a MockPrinter instance."""
        return MockPrinter()

    @pytest.mark.asyncio
    async def test_records_writes(self, printer):
        """Test that writes are recorded in order."""
        async with printer:
            await printer.write(commands.initialize_printer())
            await printer.write(commands.line_feed())
        assert printer.received == (b"\x1b@", b"\n")
        assert printer.answered == ()

    @pytest.mark.asyncio
    async def test_default_status_clear(self, printer):
        """Test a fresh printer reports no faults."""
        async with printer:
            await printer.write(commands.transmit_paper_sensor_status())
            assert await printer.read(1) == b"\x00"

    @pytest.mark.asyncio
    async def test_no_paper(self, printer):
        """Test the paper sensor byte packs the response bits."""
        printer.set_status(PAPER, {"no paper": True})
        async with printer:
            await printer.write(commands.transmit_paper_sensor_status())
            status = await printer.read(1)
        assert status == bytes([0b00000100])
        assert printer.decode_status(PAPER, status[0]) == {
            "no printer": False,
            "no paper": True,
            "power error": False,
            "printer temperature over": False,
        }

    @pytest.mark.asyncio
    async def test_each_query_answers_its_own_status(self, printer):
        """Test replies follow query order and use each query's bits."""
        printer.set_status(PAPER, {"power error": True})
        printer.set_status(PERIPHERAL, {"drawer status": True})
        async with printer:
            await printer.write(commands.transmit_peripheral_device_status())
            await printer.write(commands.transmit_paper_sensor_status())
            assert await printer.read(2) == bytes([0b00000001, 0b00001000])
        assert printer.answered == (PERIPHERAL, PAPER)

    @pytest.mark.asyncio
    async def test_non_query_writes_do_not_answer(self, printer):
        """Test ordinary commands leave nothing to read."""
        async with printer:
            await printer.write(commands.initialize_printer())
            with pytest.raises(TimeoutError) as exc_info:
                await printer.read(1)
        assert exc_info.value.timeout_seconds == 5.0

    @pytest.mark.asyncio
    async def test_batched_query_not_answered(self, printer):
        """Test only a write that is exactly one query is answered."""
        async with printer:
            await printer.write(
                commands.initialize_printer() + commands.transmit_paper_sensor_status()
            )
            with pytest.raises(TimeoutError):
                await printer.read(1, timeout=0.5)
        assert printer.answered == ()

    def test_unknown_meaning_rejected(self, printer):
        """Test status flags must be response bits of the query."""
        with pytest.raises(ValueError):
            printer.set_status(PAPER, {"drawer status": True})

    def test_non_query_kind_rejected(self, printer):
        """Test kinds without response bits cannot carry a status."""
        with pytest.raises(KeyError):
            printer.set_status(CommandKind.LINE_FEED, {})

    def test_catalog_limits_queries(self):
        """Test only queries in the given catalog are answered."""
        catalog = CommandCatalog({PAPER: CATALOG[PAPER]})
        printer = MockPrinter(catalog=catalog)
        with pytest.raises(KeyError):
            printer.set_status(PERIPHERAL, {"drawer status": True})
