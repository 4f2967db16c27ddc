"""Tests for the command catalog."""

import pytest

from thermalprinter.models.options import PRINT_MODE_BITS, SWITCH_BITS
from thermalprinter.protocol.catalog import (
    CATALOG,
    CommandCatalog,
    CommandDescriptor,
    CommandKind,
    Framing,
    ParamKind,
)
from thermalprinter.protocol.constants import ControlByte


class TestCatalogContents:
    """Tests for catalog completeness and invariants."""

    def test_every_kind_described(self):
        """Test each CommandKind has exactly one descriptor."""
        assert set(CATALOG) == set(CommandKind)
        assert len(CATALOG) == len(CommandKind)

    def test_descriptor_kind_matches_key(self):
        """Test descriptors are filed under their own kind."""
        for kind, descriptor in CATALOG.items():
            assert descriptor.kind is kind

    def test_catalog_is_read_only(self):
        """Test the catalog mapping rejects assignment."""
        with pytest.raises(TypeError):
            CATALOG[CommandKind.LINE_FEED] = CATALOG[CommandKind.CARRIAGE_RETURN]

    def test_descriptors_are_frozen(self):
        """Test descriptors cannot be modified."""
        descriptor = CATALOG[CommandKind.INITIALIZE_PRINTER]
        with pytest.raises(AttributeError):
            descriptor.opcode = b"\x00"

    def test_opcodes_start_with_control_byte(self):
        """Test every opcode starts with ESC, GS or a single control character."""
        prefixes = {int(b) for b in ControlByte}
        for descriptor in CATALOG.values():
            assert descriptor.opcode
            assert descriptor.opcode[0] in prefixes

    def test_param_names_unique(self):
        """Test no descriptor repeats a parameter name."""
        for descriptor in CATALOG.values():
            names = descriptor.param_names
            assert len(names) == len(set(names)), descriptor.kind

    def test_framing_matches_params(self):
        """Test payload framings carry a payload and the others do not."""
        for descriptor in CATALOG.values():
            has_payload = any(spec.is_payload for spec in descriptor.params)
            if descriptor.framing in (Framing.NONE, Framing.FIXED, Framing.BIT_FLAGS):
                assert not has_payload, descriptor.kind
            else:
                assert has_payload, descriptor.kind

    def test_none_framing_has_no_params(self):
        """Test opcode-only commands take no parameters."""
        for descriptor in CATALOG.values():
            if descriptor.framing is Framing.NONE:
                assert descriptor.params == ()

    def test_bit_flag_commands_have_one_flag_param(self):
        """Test bit-flag commands carry exactly one FLAGS parameter."""
        for descriptor in CATALOG.values():
            if descriptor.framing is Framing.BIT_FLAGS:
                assert len(descriptor.params) == 1
                assert descriptor.params[0].kind is ParamKind.FLAGS

    def test_length_prefixed_raw_has_length_rule(self):
        """Test every dimensioned payload declares its expected length."""
        for descriptor in CATALOG.values():
            if descriptor.framing is Framing.LENGTH_PREFIXED_RAW:
                assert descriptor.payload_length is not None
                assert descriptor.payload_param is not None

    def test_selectors_have_tables(self):
        """Test selector and flag parameters carry a table."""
        for descriptor in CATALOG.values():
            for spec in descriptor.params:
                if spec.kind in (ParamKind.SELECTOR, ParamKind.FLAGS):
                    assert spec.table, (descriptor.kind, spec.name)

    def test_selector_codes_fit_a_byte(self):
        """Test every selector code is a single byte."""
        for descriptor in CATALOG.values():
            for spec in descriptor.params:
                if spec.kind is ParamKind.SELECTOR:
                    assert all(0 <= code <= 255 for code in spec.table.values())


class TestDescriptors:
    """Tests for individual descriptors."""

    def test_print_mode(self):
        """Test ESC ! uses the print mode bit table."""
        descriptor = CATALOG[CommandKind.SET_PRINT_MODE]
        assert descriptor.opcode == b"\x1b!"
        assert descriptor.framing is Framing.BIT_FLAGS
        assert descriptor.params[0].table is PRINT_MODE_BITS

    def test_switch_commands_share_table(self):
        """Test single-switch commands use bit 0."""
        for kind in (
            CommandKind.SET_EMPHASIZED_MODE,
            CommandKind.SET_DOUBLE_STRIKE_MODE,
            CommandKind.SET_UPSIDE_DOWN_MODE,
            CommandKind.SET_REVERSE_MODE,
            CommandKind.SET_USER_DEFINED_CHARACTERS,
            CommandKind.SET_SMOOTHING_MODE,
        ):
            assert CATALOG[kind].params[0].table is SWITCH_BITS

    def test_status_queries_document_response_bits(self):
        """Test status queries describe their response byte."""
        paper = CATALOG[CommandKind.TRANSMIT_PAPER_SENSOR_STATUS]
        assert paper.response_bits[2] == "no paper"
        peripheral = CATALOG[CommandKind.TRANSMIT_PERIPHERAL_DEVICE_STATUS]
        assert peripheral.response_bits[0] == "drawer status"

    def test_code_set_is_not_on_wire(self):
        """Test the CODE128 code set is folded into the payload, not sent alone."""
        descriptor = CATALOG[CommandKind.PRINT_BARCODE_WITH_LENGTH]
        code_set = next(spec for spec in descriptor.params if spec.name == "code_set")
        assert code_set.optional
        assert not code_set.wire

    @pytest.mark.parametrize(
        "kind,expected",
        [
            (CommandKind.LINE_FEED, 1),
            (CommandKind.INITIALIZE_PRINTER, 2),
            (CommandKind.CANCEL_USER_DEFINED_CHARACTERS, 3),
            (CommandKind.SET_LINE_SPACING, 3),
            (CommandKind.SET_PRINT_MODE, 3),
            (CommandKind.SET_PANEL_KEY, 4),
            (CommandKind.SET_ABSOLUTE_POSITION, 4),
            (CommandKind.GENERATE_PULSE, 5),
            (CommandKind.SET_CONTROL_PARAMETERS, 5),
            (CommandKind.SET_PAGE_MODE_AREA, 10),
        ],
    )
    def test_fixed_length(self, kind, expected):
        """Test statically known lengths."""
        assert CATALOG[kind].fixed_length == expected

    def test_variable_framing_has_no_fixed_length(self):
        """Test payload commands report no fixed length."""
        assert CATALOG[CommandKind.PRINT_BARCODE].fixed_length is None
        assert CATALOG[CommandKind.PRINT_BIT_IMAGE].fixed_length is None


class TestCommandCatalog:
    """Tests for the CommandCatalog wrapper."""

    @pytest.fixture
    def catalog(self):
        """Create a catalog over every descriptor."""
        return CommandCatalog()

    def test_lookup(self, catalog):
        """Test item access and get."""
        assert catalog[CommandKind.LINE_FEED].opcode == b"\n"
        assert catalog.get(CommandKind.LINE_FEED) is CATALOG[CommandKind.LINE_FEED]

    def test_contains_and_len(self, catalog):
        """Test membership and size."""
        assert CommandKind.CUT_PAPER in catalog
        assert len(catalog) == len(CommandKind)

    def test_iterates_descriptors(self, catalog):
        """Test iteration yields descriptors."""
        assert all(isinstance(d, CommandDescriptor) for d in catalog)

    def test_kinds(self, catalog):
        """Test kinds lists every command."""
        assert set(catalog.kinds) == set(CommandKind)

    def test_by_framing(self, catalog):
        """Test filtering by framing."""
        nul_terminated = catalog.by_framing(Framing.NUL_TERMINATED_RAW)
        assert {d.kind for d in nul_terminated} == {
            CommandKind.PRINT_BARCODE,
            CommandKind.SET_HORIZONTAL_TAB_POSITIONS,
        }

    def test_subset_catalog(self):
        """Test a catalog built from a subset."""
        subset = CommandCatalog({CommandKind.LINE_FEED: CATALOG[CommandKind.LINE_FEED]})
        assert len(subset) == 1
        assert subset.get(CommandKind.CUT_PAPER) is None
