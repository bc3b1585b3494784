#!/usr/bin/env python3
# tests/naming/test_descriptor_parser.py
"""
Unit tests for swagkit.naming.parser

Covers every production of the descriptor grammar and the failure modes.
"""

import pytest

from swagkit.constants import MAX_TYPE_DEPTH
from swagkit.errors import ParseError
from swagkit.naming.parser import parse_descriptor, parse_type
from swagkit.naming.types import MapType, NamedType, PointerType, SliceType


class TestNamedTypes:
    """Named types with and without package paths."""

    def test_bare_name(self):
        """A single segment is a name with no package."""
        assert parse_descriptor("G0") == NamedType(name="G0")

    def test_dotted_package(self):
        """The last dotted segment is the name."""
        assert parse_descriptor("swagger.G0") == NamedType(name="G0", package="swagger")

    def test_slashed_and_dotted_package(self):
        """Slashes and dots both flush into the package."""
        tree = parse_descriptor("github.com/miketonks/swag/swagger.G0")
        assert tree == NamedType(name="G0", package="github.com/miketonks/swag/swagger")

    def test_package_has_no_trailing_separator(self):
        """The delimiter before the name is not kept on the package."""
        tree = parse_descriptor("encoding/json.RawMessage")
        assert tree.package == "encoding/json"
        assert tree.name == "RawMessage"

    def test_surrounding_whitespace_ignored(self):
        """Leading and trailing whitespace is not part of the descriptor."""
        assert parse_descriptor("  string \n") == NamedType(name="string")

    def test_name_starting_with_map_is_not_a_map(self):
        """Only the exact 'map[' prefix opens a map."""
        assert parse_descriptor("mapper.Mapping") == NamedType(name="Mapping", package="mapper")


class TestGenericArguments:
    """Generic instantiations."""

    def test_single_argument(self):
        """One argument after the name."""
        tree = parse_descriptor("pkg.G1[string]")
        assert tree == NamedType(name="G1", package="pkg", generic_args=(NamedType(name="string"),))

    def test_argument_order_preserved(self):
        """Arguments keep their order."""
        tree = parse_descriptor("pkg.G2[a.A, b.B]")
        assert [arg.name for arg in tree.generic_args] == ["A", "B"]

    def test_separator_space_is_optional(self):
        """'A,B' and 'A, B' parse the same."""
        assert parse_descriptor("G2[A,B]") == parse_descriptor("G2[A, B]")

    def test_nested_generics(self):
        """Generic arguments may be generic themselves."""
        tree = parse_descriptor("p.G1[p.G1[p.G0]]")
        inner = tree.generic_args[0]
        assert inner.name == "G1"
        assert inner.generic_args == (NamedType(name="G0", package="p"),)

    def test_composite_arguments(self):
        """Arguments may be slices, maps and pointers."""
        tree = parse_descriptor("G2[[]int, map[string]*p.T]")
        assert tree.generic_args[0] == SliceType(element=NamedType(name="int"))
        assert tree.generic_args[1] == MapType(
            key=NamedType(name="string"), value=PointerType(element=NamedType(name="T", package="p"))
        )

    def test_slashed_package_inside_arguments(self):
        """Full package paths are allowed inside argument lists."""
        tree = parse_descriptor("swagger.G1[encoding/json.RawMessage]")
        assert tree.generic_args[0] == NamedType(name="RawMessage", package="encoding/json")


class TestComposites:
    """Slices, arrays, maps and pointers."""

    def test_dynamic_slice(self):
        """'[]T' has no length."""
        assert parse_descriptor("[]G0") == SliceType(element=NamedType(name="G0"))

    def test_fixed_array(self):
        """Digits between the brackets are the array length."""
        assert parse_descriptor("[4]G0") == SliceType(element=NamedType(name="G0"), length=4)

    def test_multi_digit_length(self):
        """The length is read greedily."""
        assert parse_descriptor("[128]uint8").length == 128

    def test_pointer(self):
        """'*T' is a pointer."""
        assert parse_descriptor("*G0") == PointerType(element=NamedType(name="G0"))

    def test_map(self):
        """'map[K]V' has a key and a value."""
        tree = parse_descriptor("map[pkg.G0]encoding/json.RawMessage")
        assert tree == MapType(
            key=NamedType(name="G0", package="pkg"),
            value=NamedType(name="RawMessage", package="encoding/json"),
        )

    def test_deep_nesting(self):
        """Pointer of slice of map of generic."""
        tree = parse_descriptor("*[]map[string]p.G1[int]")
        assert isinstance(tree, PointerType)
        assert isinstance(tree.element, SliceType)
        assert isinstance(tree.element.element, MapType)
        assert tree.element.element.value.generic_args == (NamedType(name="int"),)


class TestRemainder:
    """parse_type returns the unconsumed input."""

    def test_full_descriptor_leaves_nothing(self):
        """A complete descriptor has an empty remainder."""
        _, remainder = parse_type("[]p.G0")
        assert remainder == ""

    def test_comma_ends_type(self):
        """A comma terminates the current type."""
        tree, remainder = parse_type("p.A, p.B")
        assert tree == NamedType(name="A", package="p")
        assert remainder == ", p.B"

    def test_unmatched_bracket_ends_type(self):
        """An unmatched closing bracket terminates the current type."""
        _, remainder = parse_type("int]")
        assert remainder == "]"


class TestParseErrors:
    """Grammar violations are fatal."""

    @pytest.mark.parametrize(
        "descriptor",
        [
            "map[string",
            "[4",
            "[abc]int",
            "pkg.G1[string",
            "pkg.G2[string, int",
            "pkg.G1[]",
            "[]",
            "*",
            "pkg.",
            "",
        ],
    )
    def test_invalid_descriptors(self, descriptor):
        """Unterminated brackets and missing types raise ParseError."""
        with pytest.raises(ParseError):
            parse_descriptor(descriptor)

    def test_trailing_input_rejected(self):
        """Strict parsing refuses leftover input."""
        with pytest.raises(ParseError) as exc_info:
            parse_descriptor("int]")
        assert exc_info.value.remainder == "]"
        assert exc_info.value.position == 3

    def test_error_names_remainder(self):
        """The error carries the unconsumed input."""
        with pytest.raises(ParseError) as exc_info:
            parse_descriptor("map[string")
        assert exc_info.value.remainder == ""
        assert "unterminated map key" in str(exc_info.value)

    def test_unterminated_generic_reports_position(self):
        """The offset points at the failure."""
        with pytest.raises(ParseError) as exc_info:
            parse_descriptor("G1[int x")
        assert exc_info.value.reason == "unterminated generic argument list"
        assert exc_info.value.remainder == " x"


class TestLimits:
    """Nesting depth and array length spelling."""

    def test_deep_nesting_is_a_parse_error(self):
        """Runaway nesting is reported like any other grammar violation."""
        with pytest.raises(ParseError) as exc_info:
            parse_descriptor("*" * 3000 + "pkg.T[")
        assert "nesting deeper than" in exc_info.value.reason

    @pytest.mark.parametrize("prefix", ["[]", "map[string]", "*"])
    def test_deep_composites(self, prefix):
        """Every composite counts towards the depth limit."""
        with pytest.raises(ParseError):
            parse_descriptor(prefix * (MAX_TYPE_DEPTH + 1) + "int")

    def test_deep_generic_arguments(self):
        """Generic argument lists count towards the depth limit."""
        depth = MAX_TYPE_DEPTH + 1
        with pytest.raises(ParseError):
            parse_descriptor("G[" * depth + "int" + "]" * depth)

    def test_nesting_up_to_the_limit(self):
        """Descriptors at the limit still parse."""
        tree = parse_descriptor("*" * (MAX_TYPE_DEPTH - 1) + "int")
        for _ in range(MAX_TYPE_DEPTH - 1):
            assert isinstance(tree, PointerType)
            tree = tree.element
        assert tree == NamedType(name="int")

    def test_leading_zero_length_rejected(self):
        """'[04]T' is not another spelling of '[4]T'."""
        with pytest.raises(ParseError) as exc_info:
            parse_descriptor("[04]T")
        assert exc_info.value.reason == "array length has a leading zero"
        assert exc_info.value.position == 1

    def test_zero_length(self):
        """A single zero is a valid length."""
        assert parse_descriptor("[0]T") == SliceType(element=NamedType(name="T"), length=0)
